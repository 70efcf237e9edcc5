"""Pydantic Settings for the posts example service.

All environment variables use the POSTS_ prefix.
Example: POSTS_PORT=3000, POSTS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PostsSettings(BaseSettings):
    """Posts service configuration validated from environment variables."""

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"

    # Store a sample post at startup
    seed_posts: bool = True

    model_config = {"env_prefix": "POSTS_"}
