"""Shared test fixtures for the jsend test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from jsend_posts.main import create_app
from jsend_posts.settings import PostsSettings
from jsend_posts.store import PostStore


# ---------------------------------------------------------------------------
# Service fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> PostsSettings:
    """Test settings with an empty store at startup."""
    return PostsSettings(seed_posts=False, log_level="WARNING")


@pytest.fixture
def store() -> PostStore:
    return PostStore()


@pytest.fixture
def client(settings: PostsSettings, store: PostStore) -> TestClient:
    return TestClient(create_app(settings, store), raise_server_exceptions=False)

