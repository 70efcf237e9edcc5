"""FastAPI application entry point for the posts example service.

Every response body, including errors raised anywhere in the stack, is a JSend
envelope. Startup configures JSON logging and seeds a sample post.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from jsend_posts.logging_config import configure_logging
from jsend_posts.middleware.error_handler import register_error_handlers
from jsend_posts.middleware.request_id import RequestIdMiddleware
from jsend_posts.routers.health import create_health_router
from jsend_posts.routers.posts import create_posts_router
from jsend_posts.settings import PostsSettings
from jsend_posts.store import Post, PostStore

logger = logging.getLogger(__name__)


def create_app(settings: PostsSettings | None = None, store: PostStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or PostsSettings()
    store = store if store is not None else PostStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        if settings.seed_posts and len(store) == 0:
            store.add(Post(title="Blog Post Title", body="Blog post body"))
        logger.info("Posts service started with %d post(s)", len(store))
        yield
        logger.info("Posts service shut down")

    app = FastAPI(
        title="JSend Posts Example",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router(store=store))
    app.include_router(create_posts_router(store=store))

    app.state.settings = settings
    app.state.store = store
    return app


def run() -> None:
    """Serve the application with uvicorn using ``PostsSettings``."""
    settings = PostsSettings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
