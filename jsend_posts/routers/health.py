"""Health endpoint.

- GET /health: service status and number of stored posts
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from jsend import success
from jsend_posts.middleware.error_handler import jsend_response
from jsend_posts.store import PostStore


def create_health_router(*, store: PostStore) -> APIRouter:
    """Factory that creates the health router with injected dependencies."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    def health() -> JSONResponse:
        """Service health check with store size."""
        return jsend_response(success({"status": "healthy", "posts": len(store)}))

    return health_router
