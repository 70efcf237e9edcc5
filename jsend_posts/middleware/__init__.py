"""Middleware package: JSend error handlers and request ID."""

from jsend_posts.middleware.error_handler import (
    PostNotFoundError,
    PostsError,
    jsend_response,
    register_error_handlers,
)
from jsend_posts.middleware.request_id import RequestIdMiddleware

__all__ = [
    "PostNotFoundError",
    "PostsError",
    "RequestIdMiddleware",
    "jsend_response",
    "register_error_handlers",
]
