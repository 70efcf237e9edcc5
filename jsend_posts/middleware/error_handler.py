"""Service error hierarchy and FastAPI exception handlers.

Every error leaves the service as a JSend envelope: client mistakes (4xx) as
``fail`` with field-keyed data, server problems (5xx) as ``error`` with a
message.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jsend import Envelope, error, fail, to_dict

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the offending input name.
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class PostsError(Exception):
    """Base error for all posts service errors.

    Keyword arguments become ``details``; for client errors they are the
    ``fail`` payload, keyed by the offending field.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class PostNotFoundError(PostsError):
    """No post with the requested id."""

    status_code = 404
    message = "Post not found"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def jsend_response(envelope: Envelope, status_code: int = 200) -> JSONResponse:
    """Wrap an envelope in a JSON response."""
    return JSONResponse(status_code=status_code, content=to_dict(envelope))


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", 1) is a JSON decode offset, not a field
    if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
        if not isinstance(loc[1], str):
            return str(loc[0])
        loc = loc[1:]
    return ".".join(str(part) for part in loc)


async def _posts_error_handler(_request: Request, exc: PostsError) -> JSONResponse:
    """Handle PostsError subclasses."""
    if exc.status_code < 500:
        return jsend_response(fail(exc.details or {"detail": exc.message}), exc.status_code)
    return jsend_response(error(exc.message, data=exc.details or None), exc.status_code)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError as a 422 fail."""
    data: dict[str, str] = {}
    for err in exc.errors():
        # First problem per field wins
        data.setdefault(_field_name(tuple(err["loc"])), err["msg"])
    return jsend_response(fail(data), 422)


async def _http_error_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors (unknown path, wrong method) raised by Starlette."""
    if exc.status_code < 500:
        envelope = fail({"detail": exc.detail})
    else:
        envelope = error(str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=to_dict(envelope),
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log traceback, return generic 500."""
    logger.error("Unhandled exception: %s", exc, exc_info=exc)
    return jsend_response(error("Internal server error"), 500)


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(PostsError, _posts_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
