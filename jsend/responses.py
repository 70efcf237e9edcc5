"""JSend response envelope models.

Every response is exactly one of three variants, tagged by ``status``:

    { status: "success", data: T | null }
    { status: "fail",    data: T }
    { status: "error",   message: str, code?: int, data?: T }

All three variants expose ``data``, ``message`` and ``code`` so callers can read
them without checking which variant they hold.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictStr,
    model_serializer,
)

T = TypeVar("T")

# Error codes are signed 64-bit integers; bools and floats are rejected.
ErrorCode = Annotated[int, Field(strict=True, ge=-(2**63), le=2**63 - 1)]


class Status(str, Enum):
    """Discriminant values of the ``status`` key."""

    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


class Success(BaseModel, Generic[T]):
    """The call succeeded. ``data`` is None when the call returns nothing."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    data: T | None = None

    @property
    def message(self) -> None:
        return None

    @property
    def code(self) -> None:
        return None


class Fail(BaseModel, Generic[T]):
    """The request was rejected for a reason the client can correct.

    ``data`` is required. If the failure relates to input fields, its keys
    SHOULD be the names of those fields.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["fail"] = "fail"
    data: T

    @property
    def message(self) -> None:
        return None

    @property
    def code(self) -> None:
        return None


class Error(BaseModel, Generic[T]):
    """The server failed to process the request.

    ``message`` is meant for end users or at least for logs. ``code`` and
    ``data`` are left out of the serialized form entirely when unset.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: StrictStr
    code: ErrorCode | None = None
    data: T | None = None

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        dumped = handler(self)
        for key in ("code", "data"):
            if getattr(self, key) is None:
                dumped.pop(key, None)
        return dumped


def success(data: T | None = None) -> Success[T]:
    """Build a ``success`` envelope."""
    return Success(data=data)


def fail(data: T) -> Fail[T]:
    """Build a ``fail`` envelope. There is no empty fail; pass an empty container instead."""
    return Fail(data=data)


def error(message: str, code: int | None = None, data: T | None = None) -> Error[T]:
    """Build an ``error`` envelope."""
    return Error(message=message, code=code, data=data)
