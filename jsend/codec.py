"""Serialize and deserialize JSend envelopes.

Serialization goes through the models' own pydantic serializers, so
``to_dict``/``to_json`` and ``model_dump``/``model_dump_json`` agree.
Deserialization dispatches on ``status`` through a discriminated union and
turns every pydantic ``ValidationError`` into ``MalformedEnvelope``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, Any, Union

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from jsend.errors import MalformedEnvelope
from jsend.responses import Error, Fail, Success

logger = logging.getLogger(__name__)

Envelope = Union[Success[Any], Fail[Any], Error[Any]]


@lru_cache(maxsize=128)
def envelope_adapter(payload_type: Any = Any) -> TypeAdapter:
    """Return a TypeAdapter that parses any envelope whose payload is ``payload_type``."""
    return TypeAdapter(
        Annotated[
            Union[Success[payload_type], Fail[payload_type], Error[payload_type]],
            Field(discriminator="status"),
        ]
    )


def to_dict(envelope: Envelope) -> dict[str, Any]:
    """Serialize to a JSON-compatible dict."""
    return envelope.model_dump(mode="json")


def to_json(envelope: Envelope) -> str:
    """Serialize to compact JSON text."""
    return envelope.model_dump_json()


def from_dict(obj: Any, payload_type: Any = Any) -> Envelope:
    """Parse an already-decoded object (usually a dict) into an envelope.

    Raises
    ------
    MalformedEnvelope
        If ``obj`` is not a valid envelope for ``payload_type``.
    """
    try:
        return envelope_adapter(payload_type).validate_python(obj)
    except PydanticValidationError as exc:
        raise _malformed(exc) from exc


def from_json(raw: str | bytes, payload_type: Any = Any) -> Envelope:
    """Parse JSON text into an envelope. Invalid JSON is also malformed."""
    try:
        return envelope_adapter(payload_type).validate_json(raw)
    except PydanticValidationError as exc:
        raise _malformed(exc) from exc


def _malformed(exc: PydanticValidationError) -> MalformedEnvelope:
    errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]) or "<root>",
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    logger.debug("Rejected JSend envelope: %s", summary)
    return MalformedEnvelope(f"Malformed JSend envelope: {summary}", errors=errors)
