"""JSend response envelopes: success, fail and error."""

from jsend.codec import (
    Envelope,
    envelope_adapter,
    from_dict,
    from_json,
    to_dict,
    to_json,
)
from jsend.errors import JSendError, MalformedEnvelope
from jsend.responses import (
    Error,
    Fail,
    Status,
    Success,
    error,
    fail,
    success,
)

__all__ = [
    "Envelope",
    "Error",
    "Fail",
    "JSendError",
    "MalformedEnvelope",
    "Status",
    "Success",
    "envelope_adapter",
    "error",
    "fail",
    "from_dict",
    "from_json",
    "success",
    "to_dict",
    "to_json",
]
