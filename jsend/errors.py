"""Error hierarchy for the jsend package.

All jsend-specific errors extend JSendError. Envelope construction and the
accessors never raise; only deserialization of untrusted input does.
"""

from __future__ import annotations


class JSendError(Exception):
    """Base error for all jsend errors."""

    message: str = "JSend error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class MalformedEnvelope(JSendError):
    """Input could not be read as a JSend envelope.

    Raised when ``status`` is missing or unknown, when a field required by the
    variant is missing, or when a field (payload included) has the wrong shape.
    ``details["errors"]`` carries one ``{field, message, type}`` entry per problem.
    """

    message = "Malformed JSend envelope"
