"""Error serializers: optional mapping of exceptions to JSON-RPC error objects."""
from typing import Protocol

from .models import ErrorCode, Maybe, ResponseError


class ErrorSerializer(Protocol):
    """Turns an exception into an error object, or declines with ``Maybe.nothing()``."""

    def serialize(self, error: BaseException) -> Maybe[ResponseError]:
        ...


class ValueErrorSerializer:
    """Reports ``ValueError`` raised by a method as invalid params.

    The exception text becomes the error message, so methods should only
    raise ``ValueError`` with messages that are safe to show to callers.
    """

    def serialize(self, error: BaseException) -> Maybe[ResponseError]:
        # UnicodeError subclasses ValueError
        if isinstance(error, ValueError) and not isinstance(error, UnicodeError):
            return Maybe.some({"code": ErrorCode.INVALID_PARAMS, "message": str(error)})
        return Maybe.nothing()
