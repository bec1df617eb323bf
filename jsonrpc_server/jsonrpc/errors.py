"""Typed JSON-RPC errors and failure classification."""
from dataclasses import dataclass
from typing import Any, Union

from .models import ERROR_CODES, ErrorName, ResponseError


class RPCError(Exception):
    """Base exception for errors that map onto a fixed JSON-RPC error entry.

    Application handlers raise these (usually one of the subclasses below)
    to pick the error code reported to the caller. The name, code, message
    and data are fixed at construction.
    """

    def __init__(self, name: ErrorName, data: Any = None):
        entry = ERROR_CODES[ErrorName(name)]
        super().__init__(entry.message)
        self._name = ErrorName(name)
        self._code = entry.code
        self._message = entry.message
        self._data = data

    @property
    def name(self) -> ErrorName:
        return self._name

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def data(self) -> Any:
        return self._data

    def is_kind(self, name: ErrorName) -> bool:
        return self._name == name

    @staticmethod
    def matches(error: Any, name: ErrorName) -> bool:
        """Check whether ``error`` is a typed error of the given kind."""
        return isinstance(error, RPCError) and error.is_kind(name)

    def to_error_object(self) -> ResponseError:
        error_obj: ResponseError = {"code": self._code, "message": self._message}
        if self._data is not None:
            error_obj["data"] = self._data
        return error_obj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPCError):
            return NotImplemented
        return self._name == other._name and self._data == other._data

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        if self._data is None:
            return f"{type(self).__name__}({self._name.value})"
        return f"{type(self).__name__}({self._name.value}, data={self._data!r})"


class ParseError(RPCError):
    """Payload is not a valid JSON-RPC request."""

    def __init__(self, data: Any = None):
        super().__init__(ErrorName.PARSE_ERROR, data)


class InvalidRequestError(RPCError):
    """Request is well-formed but not acceptable."""

    def __init__(self, data: Any = None):
        super().__init__(ErrorName.INVALID_REQUEST, data)


class MethodNotFoundError(RPCError):
    """Requested method does not exist."""

    def __init__(self, data: Any = None):
        super().__init__(ErrorName.METHOD_NOT_FOUND, data)


class InvalidParamsError(RPCError):
    """Method parameters are invalid."""

    def __init__(self, data: Any = None):
        super().__init__(ErrorName.INVALID_PARAMS, data)


class InternalError(RPCError):
    """Internal server error."""

    def __init__(self, data: Any = None):
        super().__init__(ErrorName.INTERNAL_ERROR, data)


class DecodeError(RPCError):
    """Payload could not be decoded by the transport codec."""

    def __init__(self, data: Any = None):
        super().__init__(ErrorName.DECODE_ERROR, data)


@dataclass(frozen=True)
class KnownFailure:
    """A failure raised as one of the typed errors."""

    error: RPCError


@dataclass(frozen=True)
class OpaqueFailure:
    """Any other failure, kept as raised."""

    value: BaseException


Failure = Union[KnownFailure, OpaqueFailure]


def classify_failure(error: BaseException) -> Failure:
    if isinstance(error, RPCError):
        return KnownFailure(error)
    return OpaqueFailure(error)
