"""JSON-RPC 2.0 request/response models."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Literal, Optional, TypedDict, TypeVar, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr

JSONRPC_VERSION = "2.0"

RequestId = Union[str, int, float, None]

T = TypeVar("T")


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request model.

    Only used to validate inbound payloads: every field is required and
    strictly typed, so a missing or null ``id`` (notification form) and
    a non-string ``method`` are both rejected.
    """

    model_config = ConfigDict(strict=True)

    jsonrpc: Literal["2.0"]
    method: StrictStr
    params: Optional[Any] = None
    id: Union[StrictStr, StrictInt, StrictFloat]


class JSONRPCError(BaseModel):
    """JSON-RPC 2.0 error model."""

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    data: Optional[Any] = None


class ResponseError(TypedDict, total=False):
    code: int
    message: str
    data: Any


class JSONRPCResponse(TypedDict, total=False):
    """Wire shape of a response. Exactly one of ``result``/``error`` is set."""

    jsonrpc: str
    id: RequestId
    result: Any
    error: ResponseError


class ErrorCode:
    """JSON-RPC 2.0 standard error codes and custom transport codes."""

    # Standard JSON-RPC 2.0 error codes
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Payload codec failure
    DECODE_ERROR = -32800


class ErrorName(str, Enum):
    """Names of the error taxonomy entries."""

    PARSE_ERROR = "PARSE_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    METHOD_NOT_FOUND = "METHOD_NOT_FOUND"
    INVALID_PARAMS = "INVALID_PARAMS"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DECODE_ERROR = "DECODE_ERROR"


ERROR_CODES: Dict[ErrorName, JSONRPCError] = {
    ErrorName.PARSE_ERROR: JSONRPCError(code=ErrorCode.PARSE_ERROR, message="Parse error"),
    ErrorName.INVALID_REQUEST: JSONRPCError(code=ErrorCode.INVALID_REQUEST, message="Invalid request"),
    ErrorName.METHOD_NOT_FOUND: JSONRPCError(code=ErrorCode.METHOD_NOT_FOUND, message="Method not found"),
    ErrorName.INVALID_PARAMS: JSONRPCError(code=ErrorCode.INVALID_PARAMS, message="Invalid params"),
    ErrorName.INTERNAL_ERROR: JSONRPCError(code=ErrorCode.INTERNAL_ERROR, message="Internal error"),
    ErrorName.DECODE_ERROR: JSONRPCError(code=ErrorCode.DECODE_ERROR, message="Decode error"),
}


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """Success/failure wrapper. A failed ``Maybe`` carries no value."""

    success: bool
    value: Optional[T] = None

    @classmethod
    def some(cls, value: T) -> "Maybe[T]":
        return cls(success=True, value=value)

    @classmethod
    def nothing(cls) -> "Maybe[T]":
        return cls(success=False)


@dataclass(frozen=True)
class FullResult:
    """Outcome of processing one payload.

    ``original_request`` is the payload exactly as received. ``error`` holds
    the raised exception when ``success`` is False, for diagnostics only;
    the wire-safe description of the failure is ``response["error"]``.

    Results compare field by field. Typed errors compare by name and data,
    any other exception by identity, so two failures raised as fresh
    untyped exceptions never compare equal even when nothing else differs.
    """

    success: bool
    original_request: Any
    request: Maybe[Dict[str, Any]]
    response: JSONRPCResponse
    error: Optional[BaseException] = None
