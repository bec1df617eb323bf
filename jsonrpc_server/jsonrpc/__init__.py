"""JSON-RPC 2.0 request processing."""
from .models import (
    ERROR_CODES,
    JSONRPC_VERSION,
    ErrorCode,
    ErrorName,
    FullResult,
    JSONRPCError,
    JSONRPCRequest,
    JSONRPCResponse,
    Maybe,
)
from .errors import (
    DecodeError,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ParseError,
    RPCError,
)
from .serializers import ErrorSerializer, ValueErrorSerializer
from .handler import JSONRPCHandler, JSONRPCProcessor
from .encoded import EncodedJSONRPCHandler

__all__ = [
    "ERROR_CODES",
    "JSONRPC_VERSION",
    "ErrorCode",
    "ErrorName",
    "FullResult",
    "JSONRPCError",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "Maybe",
    "DecodeError",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "ParseError",
    "RPCError",
    "ErrorSerializer",
    "ValueErrorSerializer",
    "JSONRPCHandler",
    "JSONRPCProcessor",
    "EncodedJSONRPCHandler",
]
