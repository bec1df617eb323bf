"""JSON-RPC 2.0 request handler."""
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Union

from pydantic import ValidationError

from .errors import KnownFailure, ParseError, RPCError, classify_failure
from .models import (
    ERROR_CODES,
    JSONRPC_VERSION,
    ErrorName,
    FullResult,
    JSONRPCRequest,
    JSONRPCResponse,
    Maybe,
    RequestId,
    ResponseError,
)
from .serializers import ErrorSerializer

logger = logging.getLogger(__name__)

ApplicationHandler = Callable[[str, Any], Union[Any, Awaitable[Any]]]


class JSONRPCProcessor(Protocol):
    """Interface shared by the plain and the encoded handler."""

    async def process(self, payload: Any) -> FullResult:
        ...

    def parse(self, payload: Any) -> Maybe[Dict[str, Any]]:
        ...

    def build_error_response(self, request_id: RequestId, error: BaseException) -> JSONRPCResponse:
        ...


class JSONRPCHandler:
    """Validates JSON-RPC 2.0 payloads and dispatches them to an application handler."""

    def __init__(
        self,
        handler: ApplicationHandler,
        error_serializer: Optional[ErrorSerializer] = None
    ):
        """
        Args:
            handler: Callable taking ``(method, params)``. May be a coroutine
                function; may raise anything. Raise an ``RPCError`` subclass
                to report a specific error code.
            error_serializer: Optional serializer consulted first when
                turning a failure into an error object.
        """
        self.handler = handler
        self.error_serializer = error_serializer

    def parse(self, payload: Any) -> Maybe[Dict[str, Any]]:
        """Check that ``payload`` is a JSON-RPC 2.0 request.

        Returns the payload itself wrapped in ``Maybe.some`` when valid,
        ``Maybe.nothing()`` otherwise. Never raises.
        """
        if not isinstance(payload, dict):
            logger.debug(f"Rejected JSON-RPC payload of type {type(payload).__name__}")
            return Maybe.nothing()
        try:
            JSONRPCRequest.model_validate(payload)
        except ValidationError as e:
            logger.debug(f"Rejected JSON-RPC payload ({e.error_count()} validation errors)")
            return Maybe.nothing()
        return Maybe.some(payload)

    async def process(self, payload: Any) -> FullResult:
        """Handle one JSON-RPC 2.0 payload.

        Args:
            payload: Decoded JSON value as received from the transport

        Returns:
            FullResult with a response carrying either a result or an error.
            Failures are reported through the result, never raised.
        """
        parsed = self.parse(payload)
        try:
            if not parsed.success:
                raise ParseError()

            request = parsed.value
            result = self.handler(request["method"], request.get("params"))
            if inspect.isawaitable(result):
                result = await result

            return FullResult(
                success=True,
                original_request=payload,
                request=parsed,
                response={
                    "jsonrpc": JSONRPC_VERSION,
                    "id": request["id"],
                    "result": result,
                },
            )

        except Exception as e:
            request_id = parsed.value["id"] if parsed.success else None
            if isinstance(e, RPCError):
                logger.warning(f"JSON-RPC request {request_id!r} failed: {e!r}")
            else:
                logger.error(f"Internal error handling JSON-RPC request {request_id!r}: {e}", exc_info=True)
            return FullResult(
                success=False,
                original_request=payload,
                request=parsed,
                response=self.build_error_response(request_id, e),
                error=e,
            )

    def build_error_response(self, request_id: RequestId, error: BaseException) -> JSONRPCResponse:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "error": self.map_failure(error),
        }

    def map_failure(self, error: BaseException) -> ResponseError:
        """Turn a failure into a JSON-RPC error object.

        The error serializer gets the first say. Typed errors keep their
        code, message and data. Anything else becomes a bare internal error
        so exception details never reach the caller.
        """
        serialized = self._serialize(error)
        if serialized.success:
            return serialized.value

        failure = classify_failure(error)
        if isinstance(failure, KnownFailure):
            return failure.error.to_error_object()
        return ERROR_CODES[ErrorName.INTERNAL_ERROR].model_dump(exclude_none=True)

    def _serialize(self, error: BaseException) -> Maybe[ResponseError]:
        if self.error_serializer is None:
            return Maybe.nothing()
        try:
            return self.error_serializer.serialize(error)
        except Exception as e:
            logger.error(f"Error serializer failed on {type(error).__name__}: {e}", exc_info=True)
            return Maybe.nothing()
