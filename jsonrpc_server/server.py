"""FastAPI server exposing the JSON-RPC 2.0 handler over HTTP."""
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .codec.buffer import BufferEncoder
from .config import ServerSettings, load_settings
from .jsonrpc.encoded import EncodedJSONRPCHandler
from .jsonrpc.errors import InvalidParamsError, MethodNotFoundError, ParseError
from .jsonrpc.handler import JSONRPCHandler, JSONRPCProcessor
from .jsonrpc.serializers import ValueErrorSerializer

logger = logging.getLogger(__name__)


async def application_handler(method: str, params: Any) -> Any:
    """Demo methods served by the HTTP endpoint."""

    # Method: ping
    if method == "ping":
        return {}

    # Method: echo
    if method == "echo":
        return params

    # Method: reverse (binary payloads need buffer encoding on)
    if method == "reverse":
        try:
            data = params["data"]
        except (KeyError, TypeError):
            raise InvalidParamsError({"required": ["data"]})
        if not isinstance(data, (bytes, bytearray, str)):
            raise InvalidParamsError({"data": "expected bytes or string"})
        return data[::-1]

    raise MethodNotFoundError({"method": method})


def build_processor(settings: ServerSettings) -> JSONRPCProcessor:
    """Create the JSON-RPC processor for the given settings."""
    processor: JSONRPCProcessor = JSONRPCHandler(application_handler, ValueErrorSerializer())
    if settings.buffer_encoding:
        processor = EncodedJSONRPCHandler(processor, BufferEncoder())
    return processor


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)
    processor = build_processor(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle manager for FastAPI app."""
        logger.info(
            f"Starting {settings.service_name} "
            f"(buffer encoding {'on' if settings.buffer_encoding else 'off'})"
        )
        yield
        logger.info(f"Shutting down {settings.service_name}...")

    app = FastAPI(
        title="JSON-RPC Server",
        description="JSON-RPC 2.0 endpoint with optional binary-safe payload encoding",
        version=__version__,
        lifespan=lifespan,
    )

    @app.post("/")
    @app.post("/rpc")
    @app.post("/jsonrpc")
    async def jsonrpc_endpoint(request: Request):
        """JSON-RPC 2.0 endpoint. Always answers 200 with a JSON-RPC response."""
        try:
            payload = await request.json()
        except ValueError as e:
            logger.warning(f"Request body is not valid JSON: {e}")
            return JSONResponse(processor.build_error_response(None, ParseError()))

        result = await processor.process(payload)
        return result.response

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": __version__,
            "buffer_encoding": settings.buffer_encoding,
        }

    return app


app = create_app()
