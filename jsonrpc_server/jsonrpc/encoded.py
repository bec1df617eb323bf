"""JSON-RPC handler wrapper that runs payloads through a structural encoder."""
import dataclasses
import logging
from typing import Any, Dict

from ..codec.buffer import Encoder
from .errors import DecodeError, InternalError
from .handler import JSONRPCProcessor
from .models import FullResult, JSONRPCResponse, Maybe, RequestId

logger = logging.getLogger(__name__)


class EncodedJSONRPCHandler:
    """Decodes inbound payloads and encodes outbound responses around a handler.

    Wraps any ``JSONRPCProcessor``; ``parse`` and ``build_error_response``
    are forwarded to it unchanged.
    """

    def __init__(self, handler: JSONRPCProcessor, encoder: Encoder):
        self.handler = handler
        self.encoder = encoder

    def parse(self, payload: Any) -> Maybe[Dict[str, Any]]:
        return self.handler.parse(payload)

    def build_error_response(self, request_id: RequestId, error: BaseException) -> JSONRPCResponse:
        return self.handler.build_error_response(request_id, error)

    async def process(self, payload: Any) -> FullResult:
        """Decode ``payload``, process it, and encode the response.

        When decoding fails, the raw payload is parsed only to recover the
        request id for a DECODE_ERROR response. ``original_request`` is
        always the raw payload.
        """
        try:
            decoded = self.encoder.decode(payload)
        except Exception as e:
            raw = self.handler.parse(payload)
            request_id = raw.value["id"] if raw.success else None
            logger.warning(f"Failed to decode JSON-RPC payload {request_id!r}: {e}")
            return FullResult(
                success=False,
                original_request=payload,
                request=Maybe.nothing(),
                response=self.handler.build_error_response(request_id, DecodeError()),
                error=e,
            )

        result = await self.handler.process(decoded)

        try:
            response = self.encoder.encode(result.response)
        except Exception as e:
            request_id = result.response.get("id")
            logger.error(f"Failed to encode JSON-RPC response {request_id!r}: {e}", exc_info=True)
            return dataclasses.replace(
                result,
                success=False,
                original_request=payload,
                response=self.handler.build_error_response(request_id, InternalError()),
                error=e,
            )

        return dataclasses.replace(result, original_request=payload, response=response)
