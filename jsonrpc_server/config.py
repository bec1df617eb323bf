"""Server settings loaded from environment variables."""
import os
from typing import Literal

from pydantic import BaseModel, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerSettings(BaseModel):
    log_level: LogLevel = "INFO"
    # Wrap the handler in BufferEncoder so bytes survive the JSON transport
    buffer_encoding: bool = True
    service_name: str = "jsonrpc-server"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> ServerSettings:
    """Build settings from ``JSONRPC_*`` environment variables.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    return ServerSettings(
        log_level=os.getenv("JSONRPC_LOG_LEVEL", "INFO"),
        buffer_encoding=os.getenv("JSONRPC_BUFFER_ENCODING", "true"),
        service_name=os.getenv("JSONRPC_SERVICE_NAME", "jsonrpc-server"),
    )
