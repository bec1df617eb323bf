"""JSON-RPC 2.0 server core with optional binary-safe payload encoding."""

__version__ = "1.0.0"
