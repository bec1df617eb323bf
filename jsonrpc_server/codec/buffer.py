"""Structural encoder that carries binary data through JSON as base64 records."""
import base64
from enum import Enum
from typing import Any, Protocol

BUFFER_TYPE = "Buffer"


class Encoder(Protocol):
    """Reversible transform over JSON-compatible value trees."""

    def encode(self, obj: Any) -> Any:
        ...

    def decode(self, obj: Any) -> Any:
        ...


class ValueKind(Enum):
    NULL = "null"
    SEQUENCE = "sequence"
    BUFFER = "buffer"
    RECORD = "record"
    OPAQUE = "opaque"


def _is_buffer_record(obj: dict) -> bool:
    return obj.get("__type") == BUFFER_TYPE and "base64" in obj


def value_kind(obj: Any, decoding: bool = False) -> ValueKind:
    """Classify ``obj`` for one step of the encode/decode walk.

    Only exact ``list``/``tuple``/``dict`` types are walked. Subclasses and
    other instances are opaque and left as they are. When decoding, a dict
    of the form ``{"__type": "Buffer", "base64": ...}`` is a buffer.
    """
    if obj is None:
        return ValueKind.NULL
    obj_type = type(obj)
    if obj_type is list or obj_type is tuple:
        return ValueKind.SEQUENCE
    if decoding:
        if obj_type is dict and _is_buffer_record(obj):
            return ValueKind.BUFFER
    elif obj_type is bytes or obj_type is bytearray or obj_type is memoryview:
        return ValueKind.BUFFER
    if obj_type is dict:
        return ValueKind.RECORD
    return ValueKind.OPAQUE


class BufferEncoder:
    """Encodes ``bytes`` values as ``{"__type": "Buffer", "base64": ...}`` records.

    ``decode(encode(v)) == v`` for any tree of None, lists, tuples, dicts,
    bytes and primitives. Key order is kept. Decoding raises on malformed
    base64; the error is left to the caller.
    """

    def encode(self, obj: Any) -> Any:
        kind = value_kind(obj)
        if kind is ValueKind.SEQUENCE:
            return type(obj)(self.encode(item) for item in obj)
        if kind is ValueKind.BUFFER:
            return {
                "__type": BUFFER_TYPE,
                "base64": base64.b64encode(bytes(obj)).decode("ascii"),
            }
        if kind is ValueKind.RECORD:
            return {key: self.encode(value) for key, value in obj.items()}
        return obj

    def decode(self, obj: Any) -> Any:
        kind = value_kind(obj, decoding=True)
        if kind is ValueKind.SEQUENCE:
            return type(obj)(self.decode(item) for item in obj)
        if kind is ValueKind.BUFFER:
            return base64.b64decode(obj["base64"], validate=True)
        if kind is ValueKind.RECORD:
            return {key: self.decode(value) for key, value in obj.items()}
        return obj
