"""Structural payload encoders."""
from .buffer import BufferEncoder, Encoder

__all__ = ["BufferEncoder", "Encoder"]
