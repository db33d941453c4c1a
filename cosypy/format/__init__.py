"""COSY serializer."""

from cosypy.format.serializer import (
    SerializeOptions,
    Serializer,
    format_float,
    format_key,
    format_scalar,
    format_string,
    serialize,
)

__all__ = [
    "SerializeOptions",
    "Serializer",
    "format_float",
    "format_key",
    "format_scalar",
    "format_string",
    "serialize",
]
