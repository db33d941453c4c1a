"""Conversion between document trees and plain Python data."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from cosypy.lexer import INT64_MAX, INT64_MIN
from cosypy.value.model import (
    ArrayValue,
    BoolValue,
    Document,
    FloatValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
)


def to_python(value: Value | Document) -> Any:
    """Strip a tree down to `None`/`bool`/`int`/`float`/`str`/`list`/`dict`."""
    if isinstance(value, Document):
        value = value.root

    match value:
        case NullValue():
            return None
        case BoolValue(value=inner) | IntegerValue(value=inner) | FloatValue(value=inner) | StringValue(value=inner):
            return inner
        case ArrayValue(items=items):
            return [to_python(item) for item in items]
        case ObjectValue(entries=entries):
            return {key: to_python(item) for key, item in entries.items()}
    raise TypeError(f"Not a document value: {type(value).__name__}")


def from_python(data: Any) -> Value:
    """Build a tree from plain Python data.

    Tuples and lists become arrays and mappings become objects; mapping keys
    must be strings. Integers must fit in 64 bits and floats must be finite.
    """
    if data is None:
        return NullValue()
    # bool before int: bool is an int subclass
    if isinstance(data, bool):
        return BoolValue(data)
    if isinstance(data, int):
        if not INT64_MIN <= data <= INT64_MAX:
            raise ValueError(f"Integer {data} does not fit in 64 bits")
        return IntegerValue(data)
    if isinstance(data, float):
        if not math.isfinite(data):
            raise ValueError(f"Cannot convert non-finite float {data!r}")
        return FloatValue(data)
    if isinstance(data, str):
        return StringValue(data)
    if isinstance(data, Mapping):
        entries: dict[str, Value] = {}
        for key, item in data.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            entries[key] = from_python(item)
        return ObjectValue(entries)
    if isinstance(data, (list, tuple)):
        return ArrayValue([from_python(item) for item in data])
    raise TypeError(f"Cannot convert {type(data).__name__} to a document value")


__all__ = ["from_python", "to_python"]
