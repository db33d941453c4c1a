"""Scalar interpretation of plain text.

Used where text obtained outside the tokenizer (an environment variable, for
instance) has to be read back as a typed value with the same literal rules the
tokenizer applies.
"""

from __future__ import annotations

import math
import re

from cosypy.lexer import INT64_MAX, INT64_MIN
from cosypy.value.model import BoolValue, FloatValue, IntegerValue, NullValue, ScalarValue, StringValue

_INTEGER_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?\d+(?:\.\d+(?:[eE][+-]?\d+)?|[eE][+-]?\d+)")


def parse_bool(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def parse_number(text: str) -> int | float | None:
    """Read `text` as an integer or float literal.

    Integers outside the signed 64-bit range and floats that overflow to
    infinity are not numbers.
    """
    if _INTEGER_RE.fullmatch(text):
        value = int(text)
        if INT64_MIN <= value <= INT64_MAX:
            return value
        return None

    if _FLOAT_RE.fullmatch(text):
        number = float(text)
        if math.isfinite(number):
            return number
        return None

    return None


def interpret_scalar(text: str) -> ScalarValue:
    bool_value = parse_bool(text)
    if bool_value is not None:
        return BoolValue(bool_value)

    if text == "null":
        return NullValue()

    number_value = parse_number(text)
    if isinstance(number_value, int):
        return IntegerValue(number_value)
    if isinstance(number_value, float):
        return FloatValue(number_value)

    return StringValue(text)


__all__ = [
    "interpret_scalar",
    "parse_bool",
    "parse_number",
]
