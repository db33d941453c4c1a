"""Document tree model and helpers."""

from cosypy.value.convert import from_python, to_python
from cosypy.value.model import (
    ArrayValue,
    BoolValue,
    CommentTrivia,
    Document,
    FloatValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    ScalarValue,
    StringValue,
    Value,
    ValueKind,
)
from cosypy.value.scalar import interpret_scalar, parse_bool, parse_number

__all__ = [
    "ArrayValue",
    "BoolValue",
    "CommentTrivia",
    "Document",
    "FloatValue",
    "IntegerValue",
    "NullValue",
    "ObjectValue",
    "ScalarValue",
    "StringValue",
    "Value",
    "ValueKind",
    "from_python",
    "interpret_scalar",
    "parse_bool",
    "parse_number",
    "to_python",
]
