"""Serialize document trees back to COSY text.

Multi-line output puts one object member per line and re-emits attached
comments where the parser found them, so parsing the output gives back an
equal tree with equal trivia. Arrays whose items are all plain scalars stay
on one line.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from cosypy.lexer import KEYWORDS
from cosypy.value import (
    ArrayValue,
    BoolValue,
    CommentTrivia,
    Document,
    FloatValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_STRING_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\t": "\\t",
        "\r": "\\r",
    }
)


@dataclass(frozen=True, slots=True)
class SerializeOptions:
    """Output layout knobs."""

    indent_size: int = 4
    use_newlines: bool = True
    trailing_commas: bool = False


class Serializer:
    def __init__(self, options: SerializeOptions | None = None) -> None:
        self._options = options or SerializeOptions()
        self._indent_level = 0

    @property
    def options(self) -> SerializeOptions:
        return self._options

    def serialize(self, target: Document | Value) -> str:
        if isinstance(target, Document):
            root = target.root
            trailing_comments = target.trailing_comments
        else:
            root = target
            trailing_comments = ()

        if not self._options.use_newlines:
            return self._compact(root)

        lines = [f"{self._comment(text)}\n" for text in _trivia(root).leading]
        lines.append(self._value(root))
        trailing = _trivia(root).trailing
        if trailing is not None:
            lines.append(f" {self._comment(trailing)}")
        lines.append("\n")
        lines.extend(f"{self._comment(text)}\n" for text in trailing_comments)
        return "".join(lines)

    # Multi-line layout

    def _value(self, value: Value) -> str:
        match value:
            case ObjectValue():
                return self._object(value)
            case ArrayValue():
                return self._array(value)
            case _:
                return format_scalar(value)

    def _object(self, value: ObjectValue) -> str:
        dangling = _trivia(value).dangling
        if not value.entries and not dangling:
            return "{}"

        members = [(format_key(key), item) for key, item in value.entries.items()]
        return self._block("{", "}", members, dangling)

    def _array(self, value: ArrayValue) -> str:
        dangling = _trivia(value).dangling
        if not value.items and not dangling:
            return "[]"

        if not dangling and all(_is_inline(item) for item in value.items):
            return self._inline_array(value)

        members = [(None, item) for item in value.items]
        return self._block("[", "]", members, dangling)

    def _block(
        self,
        opening: str,
        closing: str,
        members: list[tuple[str | None, Value]],
        dangling: tuple[str, ...],
    ) -> str:
        parts = [f"{opening}\n"]
        self._indent_level += 1
        try:
            inner = self._indent()
            for key, item in members:
                trivia = _trivia(item)
                parts.extend(f"{inner}{self._comment(text)}\n" for text in trivia.leading)
                prefix = f"{key}: " if key is not None else ""
                parts.append(f"{inner}{prefix}{self._value(item)}")
                if self._options.trailing_commas:
                    parts.append(",")
                if trivia.trailing is not None:
                    parts.append(f" {self._comment(trivia.trailing)}")
                parts.append("\n")

            parts.extend(f"{inner}{self._comment(text)}\n" for text in dangling)
        finally:
            self._indent_level -= 1
        parts.append(f"{self._indent()}{closing}")
        return "".join(parts)

    def _inline_array(self, value: ArrayValue) -> str:
        body = ", ".join(self._value(item) for item in value.items)
        if self._options.trailing_commas:
            body = f"{body},"
        return f"[{body}]"

    def _indent(self) -> str:
        return " " * (self._indent_level * self._options.indent_size)

    @staticmethod
    def _comment(text: str) -> str:
        return f"// {text}" if text else "//"

    # Single-line layout, comments dropped

    def _compact(self, value: Value) -> str:
        match value:
            case ObjectValue(entries=entries):
                members = [f"{format_key(key)}: {self._compact(item)}" for key, item in entries.items()]
                return self._compact_block("{", "}", members)
            case ArrayValue(items=items):
                return self._compact_block("[", "]", [self._compact(item) for item in items])
            case _:
                return format_scalar(value)

    def _compact_block(self, opening: str, closing: str, members: list[str]) -> str:
        if not members:
            return f"{opening}{closing}"
        body = ", ".join(members)
        if self._options.trailing_commas:
            body = f"{body},"
        return f"{opening}{body}{closing}"


def serialize(target: Document | Value, options: SerializeOptions | None = None) -> str:
    """Render `target` as COSY text."""
    return Serializer(options).serialize(target)


def format_key(key: str) -> str:
    if _IDENTIFIER_RE.fullmatch(key) and key not in KEYWORDS:
        return key
    return format_string(key)


def format_string(text: str) -> str:
    return f'"{text.translate(_STRING_ESCAPES)}"'


def format_float(number: float) -> str:
    if not math.isfinite(number):
        raise ValueError(f"Cannot serialize non-finite float {number!r}")
    # repr is the shortest text that reads back as the same float
    return repr(number)


def format_scalar(value: Value) -> str:
    match value:
        case NullValue():
            return "null"
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case IntegerValue(value=number):
            return str(number)
        case FloatValue(value=number):
            return format_float(number)
        case StringValue(value=text):
            return format_string(text)
    raise TypeError(f"Not a scalar value: {type(value).__name__}")


def _trivia(value: Value) -> CommentTrivia:
    return value.trivia or _NO_TRIVIA


def _is_inline(value: Value) -> bool:
    return not isinstance(value, (ObjectValue, ArrayValue)) and value.trivia is None


_NO_TRIVIA = CommentTrivia()
