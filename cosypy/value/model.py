"""Document tree data model.

Every node is a small dataclass tagged by its `kind`. Two side channels ride
along on each node without taking part in equality:

- `trivia`: comments attached by the parser (`CommentTrivia`)
- `span`: the node's source range, when it came from the parser

so merge, interpolation and validation compare purely on semantic content
while the serializer can still put comments back where they were.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, TypeAlias

from cosypy.text import TextRange


class ValueKind(StrEnum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class CommentTrivia:
    """Comments attached to one node, markers stripped.

    `leading` are own-line comments right before the node, `trailing` is the
    comment on the same line as the node's last token, and `dangling` are
    comments inside a container after its last member.
    """

    leading: tuple[str, ...] = ()
    trailing: str | None = None
    dangling: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.leading and self.trailing is None and not self.dangling


@dataclass(slots=True)
class _Node:
    trivia: CommentTrivia | None = field(default=None, compare=False, repr=False, kw_only=True)
    span: TextRange | None = field(default=None, compare=False, repr=False, kw_only=True)
    kind: ClassVar[ValueKind]

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(slots=True)
class NullValue(_Node):
    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(slots=True)
class BoolValue(_Node):
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN


@dataclass(slots=True)
class IntegerValue(_Node):
    value: int
    kind: ClassVar[ValueKind] = ValueKind.INTEGER


@dataclass(slots=True)
class FloatValue(_Node):
    value: float
    kind: ClassVar[ValueKind] = ValueKind.FLOAT


@dataclass(slots=True)
class StringValue(_Node):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(slots=True)
class ArrayValue(_Node):
    items: list[Value] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dataclass(slots=True, eq=False)
class ObjectValue(_Node):
    """Insertion-ordered string-keyed mapping.

    Assigning an existing key replaces its value where it stands; new keys
    go to the end. Equality also compares key order.
    """

    entries: dict[str, Value] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectValue):
            return NotImplemented
        return list(self.entries.items()) == list(other.entries.items())

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __setitem__(self, key: str, value: Value) -> None:
        self.entries[key] = value

    def __delitem__(self, key: str) -> None:
        del self.entries[key]

    def get(self, key: str) -> Value | None:
        return self.entries.get(key)

    def keys(self) -> list[str]:
        return list(self.entries)

    def items(self) -> list[tuple[str, Value]]:
        return list(self.entries.items())


Value: TypeAlias = NullValue | BoolValue | IntegerValue | FloatValue | StringValue | ArrayValue | ObjectValue
ScalarValue: TypeAlias = NullValue | BoolValue | IntegerValue | FloatValue | StringValue


@dataclass(slots=True)
class Document:
    """One parsed root value plus the identity of the text it came from."""

    root: Value
    source: str = "<memory>"
    trailing_comments: tuple[str, ...] = field(default=(), compare=False)


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
]
