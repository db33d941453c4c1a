"""Compiled schema nodes and the compiler from schema documents.

Schema vocabulary (itself a COSY document):

- a type name string: `string`, `integer`, `float`, `number`, `boolean`
  (or `bool`), `null`, `any`
- a one-element array: every element matches that schema
- an object: each field maps to a schema node, or to an extended field
  spec `{type: <schema>, optional: <bool>, deprecated: <string>}`

An object counts as an extended field spec when it has a `type` key and no
keys besides `type`, `optional` and `deprecated`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final, TypeAlias

from cosypy.errors import SchemaError
from cosypy.value import (
    ArrayValue,
    BoolValue,
    Document,
    FloatValue,
    IntegerValue,
    ObjectValue,
    StringValue,
    Value,
    ValueKind,
)


class PrimitiveType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ANY = "any"

    def accepts(self, value: Value) -> bool:
        match self:
            case PrimitiveType.ANY:
                return True
            case PrimitiveType.NUMBER:
                return isinstance(value, (IntegerValue, FloatValue))
            case _:
                return value.kind == _KIND_FOR_TYPE[self]


_KIND_FOR_TYPE: Final[dict[PrimitiveType, ValueKind]] = {
    PrimitiveType.STRING: ValueKind.STRING,
    PrimitiveType.INTEGER: ValueKind.INTEGER,
    PrimitiveType.FLOAT: ValueKind.FLOAT,
    PrimitiveType.BOOLEAN: ValueKind.BOOLEAN,
    PrimitiveType.NULL: ValueKind.NULL,
}

TYPE_NAMES: Final[dict[str, PrimitiveType]] = {
    **{member.value: member for member in PrimitiveType},
    "bool": PrimitiveType.BOOLEAN,
}

FIELD_SPEC_KEYS: Final[frozenset[str]] = frozenset({"type", "optional", "deprecated"})


@dataclass(frozen=True, slots=True)
class PrimitiveSchema:
    type: PrimitiveType

    @property
    def expected(self) -> str:
        return self.type.value


@dataclass(frozen=True, slots=True)
class ArraySchema:
    element: SchemaNode

    @property
    def expected(self) -> str:
        return "array"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    schema: SchemaNode
    optional: bool = False
    deprecated: str | None = None


@dataclass(frozen=True, slots=True)
class ObjectSchema:
    fields: dict[str, FieldSpec] = field(default_factory=dict)

    @property
    def expected(self) -> str:
        return "object"

    @property
    def required(self) -> list[str]:
        return sorted(name for name, spec in self.fields.items() if not spec.optional)


SchemaNode: TypeAlias = PrimitiveSchema | ArraySchema | ObjectSchema


def compile_schema(source: Value | Document) -> SchemaNode:
    """Compile a schema document into schema nodes, raising `SchemaError` if it is malformed."""
    if isinstance(source, Document):
        source = source.root
    return _compile_node(source, "")


def is_field_spec(value: Value) -> bool:
    return isinstance(value, ObjectValue) and "type" in value and set(value.keys()) <= FIELD_SPEC_KEYS


def _compile_node(value: Value, path: str) -> SchemaNode:
    match value:
        case StringValue(value=name):
            primitive = TYPE_NAMES.get(name)
            if primitive is None:
                known = ", ".join(sorted(TYPE_NAMES))
                raise SchemaError(f"Unknown type {name!r} (expected one of {known})", path=path)
            return PrimitiveSchema(primitive)
        case ArrayValue(items=items):
            if len(items) != 1:
                raise SchemaError(
                    f"Array schema must have exactly one element, found {len(items)}",
                    path=path,
                )
            return ArraySchema(_compile_node(items[0], f"{path}[0]"))
        case ObjectValue(entries=entries):
            return ObjectSchema(
                {key: _compile_field(item, _join(path, key)) for key, item in entries.items()}
            )
        case _:
            raise SchemaError(f"Unsupported schema node of type {value.type_name}", path=path)


def _compile_field(value: Value, path: str) -> FieldSpec:
    if not isinstance(value, ObjectValue) or not is_field_spec(value):
        return FieldSpec(_compile_node(value, path))

    optional = value.get("optional")
    if optional is not None and not isinstance(optional, BoolValue):
        raise SchemaError(f"`optional` must be a boolean, found {optional.type_name}", path=path)
    deprecated = value.get("deprecated")
    if deprecated is not None and not isinstance(deprecated, StringValue):
        raise SchemaError(f"`deprecated` must be a string, found {deprecated.type_name}", path=path)

    return FieldSpec(
        _compile_node(value["type"], f"{path}.type"),
        optional=optional.value if optional is not None else False,
        deprecated=deprecated.value if deprecated is not None else None,
    )


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
