"""Schema validation of document trees."""

from __future__ import annotations

from cosypy.schema.model import ArraySchema, ObjectSchema, PrimitiveSchema, SchemaNode, compile_schema
from cosypy.schema.report import (
    Deprecated,
    MissingField,
    TypeMismatch,
    UnknownField,
    ValidationDiagnostic,
    ValidationReport,
)
from cosypy.schema.suggest import find_best_match
from cosypy.value import ArrayValue, Document, ObjectValue, Value


def validate(
    target: Document | Value,
    schema: SchemaNode | Document | Value,
) -> ValidationReport:
    """Check `target` against `schema` and report every mismatch.

    Document problems never raise; only a malformed raw schema does
    (`SchemaError`, from compiling it). Object fields are reported in document
    order, followed by missing required fields in name order, so the report
    does not depend on the order fields are declared in the schema.
    """
    root = target.root if isinstance(target, Document) else target
    compiled = schema if isinstance(schema, (PrimitiveSchema, ArraySchema, ObjectSchema)) else compile_schema(schema)

    diagnostics: list[ValidationDiagnostic] = []
    _check(root, compiled, "", diagnostics)
    return ValidationReport(tuple(diagnostics))


def _check(value: Value, schema: SchemaNode, path: str, out: list[ValidationDiagnostic]) -> None:
    match schema:
        case PrimitiveSchema():
            if not schema.type.accepts(value):
                out.append(TypeMismatch(path, schema.expected, value.type_name))
        case ArraySchema():
            if not isinstance(value, ArrayValue):
                out.append(TypeMismatch(path, schema.expected, value.type_name))
                return
            for index, item in enumerate(value.items):
                _check(item, schema.element, f"{path}[{index}]", out)
        case ObjectSchema():
            if not isinstance(value, ObjectValue):
                out.append(TypeMismatch(path, schema.expected, value.type_name))
                return
            _check_fields(value, schema, path, out)


def _check_fields(value: ObjectValue, schema: ObjectSchema, path: str, out: list[ValidationDiagnostic]) -> None:
    for key, item in value.entries.items():
        field_path = _join(path, key)
        spec = schema.fields.get(key)
        if spec is None:
            out.append(UnknownField(field_path, find_best_match(key, schema.fields)))
            continue
        if spec.deprecated is not None:
            out.append(Deprecated(field_path, spec.deprecated))
        _check(item, spec.schema, field_path, out)

    for name in schema.required:
        if name not in value:
            out.append(MissingField(_join(path, name)))


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
