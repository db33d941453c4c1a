"""Schema compilation and validation."""

from cosypy.schema.model import (
    FIELD_SPEC_KEYS,
    TYPE_NAMES,
    ArraySchema,
    FieldSpec,
    ObjectSchema,
    PrimitiveSchema,
    PrimitiveType,
    SchemaNode,
    compile_schema,
    is_field_spec,
)
from cosypy.schema.report import (
    Deprecated,
    MissingField,
    TypeMismatch,
    UnknownField,
    ValidationDiagnostic,
    ValidationReport,
)
from cosypy.schema.suggest import DEFAULT_MAX_DISTANCE, find_best_match, levenshtein
from cosypy.schema.validate import validate

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "FIELD_SPEC_KEYS",
    "TYPE_NAMES",
    "ArraySchema",
    "Deprecated",
    "FieldSpec",
    "MissingField",
    "ObjectSchema",
    "PrimitiveSchema",
    "PrimitiveType",
    "SchemaNode",
    "TypeMismatch",
    "UnknownField",
    "ValidationDiagnostic",
    "ValidationReport",
    "compile_schema",
    "find_best_match",
    "is_field_spec",
    "levenshtein",
    "validate",
]
