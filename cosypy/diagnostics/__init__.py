"""Diagnostics."""

from cosypy.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_INVALID_NUMBER,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_KEY,
    PARSER_EXPECTED_SEPARATOR,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_TRAILING_CONTENT,
    SCHEMA_DEPRECATED_FIELD,
    SCHEMA_MISSING_FIELD,
    SCHEMA_TYPE_MISMATCH,
    SCHEMA_UNKNOWN_FIELD,
    DiagnosticSpec,
    Severity,
)
from cosypy.diagnostics.diagnostic import Diagnostic
from cosypy.diagnostics.report import has_errors

__all__ = [
    "LEXER_INVALID_ESCAPE",
    "LEXER_INVALID_NUMBER",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_KEY",
    "PARSER_EXPECTED_SEPARATOR",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_VALUE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_TRAILING_CONTENT",
    "SCHEMA_DEPRECATED_FIELD",
    "SCHEMA_MISSING_FIELD",
    "SCHEMA_TYPE_MISMATCH",
    "SCHEMA_UNKNOWN_FIELD",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
