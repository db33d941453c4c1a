"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote before the end of the line.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence.",
    hint='Supported escapes are \\\\, \\", \\n, \\t and \\r.',
    severity="error",
    category="lexer",
)

LEXER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_NUMBER",
    message="Invalid number literal.",
    hint="Numbers look like `42`, `-7`, `3.14` or `1e-3`; integers must fit in 64 bits.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    hint="A value is null, true, false, a number, a string, an array or an object.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_KEY",
    message="Expected object key",
    hint="Keys are identifiers like `name` or quoted strings like `\"my key\"`.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_SEPARATOR",
    message="Expected separator",
    hint="Separate members with a comma or a newline.",
    severity="error",
    category="parser",
)

PARSER_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_CONTENT",
    message="Unexpected trailing content after the root value",
    hint="A document holds exactly one root value.",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Maximum nesting depth exceeded",
    hint="Flatten the document or raise ParserOptions.max_depth.",
    severity="error",
    category="parser",
)

SCHEMA_MISSING_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCHEMA_MISSING_FIELD",
    message="Missing required field",
    severity="error",
    category="schema",
)

SCHEMA_TYPE_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCHEMA_TYPE_MISMATCH",
    message="Type mismatch",
    severity="error",
    category="schema",
)

SCHEMA_UNKNOWN_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCHEMA_UNKNOWN_FIELD",
    message="Unknown field",
    severity="error",
    category="schema",
)

SCHEMA_DEPRECATED_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCHEMA_DEPRECATED_FIELD",
    message="Deprecated field",
    severity="warning",
    category="schema",
)
