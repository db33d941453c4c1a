"""Centralized COSY source cases used across lexer/parser/serializer tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Any


@dataclass(frozen=True, slots=True)
class CosyCase:
    name: str
    source: str
    expected: Any


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


PARSER_CASES: tuple[CosyCase, ...] = (
    CosyCase(name="json_object", source='{"a": 1, "b": [true, false, null]}', expected={"a": 1, "b": [True, False, None]}),
    CosyCase(
        name="unquoted_keys_newline_separators",
        source=_dedent(
            """
            {
                host: "localhost"
                port: 8080
            }
            """
        ),
        expected={"host": "localhost", "port": 8080},
    ),
    CosyCase(
        name="trailing_commas",
        source=_dedent(
            """
            {
                a: [1, 2, 3,],
                b: {c: 1,},
            }
            """
        ),
        expected={"a": [1, 2, 3], "b": {"c": 1}},
    ),
    CosyCase(
        name="comma_and_newline_mixed",
        source="{\n  a: 1,\n  b: 2\n  c: 3,\n}\n",
        expected={"a": 1, "b": 2, "c": 3},
    ),
    CosyCase(
        name="comments_everywhere",
        source=_dedent(
            """
            // header
            {
                // leading
                name: "app" // trailing
                list: [
                    1 // one
                    2
                    // dangling
                ]
            }
            // footer
            """
        ),
        expected={"name": "app", "list": [1, 2]},
    ),
    CosyCase(name="scalar_root_integer", source="42\n", expected=42),
    CosyCase(name="scalar_root_string", source='"hello"', expected="hello"),
    CosyCase(name="empty_containers", source="{a: {}, b: []}", expected={"a": {}, "b": []}),
    CosyCase(
        name="distinct_number_types",
        source="{i: 1, f: 1.0, e: 1e3, n: -2, g: -2.5E-1}",
        expected={"i": 1, "f": 1.0, "e": 1000.0, "n": -2, "g": -0.25},
    ),
    CosyCase(
        name="string_escapes",
        source=r'{s: "a\"b\\c\nd\te\rf"}',
        expected={"s": 'a"b\\c\nd\te\rf'},
    ),
    CosyCase(
        name="quoted_and_keyword_keys",
        source='{"my key": 1, null: 2, true: 3}',
        expected={"my key": 1, "null": 2, "true": 3},
    ),
    CosyCase(
        name="value_on_next_line_after_colon",
        source="{\n  a:\n    1\n}",
        expected={"a": 1},
    ),
    CosyCase(
        name="nested_arrays_of_objects",
        source=_dedent(
            """
            {
                servers: [
                    {name: "a", port: 1}
                    {name: "b", port: 2}
                ]
            }
            """
        ),
        expected={"servers": [{"name": "a", "port": 1}, {"name": "b", "port": 2}]},
    ),
    CosyCase(name="crlf_line_endings", source="{\r\n  a: 1\r\n  b: 2\r\n}\r\n", expected={"a": 1, "b": 2}),
    CosyCase(name="non_ascii_string", source='{greeting: "héllo wörld ✓"}', expected={"greeting": "héllo wörld ✓"}),
)

INVALID_CASES: tuple[CosyCase, ...] = (
    CosyCase(name="empty_document", source="", expected="PARSER_EXPECTED_VALUE"),
    CosyCase(name="only_comments", source="// nothing here\n", expected="PARSER_EXPECTED_VALUE"),
    CosyCase(name="missing_colon", source="{a 1}", expected="PARSER_EXPECTED_TOKEN"),
    CosyCase(name="missing_separator", source="{a: 1 b: 2}", expected="PARSER_EXPECTED_SEPARATOR"),
    CosyCase(name="missing_array_separator", source="[1 2]", expected="PARSER_EXPECTED_SEPARATOR"),
    CosyCase(name="unclosed_object", source="{a: 1", expected="PARSER_EXPECTED_SEPARATOR"),
    CosyCase(name="unclosed_object_after_newline", source="{a: 1\n", expected="PARSER_EXPECTED_KEY"),
    CosyCase(name="unclosed_array", source="[1,", expected="PARSER_EXPECTED_VALUE"),
    CosyCase(name="number_as_key", source="{1: 2}", expected="PARSER_EXPECTED_KEY"),
    CosyCase(name="double_comma", source="{a: 1,, b: 2}", expected="PARSER_EXPECTED_KEY"),
    CosyCase(name="leading_comma", source="[, 1]", expected="PARSER_EXPECTED_VALUE"),
    CosyCase(name="trailing_content", source="{a: 1}\n{b: 2}", expected="PARSER_TRAILING_CONTENT"),
    CosyCase(name="two_scalars", source="1 2", expected="PARSER_TRAILING_CONTENT"),
    CosyCase(name="stray_closing_brace", source="}", expected="PARSER_EXPECTED_VALUE"),
    CosyCase(name="bare_word_value", source="{a: localhost}", expected="PARSER_EXPECTED_VALUE"),
)

LEXER_ERROR_CASES: tuple[CosyCase, ...] = (
    CosyCase(name="unterminated_string", source='{a: "oops}', expected="LEXER_UNTERMINATED_STRING"),
    CosyCase(name="newline_in_string", source='{a: "line\nbreak"}', expected="LEXER_UNTERMINATED_STRING"),
    CosyCase(name="invalid_escape", source=r'{a: "\q"}', expected="LEXER_INVALID_ESCAPE"),
    CosyCase(name="unicode_escape_unsupported", source=r'{a: "\u0041"}', expected="LEXER_INVALID_ESCAPE"),
    CosyCase(name="dangling_minus", source="{a: -}", expected="LEXER_INVALID_NUMBER"),
    CosyCase(name="exponent_without_digits", source="{a: 1e}", expected="LEXER_INVALID_NUMBER"),
    CosyCase(name="integer_overflow", source="{a: 9223372036854775808}", expected="LEXER_INVALID_NUMBER"),
    CosyCase(name="float_overflow", source="{a: 1e999}", expected="LEXER_INVALID_NUMBER"),
    CosyCase(name="hash_comment", source="# not a comment\n{}", expected="LEXER_UNEXPECTED_CHARACTER"),
    CosyCase(name="single_slash", source="{a: 1 / 2}", expected="LEXER_UNEXPECTED_CHARACTER"),
    CosyCase(name="equals_sign", source="{a = 1}", expected="LEXER_UNEXPECTED_CHARACTER"),
)

ROUND_TRIP_CASES: tuple[CosyCase, ...] = tuple(case for case in PARSER_CASES) + (
    CosyCase(
        name="document_with_every_comment_position",
        source=_dedent(
            """
            // top of file
            {
                // about server
                server: { // opens server
                    host: "localhost", // the host
                    port: 8080
                    // nothing after port
                }
                tags: ["a", "b"] // inline tags
                empty: {
                    // only a comment
                }
            } // after root
            // end of file
            """
        ),
        expected={
            "server": {"host": "localhost", "port": 8080},
            "tags": ["a", "b"],
            "empty": {},
        },
    ),
)


def case_id(case: CosyCase) -> str:
    return case.name
