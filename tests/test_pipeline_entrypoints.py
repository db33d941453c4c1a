import pytest

from cosypy.errors import InterpolationError, LexError, ParseError
from cosypy.interpolate import InterpolationOptions, MissingVarPolicy
from cosypy.parser import ParserOptions, parse_result
from cosypy.pipeline import run_check, run_format, run_load
from cosypy.schema import MissingField, UnknownField
from cosypy.value import to_python

SCHEMA = '{name: "string", port: "integer", debug: {type: "boolean", optional: true}}'


def test_parse_result_keeps_document_and_no_diagnostics() -> None:
    parsed = parse_result("{a: 1}", source="a.cosy")

    assert parsed.has_errors is False
    assert parsed.diagnostics == []
    assert parsed.source == "a.cosy"
    assert to_python(parsed.document()) == {"a": 1}


def test_parse_result_captures_parse_errors() -> None:
    parsed = parse_result("{a: 1 b: 2}")

    assert parsed.has_errors is True
    assert [diagnostic.code for diagnostic in parsed.diagnostics] == ["PARSER_EXPECTED_SEPARATOR"]
    with pytest.raises(ParseError):
        parsed.document()


def test_parse_result_line_index_is_cached() -> None:
    parsed = parse_result("{\n  a: 1\n}")

    assert parsed.line_index() is parsed.line_index()
    assert parsed.line_index().line_column(4).line == 2


def test_run_load_runs_every_stage() -> None:
    files = {"base.cosy": '{name: "base", port: "${PORT}"}'}

    result = run_load(
        '{extends: "base.cosy", name: "app"}',
        source="app.cosy",
        load_fn=files.__getitem__,
        env={"PORT": "8080"},
        schema=SCHEMA,
    )

    assert to_python(result.document) == {"name": "app", "port": 8080}
    assert result.report is not None
    assert result.report.is_valid
    assert result.document.source == "app.cosy"


def test_run_load_skips_stages_without_inputs() -> None:
    result = run_load('{extends: "base.cosy", port: "${PORT}"}')

    assert to_python(result.document) == {"extends": "base.cosy", "port": "${PORT}"}
    assert result.report is None


def test_run_load_interpolation_policy() -> None:
    with pytest.raises(InterpolationError):
        run_load(
            '{port: "${PORT}"}',
            env={},
            interpolation_options=InterpolationOptions(missing=MissingVarPolicy.ERROR),
        )


def test_run_load_reuses_provided_parse_result() -> None:
    parsed = parse_result("{a: 1}")

    result = run_load("ignored", parse=parsed)

    assert result.parse is parsed
    assert to_python(result.document) == {"a": 1}


def test_run_load_rejects_parse_with_options() -> None:
    parsed = parse_result("{a: 1}")

    with pytest.raises(ValueError, match="Pass either parse or options, not both"):
        run_load("{a: 1}", ParserOptions(), parse=parsed)


def test_run_load_raises_for_malformed_text() -> None:
    with pytest.raises(ParseError):
        run_load("{a: }")


def test_run_format_normalizes_layout() -> None:
    source = "{a:1,b:[1,2]}"

    result = run_format(source)

    assert result.formatted_text == "{\n    a: 1\n    b: [1, 2]\n}\n"
    assert result.changed is True
    assert result.parse.source_text == source


def test_run_format_rejects_overflowing_float() -> None:
    with pytest.raises(LexError) as exc_info:
        run_format("{a: 1e999}")

    assert exc_info.value.code == "LEXER_INVALID_NUMBER"


def test_run_format_leaves_formatted_text_unchanged() -> None:
    source = "{\n    a: 1 // note\n}\n"

    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False


def test_run_check_reports_typo_scenario() -> None:
    result = run_check('{name: "app", prot: 8080}', SCHEMA)

    assert result.is_valid is False
    assert result.report.diagnostics == (UnknownField("prot", suggestion="port"), MissingField("port"))
    assert to_python(result.document) == {"name": "app", "prot": 8080}


def test_run_check_valid_document() -> None:
    result = run_check('{name: "app", port: 1, debug: false}', SCHEMA)

    assert result.is_valid is True
    assert result.report.diagnostics == ()
