import math
import textwrap

import pytest

from cosypy.format import SerializeOptions, Serializer, format_float, format_key, format_string, serialize
from cosypy.parser import parse
from cosypy.value import ArrayValue, FloatValue, ObjectValue, Value, from_python
from tests._shared_cases import ROUND_TRIP_CASES, CosyCase, case_id


def _trivia_tree(value: Value) -> object:
    """Comments of a tree, shaped like the tree, for comparing attachments."""
    children: object = None
    if isinstance(value, ObjectValue):
        children = [(key, _trivia_tree(item)) for key, item in value.entries.items()]
    elif isinstance(value, ArrayValue):
        children = [_trivia_tree(item) for item in value.items]
    return (value.trivia, children)


@pytest.mark.parametrize("case", ROUND_TRIP_CASES, ids=case_id)
def test_round_trip_preserves_values_and_comments(case: CosyCase) -> None:
    original = parse(case.source)

    reparsed = parse(serialize(original))

    assert reparsed == original
    assert _trivia_tree(reparsed.root) == _trivia_tree(original.root)
    assert reparsed.trailing_comments == original.trailing_comments


@pytest.mark.parametrize("case", ROUND_TRIP_CASES, ids=case_id)
def test_compact_round_trip_preserves_values(case: CosyCase) -> None:
    original = parse(case.source)

    reparsed = parse(serialize(original, SerializeOptions(use_newlines=False)))

    assert reparsed == original


@pytest.mark.parametrize("case", ROUND_TRIP_CASES, ids=case_id)
def test_serialize_is_idempotent(case: CosyCase) -> None:
    once = serialize(parse(case.source))

    assert serialize(parse(once)) == once


def test_multi_line_layout() -> None:
    document = parse('{name: "app", server: {host: "h", port: 80}, tags: ["a", "b"], empty: {}, list: []}')

    assert serialize(document) == textwrap.dedent(
        """\
        {
            name: "app"
            server: {
                host: "h"
                port: 80
            }
            tags: ["a", "b"]
            empty: {}
            list: []
        }
        """
    )


def test_comments_are_written_back() -> None:
    src = textwrap.dedent(
        """\
        // header
        {
            // lead
            a: 1 // trail
            list: [
                1 // one
            ]
            // dangling
        }
        // footer
        """
    )

    assert serialize(parse(src)) == src


def test_compact_layout_drops_comments() -> None:
    document = parse("// c\n{a: 1, // t\n b: [1, 2]}")

    assert serialize(document, SerializeOptions(use_newlines=False)) == "{a: 1, b: [1, 2]}"


def test_trailing_commas_option() -> None:
    document = parse("{a: 1, b: [1, 2]}")

    assert serialize(document, SerializeOptions(use_newlines=False, trailing_commas=True)) == "{a: 1, b: [1, 2,],}"
    assert serialize(document, SerializeOptions(trailing_commas=True)) == "{\n    a: 1,\n    b: [1, 2,],\n}\n"


def test_indent_size_option() -> None:
    document = parse("{a: {b: 1}}")

    assert serialize(document, SerializeOptions(indent_size=2)) == "{\n  a: {\n    b: 1\n  }\n}\n"


def test_keys_are_quoted_only_when_needed() -> None:
    assert format_key("name") == "name"
    assert format_key("_private1") == "_private1"
    assert format_key("my key") == '"my key"'
    assert format_key("1st") == '"1st"'
    assert format_key("null") == '"null"'
    assert format_key("") == '""'


def test_strings_are_escaped() -> None:
    assert format_string('a"b\\c\nd\te\rf') == r'"a\"b\\c\nd\te\rf"'


def test_floats_keep_a_float_shape() -> None:
    assert format_float(1.0) == "1.0"
    assert format_float(0.1) == "0.1"
    assert format_float(1e16) == "1e+16"
    assert format_float(-2.5e-7) == "-2.5e-07"
    assert parse(format_float(1e16)).root == FloatValue(1e16)


@pytest.mark.parametrize("number", [math.inf, -math.inf, math.nan])
def test_non_finite_floats_are_rejected(number: float) -> None:
    with pytest.raises(ValueError, match="non-finite"):
        serialize(ObjectValue({"x": FloatValue(number)}))


def test_serializer_recovers_indentation_after_a_failure() -> None:
    serializer = Serializer()
    bad = ObjectValue({"outer": ObjectValue({"x": FloatValue(math.inf)})})

    with pytest.raises(ValueError):
        serializer.serialize(bad)

    assert serializer.serialize(parse("{a: {b: 1}}")) == "{\n    a: {\n        b: 1\n    }\n}\n"


def test_serialize_plain_value_and_scalar_root() -> None:
    assert serialize(from_python({"a": [1, {"b": None}]})) == "{\n    a: [\n        1\n        {\n            b: null\n        }\n    ]\n}\n"
    assert serialize(from_python(True)) == "true\n"
