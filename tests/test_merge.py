from cosypy.parser import parse
from cosypy.resolve import deep_merge
from cosypy.value import CommentTrivia, IntegerValue, ObjectValue, StringValue, to_python


def _root(text: str):
    return parse(text).root


def test_scalars_are_replaced() -> None:
    assert deep_merge(IntegerValue(1), IntegerValue(2)) == IntegerValue(2)
    assert deep_merge(IntegerValue(1), StringValue("x")) == StringValue("x")


def test_arrays_are_replaced_wholesale() -> None:
    merged = deep_merge(_root("{a: [1, 2]}"), _root("{a: [3]}"))

    assert to_python(merged) == {"a": [3]}


def test_objects_merge_recursively() -> None:
    base = _root("{server: {host: \"localhost\", port: 80}, debug: false}")
    override = _root("{server: {port: 8080, tls: true}, name: \"app\"}")

    merged = deep_merge(base, override)

    assert to_python(merged) == {
        "server": {"host": "localhost", "port": 8080, "tls": True},
        "debug": False,
        "name": "app",
    }


def test_base_keys_keep_position_and_new_keys_append() -> None:
    merged = deep_merge(_root("{a: 1, b: 2, c: 3}"), _root("{d: 4, b: 20}"))

    assert isinstance(merged, ObjectValue)
    assert merged.keys() == ["a", "b", "c", "d"]
    assert to_python(merged) == {"a": 1, "b": 20, "c": 3, "d": 4}


def test_object_replaces_scalar_and_vice_versa() -> None:
    assert to_python(deep_merge(_root("{a: 1}"), _root("{a: {b: 2}}"))) == {"a": {"b": 2}}
    assert to_python(deep_merge(_root("{a: {b: 2}}"), _root("{a: 1}"))) == {"a": 1}


def test_merge_is_pure() -> None:
    base = _root("{a: {b: 1}}")
    override = _root("{a: {c: 2}}")
    base_before = to_python(base)
    override_before = to_python(override)

    merged = deep_merge(base, override)
    assert isinstance(merged, ObjectValue)
    merged["a"]["b"] = IntegerValue(99)  # type: ignore[index]

    assert to_python(base) == base_before
    assert to_python(override) == override_before


def test_override_trivia_wins_for_replaced_values() -> None:
    base = ObjectValue({"a": IntegerValue(1, trivia=CommentTrivia(leading=("old",)))})
    override = ObjectValue({"a": IntegerValue(2, trivia=CommentTrivia(leading=("new",)))})

    merged = deep_merge(base, override)

    assert isinstance(merged, ObjectValue)
    assert merged["a"].trivia == CommentTrivia(leading=("new",))


def test_base_trivia_kept_when_override_has_none() -> None:
    base = ObjectValue({"a": ObjectValue({"x": IntegerValue(1)}, trivia=CommentTrivia(leading=("section",)))})
    override = ObjectValue({"a": ObjectValue({"y": IntegerValue(2)})})

    merged = deep_merge(base, override)

    assert isinstance(merged, ObjectValue)
    assert merged["a"].trivia == CommentTrivia(leading=("section",))
