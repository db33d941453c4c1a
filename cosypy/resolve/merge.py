"""Deep merge of document trees.

- object + object: key union, recursing where both sides hold an object
- anything else: the override replaces the base outright (arrays included)

The merge is pure: neither input is mutated and the result shares no nodes
with them. Base keys keep their positions; keys only in the override are
appended in override order.
"""

from copy import deepcopy

from cosypy.value import ObjectValue, Value


def deep_merge(base: Value, override: Value) -> Value:
    if not isinstance(base, ObjectValue) or not isinstance(override, ObjectValue):
        return deepcopy(override)

    entries: dict[str, Value] = {key: deepcopy(value) for key, value in base.entries.items()}
    for key, override_value in override.entries.items():
        base_value = base.entries.get(key)
        if base_value is None:
            entries[key] = deepcopy(override_value)
            continue
        entries[key] = deep_merge(base_value, override_value)

    return ObjectValue(
        entries,
        trivia=override.trivia or base.trivia,
        span=override.span or base.span,
    )
