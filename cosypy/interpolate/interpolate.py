"""Environment-variable interpolation over string leaves.

`${NAME}` is replaced with the variable's value and `$${NAME}` yields the
literal text `${NAME}`. A string that is exactly one resolved placeholder is
re-typed from the variable's text (`true`, `42`, `3.5`, `null`, ...);
anything else stays a string. Object keys are never touched.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import TypeAlias

from cosypy.errors import InterpolationError
from cosypy.interpolate.options import InterpolationOptions, MissingVarPolicy
from cosypy.value import ArrayValue, Document, ObjectValue, StringValue, Value, interpret_scalar

logger = logging.getLogger(__name__)

Env: TypeAlias = Mapping[str, str] | Callable[[str], str | None]

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
PLACEHOLDER_RE = re.compile(rf"\$\$\{{({_NAME})\}}|\$\{{({_NAME})\}}")


class _Interpolator:
    def __init__(self, env: Env, options: InterpolationOptions) -> None:
        self._lookup = env.get if isinstance(env, Mapping) else env
        self._options = options
        self._missing: list[tuple[str, str]] = []

    @property
    def missing(self) -> list[tuple[str, str]]:
        return self._missing

    def visit(self, value: Value, path: str) -> Value:
        match value:
            case StringValue():
                return self._visit_string(value, path)
            case ArrayValue(items=items):
                return ArrayValue(
                    [self.visit(item, f"{path}[{index}]") for index, item in enumerate(items)],
                    trivia=value.trivia,
                    span=value.span,
                )
            case ObjectValue(entries=entries):
                return ObjectValue(
                    {key: self.visit(item, f"{path}.{key}" if path else key) for key, item in entries.items()},
                    trivia=value.trivia,
                    span=value.span,
                )
            case _:
                return value

    def _visit_string(self, value: StringValue, path: str) -> Value:
        text = value.value
        if "$" not in text:
            return value

        whole = PLACEHOLDER_RE.fullmatch(text)
        if whole is not None and whole.group(2) is not None:
            resolved = self._lookup(whole.group(2))
            if resolved is not None:
                logger.debug("Substituted ${%s} at %s", whole.group(2), path or "$")
                typed = interpret_scalar(resolved)
                typed.trivia = value.trivia
                typed.span = value.span
                return typed

        def substitute(match: re.Match[str]) -> str:
            escaped = match.group(1)
            if escaped is not None:
                return f"${{{escaped}}}"
            name = match.group(2)
            resolved = self._lookup(name)
            if resolved is not None:
                logger.debug("Substituted ${%s} at %s", name, path or "$")
                return resolved
            return self._on_missing(name, path, match.group(0))

        return StringValue(PLACEHOLDER_RE.sub(substitute, text), trivia=value.trivia, span=value.span)

    def _on_missing(self, name: str, path: str, placeholder: str) -> str:
        match self._options.missing:
            case MissingVarPolicy.ERROR:
                self._missing.append((path, name))
                return placeholder
            case MissingVarPolicy.EMPTY_STRING:
                logger.warning("Environment variable %s not set (at %s); substituting an empty string", name, path or "$")
                return ""
            case _:
                logger.warning("Environment variable %s not set (at %s); leaving placeholder", name, path or "$")
                return placeholder


def interpolate(
    document: Document,
    env: Env,
    options: InterpolationOptions | None = None,
) -> Document:
    """Return a copy of `document` with `${NAME}` placeholders substituted from `env`.

    `env` is a mapping or a `name -> str | None` callable. Under
    `MissingVarPolicy.ERROR` every unresolved variable is collected and one
    `InterpolationError` is raised listing them all.
    """
    interpolator = _Interpolator(env, options or InterpolationOptions())
    root = interpolator.visit(document.root, "")
    if interpolator.missing:
        raise InterpolationError(tuple(interpolator.missing))
    return Document(root, source=document.source, trailing_comments=document.trailing_comments)
