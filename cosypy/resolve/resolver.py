"""`extends`/`include` resolution.

Every object carrying `extends` and/or `include` is rebuilt as

    deep_merge(deep_merge(Base, Mixin), Local)

where Base is the resolved `extends` target, Mixin the resolved `include`
target and Local the object's own fields with their directives already
resolved. Directive keys never reach the output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from cosypy.errors import (
    CycleError,
    DirectiveParseError,
    InvalidDirectiveError,
    InvalidTargetError,
    LexError,
    LoadFailedError,
    ParseError,
    ResolveDepthError,
)
from cosypy.parser import parse
from cosypy.resolve.merge import deep_merge
from cosypy.resolve.options import ResolveOptions
from cosypy.value import ArrayValue, Document, ObjectValue, StringValue, Value

logger = logging.getLogger(__name__)

LoadFn: TypeAlias = Callable[[str], str]

EXTENDS = "extends"
INCLUDE = "include"
DIRECTIVE_KEYS: frozenset[str] = frozenset({EXTENDS, INCLUDE})


class Resolver:
    """One resolution run.

    Holds the stack of sources currently being resolved (for cycle detection)
    and the parse cache for loaded targets. Both live only as long as the
    resolver; create a new one per call.
    """

    def __init__(self, load_fn: LoadFn, options: ResolveOptions | None = None) -> None:
        self._load_fn = load_fn
        self._options = options or ResolveOptions()
        self._stack: list[str] = []
        self._cache: dict[str, Document] = {}

    @property
    def options(self) -> ResolveOptions:
        return self._options

    def resolve_document(self, document: Document) -> Document:
        self._stack.append(document.source)
        try:
            root = self._resolve_value(document.root, source=document.source, depth=0)
        finally:
            self._stack.pop()
        return Document(root, source=document.source, trailing_comments=document.trailing_comments)

    def _resolve_value(self, value: Value, *, source: str, depth: int) -> Value:
        match value:
            case ObjectValue():
                return self._resolve_object(value, source=source, depth=depth)
            case ArrayValue(items=items):
                return ArrayValue(
                    [self._resolve_value(item, source=source, depth=depth) for item in items],
                    trivia=value.trivia,
                    span=value.span,
                )
            case _:
                return value

    def _resolve_object(self, value: ObjectValue, *, source: str, depth: int) -> Value:
        local = ObjectValue(
            {
                key: self._resolve_value(item, source=source, depth=depth)
                for key, item in value.entries.items()
                if key not in DIRECTIVE_KEYS
            },
            trivia=value.trivia,
            span=value.span,
        )

        extends = value.get(EXTENDS)
        include = value.get(INCLUDE)
        if extends is None and include is None:
            return local

        merged: Value = ObjectValue()
        if extends is not None:
            merged = self._load_target(extends, directive=EXTENDS, parent=source, depth=depth)
        if include is not None:
            mixin = self._load_target(include, directive=INCLUDE, parent=source, depth=depth)
            merged = deep_merge(merged, mixin)
        return deep_merge(merged, local)

    def _load_target(self, target: Value, *, directive: str, parent: str, depth: int) -> Value:
        if not isinstance(target, StringValue):
            raise InvalidDirectiveError(
                f"`{directive}` must be a string, found {target.type_name}",
                path=parent,
                chain=tuple(self._stack),
                directive=directive,
            )

        path = self._options.join_path(parent, target.value)
        chain = (*self._stack, path)

        if path in self._stack:
            raise CycleError(
                f"Cycle detected: {path!r} is already being resolved",
                path=path,
                chain=chain,
                directive=directive,
            )
        if depth + 1 > self._options.max_depth:
            raise ResolveDepthError(
                f"Directive nesting exceeds the maximum depth of {self._options.max_depth}",
                path=path,
                chain=chain,
                directive=directive,
            )

        document = self._load_document(path, chain=chain, directive=directive)
        if not isinstance(document.root, ObjectValue):
            raise InvalidTargetError(
                f"Target of `{directive}` must be an object, found {document.root.type_name}",
                path=path,
                chain=chain,
                directive=directive,
            )

        logger.debug("Resolving %s target %s (depth %d)", directive, path, depth + 1)
        self._stack.append(path)
        try:
            resolved = self._resolve_value(document.root, source=path, depth=depth + 1)
        finally:
            self._stack.pop()
        return resolved

    def _load_document(self, path: str, *, chain: tuple[str, ...], directive: str) -> Document:
        cached = self._cache.get(path)
        if cached is not None:
            logger.debug("Parse cache hit for %s", path)
            return cached

        try:
            text = self._load_fn(path)
        except Exception as exc:
            raise LoadFailedError(
                f"Failed to load {path!r}: {exc}",
                path=path,
                chain=chain,
                directive=directive,
            ) from exc

        try:
            document = parse(text, self._options.parser, source=path)
        except (LexError, ParseError) as exc:
            raise DirectiveParseError(exc, path=path, chain=chain, directive=directive) from exc

        self._cache[path] = document
        return document


def resolve(document: Document, load_fn: LoadFn, options: ResolveOptions | None = None) -> Document:
    """Expand every `extends`/`include` directive in `document`.

    `load_fn` maps a resolved target path to its text and may raise any
    exception on failure. The input document is not modified.
    """
    return Resolver(load_fn, options).resolve_document(document)
