"""Resolution options."""

import posixpath
from collections.abc import Callable
from typing import TypeAlias
from dataclasses import dataclass, field

from cosypy.parser import ParserOptions

JoinPath: TypeAlias = Callable[[str, str], str]


def join_relative(parent: str, target: str) -> str:
    """Resolve `target` against the directory of `parent`.

    Absolute targets and targets requested from a synthetic source such as
    `<memory>` are only normalized.
    """
    if posixpath.isabs(target) or is_synthetic_source(parent):
        return posixpath.normpath(target)
    return posixpath.normpath(posixpath.join(posixpath.dirname(parent), target))


def is_synthetic_source(source: str) -> bool:
    return source.startswith("<") and source.endswith(">")


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    """Knobs for `extends`/`include` resolution."""

    max_depth: int = 64
    join_path: JoinPath = join_relative
    parser: ParserOptions = field(default_factory=ParserOptions)

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
