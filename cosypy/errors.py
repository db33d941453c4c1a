"""Exception hierarchy for cosypy.

Every failure that aborts a stage derives from `CosyError`, so callers can
catch the whole family with one clause or pick the stage they care about:

- LexError: malformed token (unterminated string, bad escape, bad number)
- ParseError: malformed structure (missing `:`, unbalanced bracket,
  trailing content, excessive nesting)
- ResolveError: `extends`/`include` failures, with the directive chain
  that led to them
- InterpolationError: unresolved variables under `MissingVarPolicy.ERROR`
- SchemaError: the schema document itself is malformed

Schema validation problems of a *document* are never raised; they are
returned as a `ValidationReport`.

Example:
    ```python
    from cosypy.errors import CosyError, ResolveError

    try:
        document = run_load(text, source="app.cosy", load_fn=read_file).document
    except ResolveError as exc:
        print(" -> ".join(exc.chain), exc)
    except CosyError as exc:
        print(exc)
    ```
"""

from __future__ import annotations

from cosypy.diagnostics import Diagnostic
from cosypy.text import LineIndex

__all__ = [
    "CosyError",
    "CycleError",
    "DirectiveParseError",
    "InterpolationError",
    "InvalidDirectiveError",
    "InvalidTargetError",
    "LexError",
    "LoadFailedError",
    "ParseError",
    "ResolveDepthError",
    "ResolveError",
    "SchemaError",
    "SourceError",
]


class CosyError(Exception):
    """Base exception for all cosypy errors."""


class SourceError(CosyError):
    """An error located in source text.

    Wraps the `Diagnostic` that describes it and resolves the diagnostic's
    range into a 1-based line/column pair.
    """

    def __init__(self, diagnostic: Diagnostic, *, text: str, source: str = "<memory>") -> None:
        position = LineIndex(text).line_column(diagnostic.range.start)
        self.diagnostic = diagnostic
        self.source = source
        self.line = position.line
        self.column = position.column
        super().__init__(f"{source}:{self.line}:{self.column}: {diagnostic.message}")

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def hint(self) -> str | None:
        return self.diagnostic.hint


class LexError(SourceError):
    """Raised when the tokenizer meets a malformed token."""


class ParseError(SourceError):
    """Raised when the token stream does not form a valid document."""


class ResolveError(CosyError):
    """Raised when an `extends`/`include` chain cannot be resolved.

    Attributes:
        path: The directive target that failed.
        chain: Source identities from the root document down to `path`.
        directive: `"extends"` or `"include"`.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        chain: tuple[str, ...] = (),
        directive: str | None = None,
    ) -> None:
        self.path = path
        self.chain = chain
        self.directive = directive
        trail = " -> ".join(chain) if chain else path
        super().__init__(f"{message} (via {trail})")

    @property
    def cause(self) -> BaseException | None:
        """The exception this error was raised from, if any."""
        return self.__cause__


class LoadFailedError(ResolveError):
    """The caller-supplied loader could not produce text for a path."""


class InvalidDirectiveError(ResolveError):
    """An `extends`/`include` value is not a string."""


class CycleError(ResolveError):
    """A directive target is already being resolved further up the chain."""


class DirectiveParseError(ResolveError):
    """A directive target failed to tokenize or parse.

    The original `LexError`/`ParseError` is available as `error` (and as
    `__cause__`).
    """

    def __init__(
        self,
        error: SourceError,
        *,
        path: str,
        chain: tuple[str, ...] = (),
        directive: str | None = None,
    ) -> None:
        self.error = error
        super().__init__(str(error), path=path, chain=chain, directive=directive)


class InvalidTargetError(ResolveError):
    """A directive target parsed, but its root is not an object."""


class ResolveDepthError(ResolveError):
    """Directive nesting exceeded `ResolveOptions.max_depth`."""


class InterpolationError(CosyError):
    """Variables were left unresolved under `MissingVarPolicy.ERROR`.

    `missing` lists `(path, name)` pairs in document order.
    """

    def __init__(self, missing: tuple[tuple[str, str], ...]) -> None:
        self.missing = missing
        names = ", ".join(f"{name} (at {path or '$'})" for path, name in missing)
        super().__init__(f"Environment variable(s) not found: {names}")


class SchemaError(CosyError):
    """The schema document uses an unsupported shape or type name."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(f"{message} (at {path or '$'})")
