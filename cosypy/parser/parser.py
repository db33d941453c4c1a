"""Recursive-descent parser core."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from cosypy.diagnostics import PARSER_EXPECTED_TOKEN, PARSER_NESTING_TOO_DEEP, Diagnostic, DiagnosticSpec
from cosypy.errors import ParseError
from cosypy.lexer import Token, TokenKind
from cosypy.parser.options import ParserOptions
from cosypy.parser.token_source import TokenSource
from cosypy.text import TextRange, TextSize


class Parser:
    """Token cursor plus the error and nesting bookkeeping the grammar needs."""

    def __init__(
        self,
        source: TokenSource,
        options: ParserOptions | None = None,
        *,
        source_name: str = "<memory>",
    ) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._source_name = source_name
        self._depth = 0

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def source_name(self) -> str:
        return self._source_name

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_token(self) -> Token:
        return self._source.current_token

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def position(self) -> TextSize:
        return self._source.position

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n)

    def bump(self) -> Token:
        return self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, *, context: str | None = None) -> Token:
        if self.current == kind:
            return self.bump()
        message = f"Expected {kind.display}, found {self.current.display}"
        if context is not None:
            message = f"{message} {context}"
        self.error(PARSER_EXPECTED_TOKEN, message=message, hint=f"Insert {kind.display} here.")

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Track one level of container nesting."""
        if self._depth >= self._options.max_depth:
            self.error(
                PARSER_NESTING_TOO_DEEP,
                message=f"Maximum nesting depth of {self._options.max_depth} exceeded",
            )
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def error(
        self,
        spec: DiagnosticSpec,
        *,
        message: str | None = None,
        hint: str | None = None,
        range: TextRange | None = None,
    ) -> NoReturn:
        diagnostic = Diagnostic.from_spec(
            spec,
            range if range is not None else self.current_range,
            message=message,
            hint=hint,
        )
        raise ParseError(diagnostic, text=self._source.text, source=self._source_name)
