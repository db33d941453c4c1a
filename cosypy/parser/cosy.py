"""High-level parse entrypoint for COSY source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cosypy.lexer import Token, tokenize
from cosypy.parser.grammar import parse_document
from cosypy.parser.options import ParserOptions
from cosypy.parser.parser import Parser
from cosypy.parser.token_source import TokenSource
from cosypy.value import Document

if TYPE_CHECKING:
    from cosypy.pipeline import CosyParseResult


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    source: str = "<memory>",
) -> Document:
    """Parse `text` into a `Document`, raising `LexError`/`ParseError` on malformed input."""
    tokens = tokenize(text, source=source)
    return parse_tokens(tokens, text, options, source=source)


def parse_tokens(
    tokens: list[Token],
    text: str,
    options: ParserOptions | None = None,
    *,
    source: str = "<memory>",
) -> Document:
    """Parse an already tokenized `text`."""
    parser = Parser(TokenSource(tokens, text), options=options, source_name=source)
    return parse_document(parser)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    source: str = "<memory>",
) -> CosyParseResult:
    from cosypy.pipeline import CosyParseResult

    return CosyParseResult.from_text(text, options or ParserOptions(), source=source)
