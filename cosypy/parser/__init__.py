"""Parser."""

from cosypy.parser.cosy import parse, parse_result, parse_tokens
from cosypy.parser.grammar import parse_document
from cosypy.parser.options import ParserOptions
from cosypy.parser.parser import Parser
from cosypy.parser.token_source import TokenSource

__all__ = [
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse",
    "parse_document",
    "parse_result",
    "parse_tokens",
]
