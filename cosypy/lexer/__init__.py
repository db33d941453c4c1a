"""Lexer."""

from cosypy.lexer.lexer import INT64_MAX, INT64_MIN, Lexer, dump_tokens, token_text, tokenize
from cosypy.lexer.tokens import EOF_TOKEN, KEYWORDS, Token, TokenKind

__all__ = [
    "EOF_TOKEN",
    "INT64_MAX",
    "INT64_MIN",
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "tokenize",
]
