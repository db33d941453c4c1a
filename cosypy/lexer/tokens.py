"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from cosypy.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia-like tokens (emitted by the lexer, interpreted by the parser)
    # -------------------------
    NEWLINE = 11
    COMMENT = 12

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    INTEGER = 22
    FLOAT = 23

    # -------------------------
    # Keywords
    # -------------------------
    NULL = 30
    TRUE = 31
    FALSE = 32

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COLON = 40  # :
    COMMA = 42  # ,

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.NEWLINE, TokenKind.COMMENT)

    @property
    def is_keyword(self) -> bool:
        return self in (TokenKind.NULL, TokenKind.TRUE, TokenKind.FALSE)

    @property
    def display(self) -> str:
        """Human-readable name used in parser messages."""
        return _DISPLAY.get(self, self.name.lower())


_DISPLAY: Final[dict[TokenKind, str]] = {
    TokenKind.EOF: "end of input",
    TokenKind.NEWLINE: "newline",
    TokenKind.COMMENT: "comment",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "string",
    TokenKind.INTEGER: "integer",
    TokenKind.FLOAT: "float",
    TokenKind.NULL: "`null`",
    TokenKind.TRUE: "`true`",
    TokenKind.FALSE: "`false`",
    TokenKind.COLON: "`:`",
    TokenKind.COMMA: "`,`",
    TokenKind.LBRACE: "`{`",
    TokenKind.RBRACE: "`}`",
    TokenKind.LBRACKET: "`[`",
    TokenKind.RBRACKET: "`]`",
}

KEYWORDS: Final[dict[str, TokenKind]] = {
    "null": TokenKind.NULL,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` holds the decoded payload: the unescaped text of a string, the
    number of a numeric literal, the name of an identifier, or the trimmed
    text of a comment. Punctuation carries `None`.
    """

    kind: TokenKind
    range: TextRange
    value: str | int | float | None = None


EOF_TOKEN: Final[Token] = Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(0)))
