"""Lexer."""

import math
from typing import Final, NoReturn

from cosypy.diagnostics import (
    LEXER_INVALID_ESCAPE,
    LEXER_INVALID_NUMBER,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from cosypy.errors import LexError
from cosypy.lexer.tokens import KEYWORDS, Token, TokenKind
from cosypy.text import TextRange, TextSize, slice_text_range

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

_PUNCTUATION: Final[dict[str, TokenKind]] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}


class Lexer:
    """Tokenizer that keeps newlines and comments for the parser to interpret.

    Horizontal whitespace (spaces, tabs, carriage returns) is skipped. Every
    `\\n` becomes a NEWLINE token; whether it separates members is decided by
    the parser. The first malformed token raises `LexError`.
    """

    def __init__(self, source: str, *, source_name: str = "<memory>") -> None:
        self._source = source
        self._source_name = source_name
        self._position = 0
        self._current_start = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._skip_whitespace()
        self._current_start = self._position

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(self._position)))

        kind, value = self._lex_token()
        return Token(kind, self._current_range(), value)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> tuple[TokenKind, str | int | float | None]:
        ch = self._current_char()

        if ch == "\n":
            self._advance(1)
            return TokenKind.NEWLINE, None

        if ch == "/" and self._peek_char() == "/":
            return self._lex_comment()

        if ch == '"':
            return self._lex_string()

        if ch.isascii() and ch.isdigit():
            return self._lex_number()

        if ch == "-":
            if self._peek_char().isascii() and self._peek_char().isdigit():
                return self._lex_number()
            self._advance(1)
            self._error(
                LEXER_INVALID_NUMBER,
                message="Invalid number literal: `-` must be followed by a digit.",
            )

        if ch.isascii() and (ch.isalpha() or ch == "_"):
            return self._lex_identifier()

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            self._advance(1)
            return kind, None

        self._advance(1)
        self._error(LEXER_UNEXPECTED_CHARACTER, message=f"Unexpected character {ch!r}.")

    def _lex_comment(self) -> tuple[TokenKind, str]:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        text_start = self._position
        while not self.is_eof and self._current_char() != "\n":
            self._advance(1)
        return TokenKind.COMMENT, self._source[text_start : self._position].strip()

    def _lex_string(self) -> tuple[TokenKind, str]:
        # Consume opening quote
        self._advance(1)
        chunks: list[str] = []

        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                return TokenKind.STRING, "".join(chunks)
            if ch == "\n":
                break
            if ch == "\\":
                escape = self._peek_char()
                replacement = _ESCAPES.get(escape)
                if replacement is None:
                    if escape in ("\0", "\n"):
                        break
                    self._error(
                        LEXER_INVALID_ESCAPE,
                        message=f"Invalid escape sequence \\{escape}.",
                        range=TextRange(self._position, self._position + 2),
                    )
                chunks.append(replacement)
                self._advance(2)
                continue
            chunks.append(ch)
            self._advance(1)

        self._error(LEXER_UNTERMINATED_STRING)

    def _lex_number(self) -> tuple[TokenKind, int | float]:
        is_float = False
        if self._current_char() == "-":
            self._advance(1)
        self._consume_digits()

        if self._current_char() == "." and self._is_digit(self._peek_char()):
            is_float = True
            self._advance(1)
            self._consume_digits()

        if self._current_char() in ("e", "E"):
            is_float = True
            self._advance(1)
            if self._current_char() in ("+", "-"):
                self._advance(1)
            if not self._is_digit(self._current_char()):
                self._error(
                    LEXER_INVALID_NUMBER,
                    message="Invalid number literal: exponent has no digits.",
                )
            self._consume_digits()

        text = slice_text_range(self._source, self._current_range())
        if is_float:
            number = float(text)
            if not math.isfinite(number):
                self._error(
                    LEXER_INVALID_NUMBER,
                    message=f"Invalid number literal: {text} does not fit in a 64-bit float.",
                )
            return TokenKind.FLOAT, number

        value = int(text)
        if not INT64_MIN <= value <= INT64_MAX:
            self._error(
                LEXER_INVALID_NUMBER,
                message=f"Invalid number literal: {text} does not fit in a 64-bit integer.",
            )
        return TokenKind.INTEGER, value

    def _lex_identifier(self) -> tuple[TokenKind, str]:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isascii() and (ch.isalnum() or ch == "_"):
                self._advance(1)
                continue
            break
        text = slice_text_range(self._source, self._current_range())
        return KEYWORDS.get(text, TokenKind.IDENTIFIER), text

    def _skip_whitespace(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t" or ch == "\r":
                self._advance(1)
                continue
            break

    def _consume_digits(self) -> None:
        while self._is_digit(self._current_char()):
            self._advance(1)

    @staticmethod
    def _is_digit(ch: str) -> bool:
        return ch.isascii() and ch.isdigit()

    def _current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps

    def _error(
        self,
        spec: DiagnosticSpec,
        *,
        message: str | None = None,
        range: TextRange | None = None,
    ) -> NoReturn:
        diagnostic = Diagnostic.from_spec(
            spec,
            range if range is not None else self._current_range(),
            message=message,
        )
        raise LexError(diagnostic, text=self._source, source=self._source_name)


def tokenize(text: str, *, source: str = "<memory>") -> list[Token]:
    """Tokenize `text` into a list ending with an EOF token."""
    return Lexer(text, source_name=source).lex()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, range, value, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} value={tok.value!r} text={text!r}")
