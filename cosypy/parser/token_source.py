"""Cursor over a lexed token list."""

from cosypy.lexer import Token, TokenKind
from cosypy.text import TextRange, TextSize


class TokenSource:
    """Bridge between lexer output and parser.

    Newlines and comments stay visible: the grammar needs them both as member
    separators and to attach comments to nodes.
    """

    def __init__(self, tokens: list[Token], text: str) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            end = TextSize.of(text)
            tokens = [*tokens, Token(TokenKind.EOF, TextRange.empty(end))]
        self._tokens = tokens
        self._text = text
        self._position = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def current_token(self) -> Token:
        return self._tokens[self._position]

    @property
    def current(self) -> TokenKind:
        return self.current_token.kind

    @property
    def current_range(self) -> TextRange:
        return self.current_token.range

    @property
    def position(self) -> TextSize:
        return self.current_range.start

    def nth(self, n: int) -> TokenKind:
        index = self._position + n
        if index >= len(self._tokens):
            return TokenKind.EOF
        return self._tokens[index].kind

    def bump(self) -> Token:
        token = self.current_token
        if token.kind != TokenKind.EOF:
            self._position += 1
        return token
