import textwrap

import pytest

from cosypy.errors import LexError
from cosypy.lexer import INT64_MAX, INT64_MIN, Lexer, Token, TokenKind, token_text, tokenize
from tests._shared_cases import LEXER_ERROR_CASES, CosyCase, case_id


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def significant(tokens: list[Token]) -> list[Token]:
    return [token for token in tokens if not token.kind.is_trivia]


def test_object_with_unquoted_keys() -> None:
    src = textwrap.dedent(
        """
        {
            host: "localhost"
            port: 8080
        }
        """
    ).lstrip()

    tokens = tokenize(src)

    assert kinds(tokens) == [
        TokenKind.LBRACE,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.COLON,
        TokenKind.STRING,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.COLON,
        TokenKind.INTEGER,
        TokenKind.NEWLINE,
        TokenKind.RBRACE,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]
    assert tokens[2].value == "host"
    assert tokens[4].value == "localhost"
    assert tokens[8].value == 8080


def test_keywords_become_keyword_tokens() -> None:
    tokens = significant(tokenize("[null, true, false, nullable, True]"))

    assert kinds(tokens) == [
        TokenKind.LBRACKET,
        TokenKind.NULL,
        TokenKind.COMMA,
        TokenKind.TRUE,
        TokenKind.COMMA,
        TokenKind.FALSE,
        TokenKind.COMMA,
        TokenKind.IDENTIFIER,
        TokenKind.COMMA,
        TokenKind.IDENTIFIER,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    ]
    assert tokens[1].kind.is_keyword
    assert not tokens[7].kind.is_keyword


def test_numbers_keep_integer_and_float_apart() -> None:
    tokens = significant(tokenize("[0, -7, 1.0, 3.25, 1e3, 2E-2, -4.5e+1]"))
    numbers = [token for token in tokens if token.kind in (TokenKind.INTEGER, TokenKind.FLOAT)]

    assert [(token.kind, token.value) for token in numbers] == [
        (TokenKind.INTEGER, 0),
        (TokenKind.INTEGER, -7),
        (TokenKind.FLOAT, 1.0),
        (TokenKind.FLOAT, 3.25),
        (TokenKind.FLOAT, 1000.0),
        (TokenKind.FLOAT, 0.02),
        (TokenKind.FLOAT, -45.0),
    ]
    assert isinstance(numbers[0].value, int)
    assert isinstance(numbers[2].value, float)


def test_integer_bounds_are_inclusive() -> None:
    tokens = significant(tokenize(f"[{INT64_MIN}, {INT64_MAX}]"))

    assert tokens[1].value == INT64_MIN
    assert tokens[3].value == INT64_MAX


def test_dot_without_digits_is_not_part_of_number() -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize("1.")

    assert exc_info.value.code == "LEXER_UNEXPECTED_CHARACTER"


def test_string_escapes_are_decoded() -> None:
    tokens = tokenize(r'"tab\there \"quoted\" back\\slash\r\n"')

    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].value == 'tab\there "quoted" back\\slash\r\n'


def test_comment_value_is_trimmed_and_newline_kept() -> None:
    tokens = tokenize("1 //   the answer   \n")

    assert kinds(tokens) == [TokenKind.INTEGER, TokenKind.COMMENT, TokenKind.NEWLINE, TokenKind.EOF]
    assert tokens[1].value == "the answer"
    assert tokens[1].kind.is_trivia


def test_comment_marker_inside_string_is_not_a_comment() -> None:
    tokens = tokenize('{url: "http://example.com"}')

    assert TokenKind.COMMENT not in kinds(tokens)
    assert tokens[3].value == "http://example.com"


def test_whitespace_and_carriage_returns_are_skipped() -> None:
    tokens = tokenize("\t{ a :\r\n 1 }")

    assert kinds(tokens) == [
        TokenKind.LBRACE,
        TokenKind.IDENTIFIER,
        TokenKind.COLON,
        TokenKind.NEWLINE,
        TokenKind.INTEGER,
        TokenKind.RBRACE,
        TokenKind.EOF,
    ]


def test_token_ranges_and_text() -> None:
    src = '{name: "x"}'
    tokens = tokenize(src)

    assert tokens[1].range.as_tuple() == (1, 5)
    assert token_text(src, tokens[1]) == "name"
    assert token_text(src, tokens[3]) == '"x"'
    assert token_text(src, tokens[-1]) == ""
    assert tokens[-1].range.as_tuple() == (len(src), len(src))


def test_lexer_next_token_walks_the_source() -> None:
    lexer = Lexer("[1]")

    assert lexer.next_token().kind == TokenKind.LBRACKET
    assert lexer.next_token().kind == TokenKind.INTEGER
    assert lexer.next_token().kind == TokenKind.RBRACKET
    assert lexer.next_token().kind == TokenKind.EOF
    assert lexer.is_eof


@pytest.mark.parametrize("case", LEXER_ERROR_CASES, ids=case_id)
def test_malformed_tokens_raise_lex_error(case: CosyCase) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(case.source)

    assert exc_info.value.code == case.expected
    assert exc_info.value.diagnostic.category == "lexer"


def test_lex_error_reports_line_and_column() -> None:
    src = '{\n  a: 1\n  b: "\\x"\n}'

    with pytest.raises(LexError) as exc_info:
        tokenize(src, source="app.cosy")

    error = exc_info.value
    assert (error.line, error.column) == (3, 7)
    assert error.source == "app.cosy"
    assert str(error).startswith("app.cosy:3:7: ")
    assert error.hint is not None
