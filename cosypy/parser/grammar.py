"""COSY grammar routines that build the document tree.

Comment placement:

- own-line comments before a member become its `leading` trivia
- a comment on the same line right after a member, optionally after its
  comma, becomes its `trailing` trivia
- comments after the last member of a container become the container's
  `dangling` trivia
- comments after the root value become `Document.trailing_comments`
"""

from dataclasses import replace

from cosypy.diagnostics import (
    PARSER_EXPECTED_KEY,
    PARSER_EXPECTED_SEPARATOR,
    PARSER_EXPECTED_VALUE,
    PARSER_TRAILING_CONTENT,
)
from cosypy.lexer import TokenKind
from cosypy.parser.parser import Parser
from cosypy.value import (
    ArrayValue,
    BoolValue,
    CommentTrivia,
    Document,
    FloatValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    StringValue,
    Value,
)

KEY_TOKENS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.NULL,
        TokenKind.TRUE,
        TokenKind.FALSE,
    }
)


def parse_document(parser: Parser) -> Document:
    leading = collect_comments(parser)[0]
    if parser.at(TokenKind.EOF):
        parser.error(
            PARSER_EXPECTED_VALUE,
            message="Expected a root value, found end of input",
        )

    root = parse_value(parser, leading)
    if parser.at(TokenKind.COMMENT):
        attach_trivia(root, trailing=str(parser.bump().value))

    trailing_comments = collect_comments(parser)[0]
    if not parser.at(TokenKind.EOF):
        parser.error(
            PARSER_TRAILING_CONTENT,
            message=f"Unexpected {parser.current.display} after the root value",
        )

    return Document(root, source=parser.source_name, trailing_comments=tuple(trailing_comments))


def collect_comments(parser: Parser) -> tuple[list[str], bool]:
    """Skip newlines and comments, returning the comment texts and whether a newline was seen."""
    comments: list[str] = []
    saw_newline = False
    while True:
        if parser.at(TokenKind.NEWLINE):
            saw_newline = True
            parser.bump()
        elif parser.at(TokenKind.COMMENT):
            comments.append(str(parser.bump().value))
        else:
            return comments, saw_newline


def parse_value(parser: Parser, leading: list[str] | None = None) -> Value:
    comments = list(leading or [])
    comments.extend(collect_comments(parser)[0])

    token = parser.current_token
    value: Value
    match token.kind:
        case TokenKind.NULL:
            value = NullValue()
        case TokenKind.TRUE:
            value = BoolValue(True)
        case TokenKind.FALSE:
            value = BoolValue(False)
        case TokenKind.INTEGER:
            value = IntegerValue(int(token.value))  # type: ignore[arg-type]
        case TokenKind.FLOAT:
            value = FloatValue(float(token.value))  # type: ignore[arg-type]
        case TokenKind.STRING:
            value = StringValue(str(token.value))
        case TokenKind.LBRACE:
            value = parse_object(parser)
        case TokenKind.LBRACKET:
            value = parse_array(parser)
        case _:
            parser.error(
                PARSER_EXPECTED_VALUE,
                message=f"Expected a value, found {token.kind.display}",
            )

    if not isinstance(value, (ObjectValue, ArrayValue)):
        parser.bump()
        value.span = token.range
    if comments:
        attach_trivia(value, leading=tuple(comments))
    return value


def parse_object(parser: Parser) -> ObjectValue:
    start = parser.expect(TokenKind.LBRACE).range
    entries: dict[str, Value] = {}

    with parser.nested():
        pending = collect_comments(parser)[0]
        while not parser.at(TokenKind.RBRACE):
            key = parse_key(parser)
            parser.expect(TokenKind.COLON, context=f"after key {key!r}")
            value = parse_value(parser, pending)
            # Duplicate keys keep their first position with the later value.
            entries[key] = value

            pending, has_separator = parse_separator(parser, value)
            if parser.at(TokenKind.RBRACE):
                break
            if not has_separator:
                _missing_separator(parser, closing=TokenKind.RBRACE)

        end = parser.expect(TokenKind.RBRACE).range

    node = ObjectValue(entries, span=start.cover(end))
    if pending:
        attach_trivia(node, dangling=tuple(pending))
    return node


def parse_array(parser: Parser) -> ArrayValue:
    start = parser.expect(TokenKind.LBRACKET).range
    items: list[Value] = []

    with parser.nested():
        pending = collect_comments(parser)[0]
        while not parser.at(TokenKind.RBRACKET):
            value = parse_value(parser, pending)
            items.append(value)

            pending, has_separator = parse_separator(parser, value)
            if parser.at(TokenKind.RBRACKET):
                break
            if not has_separator:
                _missing_separator(parser, closing=TokenKind.RBRACKET)

        end = parser.expect(TokenKind.RBRACKET).range

    node = ArrayValue(items, span=start.cover(end))
    if pending:
        attach_trivia(node, dangling=tuple(pending))
    return node


def parse_key(parser: Parser) -> str:
    if parser.at(TokenKind.EOF):
        parser.error(
            PARSER_EXPECTED_KEY,
            message="Expected object key or `}`, found end of input",
            hint="Close the object with `}`.",
        )
    if not parser.at_set(KEY_TOKENS):
        parser.error(
            PARSER_EXPECTED_KEY,
            message=f"Expected object key, found {parser.current.display}",
        )
    return str(parser.bump().value)


def parse_separator(parser: Parser, member: Value) -> tuple[list[str], bool]:
    """Consume what follows a member up to the next member or closing bracket.

    Returns the comments that lead the next member (or dangle before the
    closing bracket) and whether a separator was present.
    """
    trailing: str | None = None
    if parser.at(TokenKind.COMMENT):
        trailing = str(parser.bump().value)

    pending, has_separator = collect_comments(parser)
    if parser.eat(TokenKind.COMMA):
        if trailing is None and not has_separator and not pending and parser.at(TokenKind.COMMENT):
            trailing = str(parser.bump().value)
        has_separator = True
        pending.extend(collect_comments(parser)[0])

    if trailing is not None:
        attach_trivia(member, trailing=trailing)
    return pending, has_separator


def attach_trivia(
    value: Value,
    *,
    leading: tuple[str, ...] | None = None,
    trailing: str | None = None,
    dangling: tuple[str, ...] | None = None,
) -> None:
    trivia = value.trivia or CommentTrivia()
    if leading is not None:
        trivia = replace(trivia, leading=leading)
    if trailing is not None:
        trivia = replace(trivia, trailing=trailing)
    if dangling is not None:
        trivia = replace(trivia, dangling=dangling)
    value.trivia = None if trivia.is_empty else trivia


def _missing_separator(parser: Parser, *, closing: TokenKind) -> None:
    parser.error(
        PARSER_EXPECTED_SEPARATOR,
        message=f"Expected `,`, newline or {closing.display}, found {parser.current.display}",
    )
