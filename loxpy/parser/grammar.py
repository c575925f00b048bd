"""Lox expression grammar routines.

Precedence ladder, lowest to highest binding strength:

    expression -> comma
    comma      -> ternary ( "," ternary )*
    ternary    -> equality ( "?" equality ":" equality )*
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")"

Each rule only calls the next one down, and every repeated level folds to the
left. Ternary branches parse at `equality`, so a bare ternary inside a branch
needs parentheses.
"""

from collections.abc import Callable

from loxpy.ast import Binary, Conditional, Expr, Grouping, Literal, Unary
from loxpy.diagnostics.codes import PARSER_EXPECTED_EXPRESSION
from loxpy.lexer import TokenKind
from loxpy.parser.parser import Parser

EQUALITY_OPERATORS: tuple[TokenKind, ...] = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
COMPARISON_OPERATORS: tuple[TokenKind, ...] = (
    TokenKind.GREATER,
    TokenKind.GREATER_EQUAL,
    TokenKind.LESS,
    TokenKind.LESS_EQUAL,
)
TERM_OPERATORS: tuple[TokenKind, ...] = (TokenKind.MINUS, TokenKind.PLUS)
FACTOR_OPERATORS: tuple[TokenKind, ...] = (TokenKind.SLASH, TokenKind.STAR)
UNARY_OPERATORS: tuple[TokenKind, ...] = (TokenKind.BANG, TokenKind.MINUS)


def parse_expression(parser: Parser) -> Expr:
    return parse_comma(parser)


def parse_comma(parser: Parser) -> Expr:
    expr = parse_ternary(parser)
    if not parser.options.allow_comma_operator:
        return expr

    while parser.match(TokenKind.COMMA):
        operator = parser.previous()
        right = parse_ternary(parser)
        expr = Binary(expr, operator, right)

    return expr


def parse_ternary(parser: Parser) -> Expr:
    expr = parse_equality(parser)
    if not parser.options.allow_ternary_operator:
        return expr

    while parser.match(TokenKind.QUESTION):
        then_branch = parse_equality(parser)
        parser.consume(TokenKind.COLON, "Expected ':' token in ternary operation.")
        else_branch = parse_equality(parser)
        expr = Conditional(expr, then_branch, else_branch)

    return expr


def parse_equality(parser: Parser) -> Expr:
    return _parse_left_associative(parser, EQUALITY_OPERATORS, parse_comparison)


def parse_comparison(parser: Parser) -> Expr:
    return _parse_left_associative(parser, COMPARISON_OPERATORS, parse_term)


def parse_term(parser: Parser) -> Expr:
    return _parse_left_associative(parser, TERM_OPERATORS, parse_factor)


def parse_factor(parser: Parser) -> Expr:
    return _parse_left_associative(parser, FACTOR_OPERATORS, parse_unary)


def parse_unary(parser: Parser) -> Expr:
    if parser.match(*UNARY_OPERATORS):
        operator = parser.previous()
        right = parse_unary(parser)
        return Unary(operator, right)

    return parse_primary(parser)


def parse_primary(parser: Parser) -> Expr:
    if parser.match(TokenKind.FALSE):
        return Literal(False)
    if parser.match(TokenKind.TRUE):
        return Literal(True)
    if parser.match(TokenKind.NIL):
        return Literal(None)

    if parser.match(TokenKind.NUMBER, TokenKind.STRING):
        return Literal(parser.previous().literal)

    if parser.match(TokenKind.LEFT_PAREN):
        expr = parse_expression(parser)
        parser.consume(TokenKind.RIGHT_PAREN, "Expected ')' after expression.")
        return Grouping(expr)

    raise parser.error(parser.peek(), PARSER_EXPECTED_EXPRESSION.message, PARSER_EXPECTED_EXPRESSION)


def _parse_left_associative(
    parser: Parser,
    operators: tuple[TokenKind, ...],
    operand: Callable[[Parser], Expr],
) -> Expr:
    expr = operand(parser)

    while parser.match(*operators):
        operator = parser.previous()
        right = operand(parser)
        expr = Binary(expr, operator, right)

    return expr
