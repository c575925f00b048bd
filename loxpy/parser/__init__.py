"""Parser infrastructure (token cursor + expression grammar + entrypoints)."""

from loxpy.parser.grammar import (
    parse_comma,
    parse_comparison,
    parse_equality,
    parse_expression,
    parse_factor,
    parse_primary,
    parse_term,
    parse_ternary,
    parse_unary,
)
from loxpy.parser.lox import ParsedExpression, parse, parse_result, parse_tokens
from loxpy.parser.options import GrammarLevel, ParserOptions, resolve_options
from loxpy.parser.parser import ParseError, Parser, where_for_token

__all__ = [
    "GrammarLevel",
    "ParseError",
    "ParsedExpression",
    "Parser",
    "ParserOptions",
    "parse",
    "parse_comma",
    "parse_comparison",
    "parse_equality",
    "parse_expression",
    "parse_factor",
    "parse_primary",
    "parse_result",
    "parse_term",
    "parse_ternary",
    "parse_tokens",
    "parse_unary",
    "resolve_options",
    "where_for_token",
]
