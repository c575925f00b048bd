"""High-level parse entrypoint for Lox source text."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loxpy.ast import Expr
from loxpy.diagnostics import Diagnostic, collect_diagnostics, has_errors
from loxpy.lexer import Scanner, Token
from loxpy.parser.options import GrammarLevel, ParserOptions, resolve_options
from loxpy.parser.parser import Parser

if TYPE_CHECKING:
    from loxpy.pipeline import ExpressionParseResult


@dataclass(frozen=True, slots=True)
class ParsedExpression:
    """Root expression (None after a syntax error) plus every diagnostic raised."""

    root: Expr | None
    tokens: list[Token]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def parse_tokens(
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
) -> tuple[Expr | None, list[Diagnostic]]:
    parser = Parser(tokens, options=options)
    root = parser.parse()
    return root, parser.finish()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    level: GrammarLevel | None = None,
) -> ParsedExpression:
    resolved_options = resolve_options(options=options, level=level)

    tokens, scanner_diagnostics = Scanner(text).finish()
    root, parser_diagnostics = parse_tokens(tokens, options=resolved_options)
    diagnostics = collect_diagnostics(scanner_diagnostics, parser_diagnostics)

    return ParsedExpression(root=root, tokens=tokens, diagnostics=diagnostics)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    level: GrammarLevel | None = None,
) -> ExpressionParseResult:
    from loxpy.pipeline import ExpressionParseResult

    resolved_options = resolve_options(options=options, level=level)
    parsed = parse(text, options=resolved_options)
    return ExpressionParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
