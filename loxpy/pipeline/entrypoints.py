"""Unified entrypoints that orchestrate scan/parse/print with one parse lifecycle."""

from __future__ import annotations

from loxpy.diagnostics import has_errors
from loxpy.lexer import Scanner
from loxpy.parser import GrammarLevel, ParserOptions, parse_result
from loxpy.pipeline.result import ExpressionParseResult
from loxpy.pipeline.results import PrintRunResult, TokenRunResult
from loxpy.printers import NOTATIONS, Notation


def run_print(
    text: str,
    notation: Notation = "ast",
    options: ParserOptions | None = None,
    *,
    level: GrammarLevel | None = None,
    parse: ExpressionParseResult | None = None,
) -> PrintRunResult:
    """Parse `text` (or reuse `parse`) and render it with the chosen printer."""
    if notation not in NOTATIONS:
        raise ValueError(f"Unknown notation: {notation!r}")

    resolved_parse = _resolve_parse(text, options=options, level=level, parse=parse)
    diagnostics = list(resolved_parse.diagnostics)
    errored = has_errors(diagnostics)

    rendered: str | None = None
    if not errored:
        rendered = resolved_parse.render(notation)

    return PrintRunResult(
        parse=resolved_parse,
        notation=notation,
        text=rendered,
        diagnostics=diagnostics,
        has_errors=errored,
    )


def run_tokens(text: str) -> TokenRunResult:
    """Scan `text` without parsing it."""
    tokens, diagnostics = Scanner(text).finish()
    return TokenRunResult(
        source_text=text,
        tokens=tokens,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    level: GrammarLevel | None,
    parse: ExpressionParseResult | None,
) -> ExpressionParseResult:
    if parse is not None:
        if options is not None or level is not None:
            raise ValueError("Pass either parse or options/level, not both")
        return parse
    return parse_result(text, options=options, level=level)
