"""Shared parse carrier and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loxpy.parser.options import GrammarLevel, ParserOptions
from loxpy.pipeline.result import ExpressionParseResult
from loxpy.pipeline.results import PrintRunResult, TokenRunResult

if TYPE_CHECKING:
    from loxpy.printers import Notation


def run_print(
    text: str,
    notation: Notation = "ast",
    options: ParserOptions | None = None,
    *,
    level: GrammarLevel | None = None,
    parse: ExpressionParseResult | None = None,
) -> PrintRunResult:
    from loxpy.pipeline.entrypoints import run_print as _run_print

    return _run_print(text, notation, options, level=level, parse=parse)


def run_tokens(text: str) -> TokenRunResult:
    from loxpy.pipeline.entrypoints import run_tokens as _run_tokens

    return _run_tokens(text)


__all__ = [
    "ExpressionParseResult",
    "PrintRunResult",
    "TokenRunResult",
    "run_print",
    "run_tokens",
]
