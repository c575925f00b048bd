"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from loxpy.diagnostics import Diagnostic
from loxpy.lexer import Token
from loxpy.pipeline.result import ExpressionParseResult
from loxpy.printers import Notation


@dataclass(frozen=True, slots=True)
class PrintRunResult:
    """Result of printing from a shared parse result.

    `text` is None whenever the parse reported an error, since the tree is not
    reliable then.
    """

    parse: ExpressionParseResult
    notation: Notation
    text: str | None
    diagnostics: list[Diagnostic]
    has_errors: bool


@dataclass(frozen=True, slots=True)
class TokenRunResult:
    """Result of scanning only."""

    source_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]
    has_errors: bool
