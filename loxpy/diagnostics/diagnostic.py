"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner/parser.

    `where` is the location suffix rendered after `Error`, e.g. `" at end"`
    or `" at '+'"`. Lexical diagnostics leave it empty.
    """

    code: str
    message: str
    line: int
    where: str = ""
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
