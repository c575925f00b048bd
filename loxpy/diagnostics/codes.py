"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from loxpy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCANNER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNEXPECTED_CHARACTER",
    message="Unexpected character: {char}.",
    severity="error",
    category="scanner",
)

SCANNER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_STRING",
    message="Unterminated string.",
    hint="Close the string with a double quote.",
    severity="error",
    category="scanner",
)

SCANNER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment starting at line {line}.",
    hint="Close the comment with `*/`. Block comments do not nest.",
    severity="error",
    category="scanner",
)

PARSER_EXPECTED_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_EXPRESSION",
    message="Expected expression.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)
