"""Diagnostics."""

from loxpy.diagnostics.codes import (
    PARSER_EXPECTED_EXPRESSION,
    PARSER_EXPECTED_TOKEN,
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_BLOCK_COMMENT,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from loxpy.diagnostics.diagnostic import Diagnostic, Severity
from loxpy.diagnostics.report import (
    collect_diagnostics,
    emit_diagnostics,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "PARSER_EXPECTED_EXPRESSION",
    "PARSER_EXPECTED_TOKEN",
    "SCANNER_UNEXPECTED_CHARACTER",
    "SCANNER_UNTERMINATED_BLOCK_COMMENT",
    "SCANNER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "emit_diagnostics",
    "format_diagnostic",
    "has_errors",
]
