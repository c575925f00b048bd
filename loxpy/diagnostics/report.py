"""Diagnostics helpers and the user-facing reporter."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from loxpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as `[line N] Error<where>: <message>`."""
    label = "Error" if diagnostic.severity == "error" else "Warning"
    return f"[line {diagnostic.line}] {label}{diagnostic.where}: {diagnostic.message}"


def emit_diagnostics(diagnostics: Iterable[Diagnostic], stream: TextIO | None = None) -> int:
    """Write one formatted line per diagnostic and return how many were written."""
    out = stream if stream is not None else sys.stderr
    count = 0
    for diagnostic in diagnostics:
        print(format_diagnostic(diagnostic), file=out)
        count += 1
    return count
