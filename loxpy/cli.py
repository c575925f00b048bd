"""
loxpy - Command Line Interface

Usage:
    loxpy                       start the interactive prompt
    loxpy script.lox            parse a file and print its expression tree
    python -m loxpy script.lox --printer rpn

Exit codes: 64 for a wrong argument count, 65 when the script has errors,
66 when the script cannot be read.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from loxpy.diagnostics import emit_diagnostics
from loxpy.lexer import format_tokens_by_line
from loxpy.parser import GrammarLevel
from loxpy.pipeline import run_print, run_tokens
from loxpy.printers import NOTATIONS, Notation

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


def run_source(
    source: str,
    *,
    notation: Notation = "ast",
    level: GrammarLevel = GrammarLevel.TERNARY,
    tokens_only: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Run one source unit and return True when any error was reported."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if tokens_only:
        scanned = run_tokens(source)
        for row in format_tokens_by_line(scanned.tokens):
            print(row, file=out)
        emit_diagnostics(scanned.diagnostics, err)
        return scanned.has_errors

    result = run_print(source, notation, level=level)
    emit_diagnostics(result.diagnostics, err)
    if result.text is not None:
        print(result.text, file=out)
    return result.has_errors


def run_file(
    path: Path,
    *,
    notation: Notation = "ast",
    level: GrammarLevel = GrammarLevel.TERNARY,
    tokens_only: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    err = err if err is not None else sys.stderr
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Could not read {str(path)!r}: {exc.strerror or exc}", file=err)
        return EX_NOINPUT
    except UnicodeDecodeError as exc:
        print(f"Could not read {str(path)!r}: not valid UTF-8 ({exc.reason} at byte {exc.start})", file=err)
        return EX_NOINPUT

    had_error = run_source(
        source,
        notation=notation,
        level=level,
        tokens_only=tokens_only,
        out=out,
        err=err,
    )
    return EX_DATAERR if had_error else 0


def run_prompt(
    *,
    notation: Notation = "ast",
    level: GrammarLevel = GrammarLevel.TERNARY,
    tokens_only: bool = False,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Read-print loop; every line is a fresh unit, so errors never carry over."""
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            return 0
        run_source(
            line.rstrip("\n"),
            notation=notation,
            level=level,
            tokens_only=tokens_only,
            out=out,
            err=err,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxpy",
        description="Scan and parse Lox expressions and print their syntax tree.",
    )
    parser.add_argument(
        "script",
        nargs="*",
        help="Path to a Lox source file (omit to start the prompt)",
    )
    parser.add_argument(
        "--printer",
        choices=NOTATIONS,
        default="ast",
        help="Tree notation: ast = parenthesized prefix, rpn = postfix (default: ast)",
    )
    parser.add_argument(
        "--level",
        choices=[level.value for level in GrammarLevel],
        default=GrammarLevel.TERNARY.value,
        help="Grammar extensions to accept (default: ternary)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream grouped by line instead of parsing",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if len(args.script) > 1:
        print("Usage: loxpy [script]")
        return EX_USAGE

    level = GrammarLevel(args.level)
    if args.script:
        return run_file(
            Path(args.script[0]),
            notation=args.printer,
            level=level,
            tokens_only=args.tokens,
        )
    return run_prompt(notation=args.printer, level=level, tokens_only=args.tokens)


if __name__ == "__main__":
    raise SystemExit(main())
