#!/usr/bin/env python
"""Dump the token stream of a Lox source file.

Without `-o` the tokens are printed grouped by line, followed by any lexical
diagnostics. With `-o` one token per line is written to the given file.
"""

import argparse
from pathlib import Path

from loxpy.lexer import Scanner, Token, dump_tokens


def format_token(idx: int, token: Token) -> str:
    base = f"[{idx}] kind={token.kind.name} lexeme={token.lexeme!r} line={token.line}"
    if token.literal is not None:
        return base + f" literal={token.literal!r}"
    return base


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the tokens of a Lox source file")
    parser.add_argument("input", type=Path, help="Lox source file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write one token per line to this file instead of printing",
    )
    args = parser.parse_args()

    scanner = Scanner(args.input.read_text(encoding="utf-8"))
    tokens = scanner.scan_tokens()

    output_path: Path | None = args.output
    if output_path is None:
        dump_tokens(tokens, scanner.diagnostics)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(tokens):
            f.write(format_token(idx, token) + "\n")
        for diagnostic in scanner.diagnostics:
            f.write(f"! line={diagnostic.line} {diagnostic.code}: {diagnostic.message}\n")

    print(f"Wrote {len(tokens)} tokens to {output_path}")


if __name__ == "__main__":
    main()
