"""Read-only printers over the expression AST."""

from typing import Final, Literal

from loxpy.printers.ast_printer import AstPrinter
from loxpy.printers.literal import format_literal
from loxpy.printers.rpn_printer import RPNPrinter, RPNTerm, render_terms

type Notation = Literal["ast", "rpn"]

NOTATIONS: Final[tuple[Notation, ...]] = ("ast", "rpn")


def printer_for(notation: Notation) -> AstPrinter | RPNPrinter:
    if notation == "ast":
        return AstPrinter()
    if notation == "rpn":
        return RPNPrinter()
    raise ValueError(f"Unknown notation: {notation!r}")


__all__ = [
    "NOTATIONS",
    "AstPrinter",
    "Notation",
    "RPNPrinter",
    "RPNTerm",
    "format_literal",
    "printer_for",
    "render_terms",
]
