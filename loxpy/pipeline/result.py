"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loxpy.diagnostics import has_errors
from loxpy.parser.lox import ParsedExpression
from loxpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from loxpy.ast import Expr
    from loxpy.diagnostics import Diagnostic
    from loxpy.lexer import Token
    from loxpy.printers import Notation


@dataclass(slots=True)
class ExpressionParseResult:
    """Lox expression parse result with cached printer renderings.

    Each source unit gets its own result, so error state never leaks from one
    unit to the next.
    """

    source_text: str
    parsed: ParsedExpression
    options: ParserOptions
    _renderings: dict[str, str] = field(default_factory=dict, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def tokens(self) -> list[Token]:
        return self.parsed.tokens

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def ast_root(self) -> Expr | None:
        return self.parsed.root

    def render(self, notation: Notation) -> str | None:
        """Render the tree with the printer for `notation`, or None when there is no tree."""
        if self.parsed.root is None:
            return None
        if notation not in self._renderings:
            from loxpy.printers import printer_for

            self._renderings[notation] = printer_for(notation).print(self.parsed.root)
        return self._renderings[notation]

    def prefix(self) -> str | None:
        return self.render("ast")

    def rpn(self) -> str | None:
        return self.render("rpn")
