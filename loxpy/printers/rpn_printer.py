"""Reverse-Polish (postfix) printer."""

from __future__ import annotations

from dataclasses import dataclass

from loxpy.ast import Binary, Conditional, Expr, Grouping, Literal, Unary
from loxpy.printers.literal import format_literal


@dataclass(frozen=True, slots=True)
class RPNTerm:
    text: str
    is_operator: bool = False


class RPNPrinter:
    """Render an expression in postfix order, e.g. `1 2 3 * + `.

    Terms are separated by one space and every operator is followed by one
    space, so a lone literal prints bare (`nil`). Groupings emit only their
    contents since postfix order needs no parentheses.
    """

    def print(self, expr: Expr) -> str:
        return render_terms(expr.accept(self))

    def visit_binary(self, expr: Binary) -> list[RPNTerm]:
        return self._postfix(expr.operator.lexeme, expr.left, expr.right)

    def visit_conditional(self, expr: Conditional) -> list[RPNTerm]:
        # No postfix form is defined for the ternary operator.
        return []

    def visit_grouping(self, expr: Grouping) -> list[RPNTerm]:
        return expr.expression.accept(self)

    def visit_literal(self, expr: Literal) -> list[RPNTerm]:
        return [RPNTerm(format_literal(expr.value))]

    def visit_unary(self, expr: Unary) -> list[RPNTerm]:
        return self._postfix(expr.operator.lexeme, expr.right)

    def _postfix(self, operator: str, *operands: Expr) -> list[RPNTerm]:
        terms: list[RPNTerm] = []
        for operand in operands:
            terms.extend(operand.accept(self))
        terms.append(RPNTerm(operator, is_operator=True))
        return terms


def render_terms(terms: list[RPNTerm]) -> str:
    parts: list[str] = []
    needs_separator = False
    for term in terms:
        if needs_separator:
            parts.append(" ")
        if term.is_operator:
            parts.append(f"{term.text} ")
            needs_separator = False
        else:
            parts.append(term.text)
            needs_separator = True
    return "".join(parts)
