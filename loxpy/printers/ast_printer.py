"""Fully parenthesized prefix printer."""

from __future__ import annotations

from loxpy.ast import Binary, Conditional, Expr, Grouping, Literal, Unary
from loxpy.printers.literal import format_literal


class AstPrinter:
    """Render an expression in Lisp-like prefix form, e.g. `(+ 1 (* 2 3))`."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_conditional(self, expr: Conditional) -> str:
        return self._parenthesize("?:", expr.condition, expr.then_branch, expr.else_branch)

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal(self, expr: Literal) -> str:
        return format_literal(expr.value)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name, *(expr.accept(self) for expr in exprs)]
        return f"({' '.join(parts)})"
