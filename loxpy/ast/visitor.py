"""Traversal contract over the expression AST."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loxpy.ast.model import Binary, Conditional, Grouping, Literal, Unary


class ExprVisitor[R](Protocol):
    """Read-only operation over `Expr` trees.

    Implement one method per node variant; nodes dispatch to the matching
    method through `accept`. New operations never require touching the node
    classes.
    """

    def visit_binary(self, expr: Binary) -> R: ...

    def visit_conditional(self, expr: Conditional) -> R: ...

    def visit_grouping(self, expr: Grouping) -> R: ...

    def visit_literal(self, expr: Literal) -> R: ...

    def visit_unary(self, expr: Unary) -> R: ...
