"""Expression AST and its traversal contract."""

from loxpy.ast.model import Binary, Conditional, Expr, Grouping, Literal, Unary
from loxpy.ast.visitor import ExprVisitor

__all__ = [
    "Binary",
    "Conditional",
    "Expr",
    "ExprVisitor",
    "Grouping",
    "Literal",
    "Unary",
]
