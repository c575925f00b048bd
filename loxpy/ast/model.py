"""AST data model for Lox expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loxpy.lexer import LiteralValue, Token

if TYPE_CHECKING:
    from loxpy.ast.visitor import ExprVisitor


@dataclass(frozen=True, slots=True)
class Binary:
    """Infix operation, including the comma operator."""

    left: Expr
    operator: Token
    right: Expr

    def accept[R](self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary(self)


@dataclass(frozen=True, slots=True)
class Conditional:
    """Ternary `condition ? then_branch : else_branch`."""

    condition: Expr
    then_branch: Expr
    else_branch: Expr

    def accept[R](self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_conditional(self)


@dataclass(frozen=True, slots=True)
class Grouping:
    """Parenthesized expression, kept so printers can show the source grouping."""

    expression: Expr

    def accept[R](self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping(self)


@dataclass(frozen=True, slots=True)
class Literal:
    value: LiteralValue | bool

    def accept[R](self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal(self)


@dataclass(frozen=True, slots=True)
class Unary:
    operator: Token
    right: Expr

    def accept[R](self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary(self)


type Expr = Binary | Conditional | Grouping | Literal | Unary


__all__ = [
    "Binary",
    "Conditional",
    "Expr",
    "Grouping",
    "Literal",
    "Unary",
]
