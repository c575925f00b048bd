"""Textual form of literal values shared by the printers."""

from loxpy.lexer import LiteralValue


def format_literal(value: LiteralValue | bool) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        text = str(float(value))
        # Lox numbers are doubles; integral ones print without the fraction.
        return text[:-2] if text.endswith(".0") else text
    return str(value)
