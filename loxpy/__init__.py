"""Lox front end: scanner, expression parser, and AST printers."""
