"""Lexer."""

from loxpy.lexer.scanner import (
    ScanResult,
    Scanner,
    dump_tokens,
    format_tokens_by_line,
    scan,
)
from loxpy.lexer.tokens import (
    KEYWORDS,
    STATEMENT_KEYWORDS,
    LiteralValue,
    Token,
    TokenKind,
)

__all__ = [
    "KEYWORDS",
    "STATEMENT_KEYWORDS",
    "LiteralValue",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenKind",
    "dump_tokens",
    "format_tokens_by_line",
    "scan",
]
