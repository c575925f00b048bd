"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping


class TokenKind(IntEnum):
    # -------------------------
    # Single-character tokens
    # -------------------------
    LEFT_PAREN = 1  # (
    RIGHT_PAREN = 2  # )
    LEFT_BRACE = 3  # {
    RIGHT_BRACE = 4  # }
    COMMA = 5  # ,
    DOT = 6  # .
    MINUS = 7  # -
    PLUS = 8  # +
    SEMICOLON = 9  # ;
    SLASH = 10  # /
    STAR = 11  # *
    COLON = 12  # :
    QUESTION = 13  # ?

    # -------------------------
    # One or two character tokens
    # -------------------------
    BANG = 20  # !
    BANG_EQUAL = 21  # !=
    EQUAL = 22  # =
    EQUAL_EQUAL = 23  # ==
    GREATER = 24  # >
    GREATER_EQUAL = 25  # >=
    LESS = 26  # <
    LESS_EQUAL = 27  # <=

    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = 30
    STRING = 31
    NUMBER = 32

    # -------------------------
    # Keywords
    # -------------------------
    AND = 40
    CLASS = 41
    ELSE = 42
    FALSE = 43
    FUN = 44
    FOR = 45
    IF = 46
    NIL = 47
    OR = 48
    PRINT = 49
    RETURN = 50
    SUPER = 51
    THIS = 52
    TRUE = 53
    VAR = 54
    WHILE = 55

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 99

    @property
    def starts_statement(self) -> bool:
        return self in STATEMENT_KEYWORDS


KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)
"""Reserved words, matched against the exact identifier text."""

STATEMENT_KEYWORDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.CLASS,
        TokenKind.FUN,
        TokenKind.VAR,
        TokenKind.FOR,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.PRINT,
        TokenKind.RETURN,
    }
)
"""Token kinds that can begin a statement; used as recovery points."""


type LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token."""

    kind: TokenKind
    lexeme: str
    literal: LiteralValue
    line: int

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenKind.EOF

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"[{self.kind.name} {self.lexeme} {literal}]"
