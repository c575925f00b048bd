"""Scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from loxpy.diagnostics import Diagnostic, DiagnosticSpec
from loxpy.diagnostics.codes import (
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_BLOCK_COMMENT,
    SCANNER_UNTERMINATED_STRING,
)
from loxpy.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind

_SINGLE_CHAR_TOKENS: Final[Mapping[str, TokenKind]] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
    ":": TokenKind.COLON,
    "?": TokenKind.QUESTION,
}

# one-char kind, kind when followed by `=`
_EQUAL_SUFFIX_TOKENS: Final[Mapping[str, tuple[TokenKind, TokenKind]]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens plus the lexical diagnostics collected while producing them."""

    tokens: list[Token]
    diagnostics: list[Diagnostic]


class Scanner:
    """Single-pass scanner that turns Lox source text into tokens.

    Lexical errors are recorded as diagnostics and never stop the scan, so one
    pass reports every lexical problem in the input. The returned token list
    always ends with exactly one EOF token.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []
        self._start = 0
        self._position = 0
        self._line = 1
        self._start_line = 1
        self._finished = False

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during scanning."""
        return self._diagnostics

    @property
    def line(self) -> int:
        return self._line

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def scan_tokens(self) -> list[Token]:
        if self._finished:
            return self._tokens

        while not self.is_eof:
            self._start = self._position
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, "", None, self._line))
        self._finished = True
        return self._tokens

    def finish(self) -> tuple[list[Token], list[Diagnostic]]:
        return self.scan_tokens(), self._diagnostics

    def _scan_token(self) -> None:
        ch = self._advance()

        if (kind := _SINGLE_CHAR_TOKENS.get(ch)) is not None:
            self._add_token(kind)
            return

        if (pair := _EQUAL_SUFFIX_TOKENS.get(ch)) is not None:
            single, double = pair
            self._add_token(double if self._match("=") else single)
            return

        match ch:
            case "/":
                if self._match("/"):
                    self._skip_line_comment()
                elif self._match("*"):
                    self._skip_block_comment()
                else:
                    self._add_token(TokenKind.SLASH)
            case '"':
                self._lex_string()
            case " " | "\r" | "\t":
                pass
            case "\n":
                self._line += 1
            case _ if _is_digit(ch):
                self._lex_number()
            case _ if _is_alpha(ch):
                self._lex_identifier()
            case _:
                self._error(
                    SCANNER_UNEXPECTED_CHARACTER,
                    self._line,
                    SCANNER_UNEXPECTED_CHARACTER.message.format(char=ch),
                )

    def _skip_line_comment(self) -> None:
        # Consume until end of line, do not consume the newline itself.
        while self._current_char() != "\n" and not self.is_eof:
            self._advance()

    def _skip_block_comment(self) -> None:
        # The first `*/` closes the comment, even after a nested `/*`.
        opened_at = self._start_line
        while not self.is_eof and not (self._current_char() == "*" and self._peek_char() == "/"):
            if self._current_char() == "\n":
                self._line += 1
            self._advance()

        if self.is_eof:
            self._error(
                SCANNER_UNTERMINATED_BLOCK_COMMENT,
                opened_at,
                SCANNER_UNTERMINATED_BLOCK_COMMENT.message.format(line=opened_at),
            )
            return

        self._advance()
        self._advance()

    def _lex_string(self) -> None:
        while self._current_char() != '"' and not self.is_eof:
            if self._current_char() == "\n":
                self._line += 1
            self._advance()

        if self.is_eof:
            self._error(SCANNER_UNTERMINATED_STRING, self._start_line)
            return

        # closing quote
        self._advance()
        self._add_token(TokenKind.STRING, self._source[self._start + 1 : self._position - 1])

    def _lex_number(self) -> None:
        while _is_digit(self._current_char()):
            self._advance()

        if self._current_char() == "." and _is_digit(self._peek_char()):
            self._advance()
            while _is_digit(self._current_char()):
                self._advance()

        self._add_token(TokenKind.NUMBER, float(self._source[self._start : self._position]))

    def _lex_identifier(self) -> None:
        while _is_alphanumeric(self._current_char()):
            self._advance()

        text = self._source[self._start : self._position]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind, literal: LiteralValue = None) -> None:
        lexeme = self._source[self._start : self._position]
        self._tokens.append(Token(kind, lexeme, literal, self._start_line))

    def _error(self, spec: DiagnosticSpec, line: int, message: str | None = None) -> None:
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=message if message is not None else spec.message,
                line=line,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )

    def _match(self, expected: str) -> bool:
        if self.is_eof or self._source[self._position] != expected:
            return False
        self._position += 1
        return True

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self) -> str:
        index = self._position + 1
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        return ch


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_digit(ch) or _is_alpha(ch)


def scan(source: str) -> ScanResult:
    """Scan `source` in one pass and return its tokens and lexical diagnostics."""
    tokens, diagnostics = Scanner(source).finish()
    return ScanResult(tokens=tokens, diagnostics=diagnostics)


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print tokens grouped by source line, then any diagnostics, for debugging."""
    for line in format_tokens_by_line(tokens):
        print(line)

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} line={d.line} message={d.message}")


def format_tokens_by_line(tokens: list[Token]) -> list[str]:
    """Render tokens as `<line>: [KIND lexeme literal]...`, one row per source line."""
    rows: list[str] = []
    current_line: int | None = None
    parts: list[str] = []
    for token in tokens:
        if token.line != current_line:
            if current_line is not None:
                rows.append(f"{current_line}: {''.join(parts)}")
            current_line = token.line
            parts = []
        parts.append(str(token))
    if current_line is not None:
        rows.append(f"{current_line}: {''.join(parts)}")
    return rows
