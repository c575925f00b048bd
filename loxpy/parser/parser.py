"""Recursive-descent parser core: token cursor, error recording, recovery."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from loxpy.diagnostics import Diagnostic, DiagnosticSpec
from loxpy.diagnostics.codes import PARSER_EXPECTED_TOKEN
from loxpy.lexer import Token, TokenKind
from loxpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from loxpy.ast import Expr


class ParseError(Exception):
    """Unwinds the grammar rules back to `Parser.parse` after a syntax error.

    The diagnostic is recorded before the exception is raised, so catching it
    only has to decide where parsing resumes.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


class Parser:
    """Token cursor with one-token lookahead.

    Grammar rules live in `loxpy.parser.grammar` and drive the cursor through
    `match`, `check`, `consume`, and `advance`. The index only moves forward.
    """

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        if not tokens or not tokens[-1].is_eof:
            raise ValueError("Token sequence must end with an EOF token")
        self._tokens = tokens
        self._options = options or ParserOptions()
        self._current = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def tokens(self) -> Sequence[Token]:
        return self._tokens

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._current

    def parse(self) -> Expr | None:
        """Parse one expression; return None after recording a syntax error."""
        from loxpy.parser.grammar import parse_expression

        try:
            return parse_expression(self)
        except ParseError:
            return None

    def peek(self) -> Token:
        return self._tokens[self._current]

    def previous(self) -> Token:
        return self._tokens[self._current - 1]

    def is_at_end(self) -> bool:
        return self.peek().is_eof

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self._current += 1
        return self.previous()

    def match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.peek(), message, PARSER_EXPECTED_TOKEN)

    def error(self, token: Token, message: str, spec: DiagnosticSpec = PARSER_EXPECTED_TOKEN) -> ParseError:
        """Record a diagnostic at `token` and return the error for the caller to raise."""
        diagnostic = Diagnostic(
            code=spec.code,
            message=message,
            line=token.line,
            where=where_for_token(token),
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
        self._diagnostics.append(diagnostic)
        return ParseError(diagnostic)

    def synchronize(self) -> None:
        """Discard tokens until the next statement boundary or EOF.

        The offending token is always skipped. Parsing can resume after a
        consumed `;` or in front of a statement keyword.
        """
        self.advance()

        while not self.is_at_end():
            if self.previous().kind == TokenKind.SEMICOLON:
                return
            if self.peek().kind.starts_statement:
                return
            self.advance()

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics


def where_for_token(token: Token) -> str:
    if token.is_eof:
        return " at end"
    return f" at '{token.lexeme}'"
