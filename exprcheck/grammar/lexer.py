"""Hand-written lexer for arithmetic expressions.

Tokenizes a single-line expression into a list of Token objects in one
left-to-right pass. A ``+`` or ``-`` is folded into a number only in unary
context, decided by looking at the category of the previous token alone.
"""

from __future__ import annotations

import re

from exprcheck.core.types import DiagnosticKind
from exprcheck.grammar.tokens import (
    END_MARKER,
    OPERATOR_CHARS,
    SIGN_CHARS,
    UNARY_CONTEXT,
    Token,
    TokenCategory,
)

NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


class LexicalError(Exception):
    """Raised when the lexer cannot turn the input into tokens."""

    kind: DiagnosticKind

    def __init__(self, message: str, column: int) -> None:
        self.column = column
        super().__init__(f"Lexical error at column {column}: {message}")


class InvalidCharacterError(LexicalError):
    """A character that cannot start any token."""

    kind = DiagnosticKind.INVALID_CHARACTER

    def __init__(self, char: str, column: int) -> None:
        self.char = char
        super().__init__(f"invalid character {char!r}", column)


class MalformedNumberError(LexicalError):
    """A run of digits, dots and a sign that is not a valid number."""

    kind = DiagnosticKind.MALFORMED_NUMBER

    def __init__(self, text: str, column: int) -> None:
        self.text = text
        super().__init__(f"malformed number {text!r}", column)


class Lexer:
    """Tokenize an arithmetic expression.

    Usage:
        tokens = Lexer("(1 + 2) * -3").tokenize()
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return all tokens including END."""
        while not self._at_end():
            if self._peek().isspace():
                self._pos += 1
                continue
            self._scan_token()

        self._tokens.append(Token(TokenCategory.END, END_MARKER, self._column()))
        return self._tokens

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._peek()

        if ch.isdecimal() or ch == "." or (ch in SIGN_CHARS and self._in_unary_context()):
            self._scan_number()
            return

        if ch == "(":
            self._emit(TokenCategory.LPAREN, ch)
            return

        if ch == ")":
            self._emit(TokenCategory.RPAREN, ch)
            return

        if ch in OPERATOR_CHARS:
            self._emit(TokenCategory.OPERATOR, ch)
            return

        raise InvalidCharacterError(ch, self._column())

    def _scan_number(self) -> None:
        """Scan a number greedily, then check the whole run against NUMBER_RE."""
        start = self._pos
        self._pos += 1  # first char: digit, dot or sign

        while not self._at_end() and (self._peek().isdecimal() or self._peek() == "."):
            self._pos += 1

        text = self._source[start : self._pos]
        if NUMBER_RE.fullmatch(text) is None:
            raise MalformedNumberError(text, start + 1)

        self._tokens.append(Token(TokenCategory.NUMBER, text, start + 1))

    def _emit(self, category: TokenCategory, text: str) -> None:
        self._tokens.append(Token(category, text, self._column()))
        self._pos += len(text)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _in_unary_context(self) -> bool:
        if not self._tokens:
            return True
        return self._tokens[-1].category in UNARY_CONTEXT

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        return self._source[self._pos]

    def _column(self) -> int:
        return self._pos + 1


def tokenize(expr: str) -> list[Token]:
    """Tokenize ``expr``; raises LexicalError on the first bad character or number."""
    return Lexer(expr).tokenize()
