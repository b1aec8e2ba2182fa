"""Expression grammar: tokenizer and state-machine validator.

Usage:
    from exprcheck.grammar import tokenize, validate

    tokens = tokenize("(1 + 2) * 3")
    report = validate("(1 + 2) * 3")
"""

from exprcheck.grammar.lexer import (
    InvalidCharacterError,
    Lexer,
    LexicalError,
    MalformedNumberError,
    tokenize,
)
from exprcheck.grammar.machine import TRANSITIONS, ValidationState, transition
from exprcheck.grammar.tokens import Token, TokenCategory
from exprcheck.grammar.validator import check_tokens, validate

__all__ = [
    "InvalidCharacterError",
    "Lexer",
    "LexicalError",
    "MalformedNumberError",
    "TRANSITIONS",
    "Token",
    "TokenCategory",
    "ValidationState",
    "check_tokens",
    "tokenize",
    "transition",
    "validate",
]
