"""exprcheck: lexical analyzer and syntax validator for arithmetic expressions."""

from exprcheck.core.types import Diagnostic, DiagnosticKind, VerdictReport
from exprcheck.grammar import Token, TokenCategory, tokenize, validate

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Token",
    "TokenCategory",
    "VerdictReport",
    "tokenize",
    "validate",
]
