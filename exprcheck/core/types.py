"""Core data types for exprcheck.

Diagnostics and verdict reports returned by the validator. Every type is
JSON-serializable via its to_dict method.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from exprcheck.grammar.machine import ValidationState
    from exprcheck.grammar.tokens import Token


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class DiagnosticKind(str, Enum):
    """Reason an expression was rejected."""

    # Lexical
    INVALID_CHARACTER = "invalid_character"
    MALFORMED_NUMBER = "malformed_number"

    # Syntax
    UNEXPECTED_TOKEN = "unexpected_token"
    UNBALANCED_PARENS = "unbalanced_parens"
    INCOMPLETE_EXPRESSION = "incomplete_expression"

    @property
    def family(self) -> str:
        if self in (DiagnosticKind.INVALID_CHARACTER, DiagnosticKind.MALFORMED_NUMBER):
            return "lexical"
        return "syntax"


class ParenDirection(str, Enum):
    """Which way the parentheses are out of balance."""

    EXCESS_CLOSING = "excess_closing"
    UNCLOSED = "unclosed"


# ---------------------------------------------------------------------------
# Validation results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Diagnostic:
    """The first lexical or syntax failure found in an expression."""

    kind: DiagnosticKind
    message: str
    column: int = 0
    token: Token | None = None
    state: ValidationState | None = None
    direction: ParenDirection | None = None
    balance: int | None = None

    @property
    def family(self) -> str:
        return self.kind.family

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "family": self.family,
            "message": self.message,
            "column": self.column,
            "token": self.token.text if self.token else None,
            "category": self.token.category.name if self.token else None,
            "state": self.state.name if self.state else None,
            "direction": self.direction.value if self.direction else None,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class Step:
    """One token consumed by the state machine."""

    token: Token
    state: ValidationState
    next_state: ValidationState
    balance: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token.text,
            "category": self.token.category.name,
            "state": self.state.name,
            "next_state": self.next_state.name,
            "balance": self.balance,
        }


@dataclass
class VerdictReport:
    """Outcome of validating one expression."""

    expression: str
    accepted: bool
    reason: Diagnostic | None = None
    tokens: list[Token] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)

    @property
    def diagnostics(self) -> list[str]:
        """Human-readable failure messages; exactly one when rejected."""
        return [self.reason.message] if self.reason else []

    def __bool__(self) -> bool:
        return self.accepted

    def to_dict(self) -> dict[str, Any]:
        return {
            "expression": self.expression,
            "accepted": self.accepted,
            "diagnostics": self.diagnostics,
            "reason": self.reason.to_dict() if self.reason else None,
            "tokens": [[t.category.name, t.text] for t in self.tokens],
            "steps": [s.to_dict() for s in self.steps],
        }
