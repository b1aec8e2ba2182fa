"""Finite-state machine over token categories.

The grammar "operand, operator, operand, ..., END" is encoded as a fixed
transition table. Parentheses do not get states of their own: ``(`` keeps the
machine expecting an operand and ``)`` keeps it expecting an operator, while
the validator tracks nesting depth with a separate counter.
"""

from __future__ import annotations

from enum import Enum, auto

from exprcheck.grammar.tokens import TokenCategory


class ValidationState(Enum):
    """Position of the validator in the operand/operator alternation."""

    EXPECT_OPERAND = auto()
    EXPECT_OPERATOR = auto()
    ACCEPT = auto()


_S = ValidationState
_C = TokenCategory

# Every (state, category) pair is listed; None means the token is rejected.
TRANSITIONS: dict[tuple[ValidationState, TokenCategory], ValidationState | None] = {
    (_S.EXPECT_OPERAND, _C.NUMBER): _S.EXPECT_OPERATOR,
    (_S.EXPECT_OPERAND, _C.OPERATOR): None,
    (_S.EXPECT_OPERAND, _C.LPAREN): _S.EXPECT_OPERAND,
    (_S.EXPECT_OPERAND, _C.RPAREN): None,
    (_S.EXPECT_OPERAND, _C.END): None,
    (_S.EXPECT_OPERATOR, _C.NUMBER): None,
    (_S.EXPECT_OPERATOR, _C.OPERATOR): _S.EXPECT_OPERAND,
    (_S.EXPECT_OPERATOR, _C.LPAREN): None,
    (_S.EXPECT_OPERATOR, _C.RPAREN): _S.EXPECT_OPERATOR,
    (_S.EXPECT_OPERATOR, _C.END): _S.ACCEPT,
    (_S.ACCEPT, _C.NUMBER): None,
    (_S.ACCEPT, _C.OPERATOR): None,
    (_S.ACCEPT, _C.LPAREN): None,
    (_S.ACCEPT, _C.RPAREN): None,
    (_S.ACCEPT, _C.END): None,
}

INITIAL_STATE = ValidationState.EXPECT_OPERAND


def transition(state: ValidationState, category: TokenCategory) -> ValidationState | None:
    """Return the next state, or None if ``category`` is not allowed in ``state``."""
    return TRANSITIONS[(state, category)]
