"""Tests for the transition table."""

import itertools

import pytest

from exprcheck.grammar.machine import TRANSITIONS, ValidationState, transition
from exprcheck.grammar.tokens import TokenCategory

S = ValidationState
C = TokenCategory


def test_table_covers_every_pair() -> None:
    expected = set(itertools.product(ValidationState, TokenCategory))
    assert set(TRANSITIONS) == expected


@pytest.mark.parametrize(
    "state,category,target",
    [
        (S.EXPECT_OPERAND, C.NUMBER, S.EXPECT_OPERATOR),
        (S.EXPECT_OPERAND, C.LPAREN, S.EXPECT_OPERAND),
        (S.EXPECT_OPERATOR, C.OPERATOR, S.EXPECT_OPERAND),
        (S.EXPECT_OPERATOR, C.RPAREN, S.EXPECT_OPERATOR),
        (S.EXPECT_OPERATOR, C.END, S.ACCEPT),
    ],
)
def test_legal_transitions(state: ValidationState, category: TokenCategory, target) -> None:
    assert transition(state, category) is target


def test_exactly_five_legal_transitions() -> None:
    assert sum(1 for target in TRANSITIONS.values() if target is not None) == 5


@pytest.mark.parametrize("category", list(TokenCategory))
def test_accept_is_terminal(category: TokenCategory) -> None:
    assert transition(S.ACCEPT, category) is None


def test_accept_only_reachable_through_end() -> None:
    sources = [key for key, target in TRANSITIONS.items() if target is S.ACCEPT]
    assert sources == [(S.EXPECT_OPERATOR, C.END)]
