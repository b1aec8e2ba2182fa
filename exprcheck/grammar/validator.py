"""Syntactic validator for tokenized arithmetic expressions.

Runs the token sequence through the transition table in
``exprcheck.grammar.machine`` while counting open parentheses:
- A token with no transition from the current state is rejected
- A closing parenthesis may never take the balance below zero
- The balance must be back at zero once END has been consumed
- END consumed from EXPECT_OPERATOR is the only way to reach ACCEPT

Validation is fail-fast: the report carries the first failure only.
"""

from __future__ import annotations

import logging

from exprcheck.core.messages import DEFAULT_LANGUAGE, get_message
from exprcheck.core.types import (
    Diagnostic,
    DiagnosticKind,
    ParenDirection,
    Step,
    VerdictReport,
)
from exprcheck.grammar.lexer import (
    InvalidCharacterError,
    LexicalError,
    MalformedNumberError,
    tokenize,
)
from exprcheck.grammar.machine import INITIAL_STATE, ValidationState, transition
from exprcheck.grammar.tokens import Token, TokenCategory

logger = logging.getLogger(__name__)


def validate(expression: str, *, language: str = DEFAULT_LANGUAGE) -> VerdictReport:
    """Tokenize and validate ``expression``.

    Never raises for string input; every failure is returned as the report's
    ``reason``.
    """
    try:
        tokens = tokenize(expression)
    except LexicalError as exc:
        reason = _lexical_diagnostic(exc, language)
        logger.debug("Rejected %r: %s", expression, reason.kind.value)
        return VerdictReport(expression=expression, accepted=False, reason=reason)

    reason, steps = check_tokens(tokens, language=language)
    if reason is not None:
        logger.debug("Rejected %r: %s", expression, reason.kind.value)

    return VerdictReport(
        expression=expression,
        accepted=reason is None,
        reason=reason,
        tokens=tokens,
        steps=steps,
    )


def check_tokens(
    tokens: list[Token], *, language: str = DEFAULT_LANGUAGE
) -> tuple[Diagnostic | None, list[Step]]:
    """Run the state machine over ``tokens``.

    Returns the first failure (or None when the sequence is accepted) and the
    steps taken up to that point.
    """
    state = INITIAL_STATE
    balance = 0
    steps: list[Step] = []

    for token in tokens:
        next_state = transition(state, token.category)

        if next_state is None:
            return _rejected_token(token, state, language), steps

        if token.category is TokenCategory.LPAREN:
            balance += 1
        elif token.category is TokenCategory.RPAREN:
            balance -= 1
            if balance < 0:
                return (
                    Diagnostic(
                        kind=DiagnosticKind.UNBALANCED_PARENS,
                        message=get_message("excess_closing", language, column=token.column),
                        column=token.column,
                        token=token,
                        state=state,
                        direction=ParenDirection.EXCESS_CLOSING,
                        balance=balance,
                    ),
                    steps,
                )

        steps.append(Step(token=token, state=state, next_state=next_state, balance=balance))
        state = next_state

    if balance != 0:
        return (
            Diagnostic(
                kind=DiagnosticKind.UNBALANCED_PARENS,
                message=get_message("unclosed", language, balance=balance),
                column=tokens[-1].column if tokens else 0,
                direction=ParenDirection.UNCLOSED,
                balance=balance,
            ),
            steps,
        )

    if state is not ValidationState.ACCEPT:
        return _incomplete(tokens[-1] if tokens else None, state, language), steps

    return None, steps


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rejected_token(token: Token, state: ValidationState, language: str) -> Diagnostic:
    # Input that stops where an operand is still expected ("", "1+") is incomplete
    if token.is_end and state is ValidationState.EXPECT_OPERAND:
        return _incomplete(token, state, language)

    return Diagnostic(
        kind=DiagnosticKind.UNEXPECTED_TOKEN,
        message=get_message(
            "unexpected_token",
            language,
            text=token.text,
            category=token.category.name,
            state=state.name,
        ),
        column=token.column,
        token=token,
        state=state,
    )


def _incomplete(token: Token | None, state: ValidationState, language: str) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.INCOMPLETE_EXPRESSION,
        message=get_message("incomplete_expression", language),
        column=token.column if token else 0,
        token=token,
        state=state,
    )


def _lexical_diagnostic(exc: LexicalError, language: str) -> Diagnostic:
    if isinstance(exc, InvalidCharacterError):
        message = get_message("invalid_character", language, char=exc.char, column=exc.column)
    elif isinstance(exc, MalformedNumberError):
        message = get_message("malformed_number", language, text=exc.text, column=exc.column)
    else:
        message = str(exc)

    return Diagnostic(kind=exc.kind, message=message, column=exc.column)
