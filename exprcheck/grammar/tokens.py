"""Token types for the expression lexer.

Defines the token categories and the Token dataclass shared by the lexer
and the validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenCategory(Enum):
    """All token categories recognized by the expression lexer."""

    NUMBER = auto()  # 42, -3, .5, 1.
    OPERATOR = auto()  # + - * /
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    END = auto()  # end of input


OPERATOR_CHARS = "+-*/"
SIGN_CHARS = "+-"

# Text carried by the synthetic end-of-input token
END_MARKER = "END"

# After these categories a sign starts a number instead of being an operator
UNARY_CONTEXT: frozenset[TokenCategory] = frozenset(
    {TokenCategory.OPERATOR, TokenCategory.LPAREN}
)


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    category: TokenCategory
    text: str
    column: int = 0

    @property
    def is_end(self) -> bool:
        return self.category is TokenCategory.END

    def __str__(self) -> str:
        return f"({self.category.name}, {self.text})"

    def __repr__(self) -> str:
        return f"Token({self.category.name}, {self.text!r}, C{self.column})"
