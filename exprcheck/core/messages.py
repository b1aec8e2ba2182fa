"""Message catalogs for diagnostics and shell text.

Each catalog maps a message key to a ``str.format`` template. ``en`` is the
default; ``uk`` carries the Ukrainian wording of the original console tool.
"""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "invalid_character": "Lexical error: invalid character '{char}' at column {column}",
        "malformed_number": "Lexical error: malformed number '{text}' at column {column}",
        "unexpected_token": "Syntax error: unexpected token '{text}' ({category}) in state {state}.",
        "excess_closing": "Syntax error: unmatched closing parenthesis at column {column}.",
        "unclosed": "Syntax error: unclosed parentheses (balance: {balance}).",
        "incomplete_expression": "The expression ended unexpectedly.",
        "banner": "Lexical analyzer for arithmetic expressions",
        "hint": "Enter an expression (or '{exit_word}' to quit):",
        "accepted": "The expression is valid.",
        "tokens": "Tokens: {tokens}",
    },
    "uk": {
        "invalid_character": "Лексична помилка: недопустимий символ '{char}'",
        "malformed_number": "Лексична помилка: некоректний формат числа '{text}'",
        "unexpected_token": "Синтаксична помилка: неочікуваний токен '{text}' ({category}) після стану {state}.",
        "excess_closing": "Синтаксична помилка: зайва закриваюча дужка.",
        "unclosed": "Синтаксична помилка: незакриті дужки (баланс: {balance}).",
        "incomplete_expression": "Вираз завершився некоректно.",
        "banner": "Лексичний аналізатор математичних виразів",
        "hint": "Введіть вираз (або '{exit_word}' для виходу):",
        "accepted": "Вираз коректний.",
        "tokens": "Токени: {tokens}",
    },
}


def available_languages() -> list[str]:
    return sorted(CATALOGS)


def get_message(key: str, language: str = DEFAULT_LANGUAGE, **fields: object) -> str:
    """Format the ``key`` template from the ``language`` catalog.

    Unknown languages fall back to the default catalog.
    """
    catalog = CATALOGS.get(language, CATALOGS[DEFAULT_LANGUAGE])
    return catalog[key].format(**fields)
