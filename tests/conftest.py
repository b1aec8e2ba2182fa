"""Shared fixtures for the exprcheck tests."""

import pytest

from exprcheck.core.config import set_config


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh config built from a clean environment."""
    for name in (
        "EXPRCHECK_LANGUAGE",
        "EXPRCHECK_COLOR",
        "EXPRCHECK_SHOW_TOKENS",
        "EXPRCHECK_SHOW_TRACE",
        "EXPRCHECK_EXIT_WORD",
        "EXPRCHECK_PROMPT",
        "EXPRCHECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("COLUMNS", "200")
    set_config(None)
    yield
    set_config(None)
