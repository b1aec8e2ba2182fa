"""Global configuration for exprcheck.

Holds defaults for message language and for how the shell presents results.
Settings can be overridden via environment variables or explicit configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from exprcheck.core.messages import CATALOGS, DEFAULT_LANGUAGE

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass
class ExprCheckConfig:
    """Top-level configuration for exprcheck."""

    # Diagnostics
    language: str = DEFAULT_LANGUAGE

    # Shell presentation
    color: bool = True
    show_tokens: bool = True
    show_trace: bool = False
    exit_word: str = "exit"
    prompt: str = "> "

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.language not in CATALOGS:
            raise ValueError(
                f"Unknown language {self.language!r} (expected one of {sorted(CATALOGS)})"
            )

    @classmethod
    def from_env(cls) -> ExprCheckConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("EXPRCHECK_LANGUAGE"):
            config = cls(language=val)
        if val := os.environ.get("EXPRCHECK_COLOR"):
            config.color = _parse_bool("EXPRCHECK_COLOR", val)
        if val := os.environ.get("EXPRCHECK_SHOW_TOKENS"):
            config.show_tokens = _parse_bool("EXPRCHECK_SHOW_TOKENS", val)
        if val := os.environ.get("EXPRCHECK_SHOW_TRACE"):
            config.show_trace = _parse_bool("EXPRCHECK_SHOW_TRACE", val)
        if val := os.environ.get("EXPRCHECK_EXIT_WORD"):
            config.exit_word = val.strip()
        if val := os.environ.get("EXPRCHECK_PROMPT"):
            config.prompt = val
        if val := os.environ.get("EXPRCHECK_LOG_LEVEL"):
            config.log_level = val.upper()

        return config


# Module-level singleton
_config: ExprCheckConfig | None = None


def get_config() -> ExprCheckConfig:
    """Return the global config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = ExprCheckConfig.from_env()
    return _config


def set_config(config: ExprCheckConfig | None) -> None:
    """Override the global config (useful in tests); None resets it."""
    global _config
    _config = config
