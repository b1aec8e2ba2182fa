"""Interactive read loop.

Reads one expression per line, validates it and prints the verdict until the
exit word or end of input.
"""

from __future__ import annotations

import logging
from typing import Callable

from rich.console import Console
from rich.markup import escape

from exprcheck.core.config import ExprCheckConfig
from exprcheck.core.messages import get_message
from exprcheck.grammar.validator import validate
from exprcheck.shell.render import format_tokens, render_report

logger = logging.getLogger(__name__)


def is_exit(line: str, exit_word: str) -> bool:
    return line.strip().lower() == exit_word.strip().lower()


def run_repl(
    console: Console,
    config: ExprCheckConfig,
    input_fn: Callable[[str], str] | None = None,
) -> int:
    """Run the loop and return the number of expressions validated.

    ``input_fn`` receives the prompt and returns one line; it defaults to
    ``console.input``. EOFError or KeyboardInterrupt ends the loop.
    """
    read = input_fn or console.input
    language = config.language
    checked = 0

    console.print(f"[bold]{escape(get_message('banner', language))}[/bold]")
    console.print(escape(get_message("hint", language, exit_word=config.exit_word)))

    while True:
        console.print()
        try:
            line = read(config.prompt)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving the loop")
            break

        if not line.strip():
            continue
        if is_exit(line, config.exit_word):
            break

        report = validate(line, language=language)
        checked += 1
        if report.tokens:
            logger.info("Tokens: %s", format_tokens(report.tokens))

        render_report(
            console,
            report,
            language=language,
            show_tokens=config.show_tokens,
            show_trace=config.show_trace,
        )

    return checked
