"""Rich console formatting for verdict reports.

All terminal output of exprcheck goes through here; the grammar package
itself never prints.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exprcheck.core.messages import get_message
from exprcheck.core.types import VerdictReport
from exprcheck.grammar.tokens import Token


def make_console(color: bool = True, **kwargs: Any) -> Console:
    """Create the console used by the shell and the CLI."""
    if not color:
        kwargs.setdefault("no_color", True)
        kwargs.setdefault("highlight", False)
    return Console(**kwargs)


def format_tokens(tokens: list[Token]) -> str:
    return ", ".join(str(t) for t in tokens)


def render_report(
    console: Console,
    report: VerdictReport,
    *,
    language: str,
    show_tokens: bool = True,
    show_trace: bool = False,
) -> None:
    """Print the outcome of one validation."""
    if show_tokens and report.tokens:
        tokens = get_message("tokens", language, tokens=format_tokens(report.tokens))
        console.print(f"  [cyan][INFO][/cyan] {escape(tokens)}")

    if show_trace and report.steps:
        console.print(render_steps(report))

    if report.accepted:
        console.print(f"  [bold green][OK][/bold green] {escape(get_message('accepted', language))}")
    else:
        for message in report.diagnostics:
            console.print(f"  [bold red][FAIL][/bold red] {escape(message)}")


def render_steps(report: VerdictReport) -> Table:
    """Table of the state-machine steps taken for ``report``."""
    table = Table(title="State machine trace", expand=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Token", style="cyan")
    table.add_column("Category", style="white")
    table.add_column("From", style="yellow")
    table.add_column("To", style="green")
    table.add_column("Balance", justify="right")

    for index, step in enumerate(report.steps, start=1):
        table.add_row(
            str(index),
            escape(step.token.text),
            step.token.category.name,
            step.state.name,
            step.next_state.name,
            str(step.balance),
        )

    return table


def render_token_table(tokens: list[Token]) -> Table:
    """Table of tokens with their categories and source columns."""
    table = Table(title="Tokens", expand=False)
    table.add_column("Column", style="dim", justify="right")
    table.add_column("Category", style="cyan")
    table.add_column("Text", style="white")

    for token in tokens:
        table.add_row(str(token.column), token.category.name, escape(token.text))

    return table
