"""Console boundary layer: rendering and the interactive loop."""

from exprcheck.shell.render import make_console, render_report, render_steps, render_token_table
from exprcheck.shell.repl import run_repl

__all__ = [
    "make_console",
    "render_report",
    "render_steps",
    "render_token_table",
    "run_repl",
]
