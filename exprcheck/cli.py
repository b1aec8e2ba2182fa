"""exprcheck CLI: lexical and syntax checking of arithmetic expressions.

Usage:
    exprcheck [repl]
    exprcheck check <expr> [<expr> ...] [--json]
    exprcheck tokens <expr>

Global options (before the command):
    --language {en,uk}  --no-color  --show-tokens/--no-show-tokens  --trace  --log-level LEVEL
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from exprcheck import __version__
from exprcheck.core.config import ExprCheckConfig, get_config, set_config
from exprcheck.core.messages import available_languages

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcheck",
        description="exprcheck: lexical analyzer and syntax validator for arithmetic expressions",
        epilog="Numbers, + - * /, parentheses and unary signs. Nothing is evaluated.",
    )
    parser.add_argument("--version", action="version", version=f"exprcheck {__version__}")
    parser.add_argument(
        "--language", choices=available_languages(), default=None, help="Diagnostic language"
    )
    parser.add_argument(
        "--no-color", dest="color", action="store_false", default=None, help="Disable colors"
    )
    parser.add_argument(
        "--show-tokens",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the token sequence of each expression",
    )
    parser.add_argument(
        "--trace", action="store_true", default=None, help="Print the state machine steps"
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- repl ---
    subparsers.add_parser("repl", help="Validate expressions interactively (default)")

    # --- check ---
    check_parser = subparsers.add_parser("check", help="Validate one or more expressions")
    check_parser.add_argument("expressions", nargs="+", help="Expressions to validate")
    check_parser.add_argument(
        "--json", action="store_true", help="Print verdict reports as a JSON array"
    )

    # --- tokens ---
    tokens_parser = subparsers.add_parser("tokens", help="Show the tokens of an expression")
    tokens_parser.add_argument("expression", help="Expression to tokenize")

    return parser


def build_config(args: argparse.Namespace) -> ExprCheckConfig:
    """Apply command-line overrides on top of the environment config."""
    overrides = {
        "language": args.language,
        "color": args.color,
        "show_tokens": args.show_tokens,
        "show_trace": args.trace,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    return dataclasses.replace(
        get_config(), **{key: value for key, value in overrides.items() if value is not None}
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def cmd_repl(args: argparse.Namespace, config: ExprCheckConfig, console: Console) -> int:
    """Validate expressions read from the console until the exit word."""
    from exprcheck.shell.repl import run_repl

    checked = run_repl(console, config)
    logger.info("Validated %d expressions", checked)
    return 0


def cmd_check(args: argparse.Namespace, config: ExprCheckConfig, console: Console) -> int:
    """Validate expressions given on the command line."""
    from exprcheck.grammar.validator import validate
    from exprcheck.shell.render import render_report

    reports = [validate(expr, language=config.language) for expr in args.expressions]

    if args.json:
        print(json.dumps([r.to_dict() for r in reports], indent=2, ensure_ascii=False))
    else:
        for report in reports:
            console.print(f"[bold]{escape(report.expression)}[/bold]")
            render_report(
                console,
                report,
                language=config.language,
                show_tokens=config.show_tokens,
                show_trace=config.show_trace,
            )

    return 0 if all(reports) else 1


def cmd_tokens(args: argparse.Namespace, config: ExprCheckConfig, console: Console) -> int:
    """Print the token table for one expression."""
    from exprcheck.grammar.lexer import LexicalError, tokenize
    from exprcheck.shell.render import render_token_table

    try:
        tokens = tokenize(args.expression)
    except LexicalError as exc:
        console.print(f"  [bold red][FAIL][/bold red] {escape(str(exc))}")
        return 1

    console.print(render_token_table(tokens))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        configure_logging(config.log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    set_config(config)

    from exprcheck.shell.render import make_console

    console = make_console(color=config.color)

    dispatch = {
        "repl": cmd_repl,
        "check": cmd_check,
        "tokens": cmd_tokens,
    }

    return dispatch[args.command or "repl"](args, config, console)


if __name__ == "__main__":
    sys.exit(main())
