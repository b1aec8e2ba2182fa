"""Tests for console rendering and the interactive loop."""

import io
from collections.abc import Iterator

import pytest
from rich.console import Console

from exprcheck import validate
from exprcheck.core.config import ExprCheckConfig
from exprcheck.grammar.lexer import tokenize
from exprcheck.shell.render import format_tokens, render_report, render_token_table
from exprcheck.shell.repl import is_exit, run_repl


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, no_color=True, highlight=False), buffer


def _feeder(lines: list[str]):
    """Return an input function that yields ``lines`` then raises EOFError."""
    it: Iterator[str] = iter(lines)
    prompts: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    read.prompts = prompts  # type: ignore[attr-defined]
    return read


class TestRender:
    def test_accepted(self) -> None:
        console, buffer = _console()
        render_report(console, validate("(1+2)*3"), language="en")
        out = buffer.getvalue()
        assert "[OK] The expression is valid." in out
        assert "Tokens: (LPAREN, (), (NUMBER, 1)" in out

    def test_rejected(self) -> None:
        console, buffer = _console()
        render_report(console, validate("1+)"), language="en", show_tokens=False)
        out = buffer.getvalue()
        assert "[FAIL] Syntax error: unexpected token ')'" in out
        assert "Tokens" not in out

    def test_ukrainian(self) -> None:
        console, buffer = _console()
        render_report(console, validate("1", language="uk"), language="uk")
        assert "Вираз коректний." in buffer.getvalue()

    def test_trace(self) -> None:
        console, buffer = _console()
        render_report(console, validate("(1)"), language="en", show_trace=True)
        out = buffer.getvalue()
        assert "State machine trace" in out
        assert "EXPECT_OPERATOR" in out
        assert "ACCEPT" in out

    def test_format_tokens(self) -> None:
        assert format_tokens(tokenize("-1")) == "(NUMBER, -1), (END, END)"

    def test_token_table(self) -> None:
        console, buffer = _console()
        console.print(render_token_table(tokenize("2*3")))
        out = buffer.getvalue()
        assert "OPERATOR" in out
        assert "NUMBER" in out


class TestRepl:
    def test_validates_until_exit(self) -> None:
        console, buffer = _console()
        read = _feeder(["1+2", "1+)", "exit", "3"])
        checked = run_repl(console, ExprCheckConfig(), read)
        out = buffer.getvalue()
        assert checked == 2
        assert out.count("[OK]") == 1
        assert out.count("[FAIL]") == 1
        assert read.prompts == ["> ", "> ", "> "]

    def test_blank_lines_are_skipped(self) -> None:
        console, _ = _console()
        checked = run_repl(console, ExprCheckConfig(), _feeder(["", "   ", "\t", "1"]))
        assert checked == 1

    def test_end_of_input_stops(self) -> None:
        console, buffer = _console()
        assert run_repl(console, ExprCheckConfig(), _feeder([])) == 0
        assert "Lexical analyzer for arithmetic expressions" in buffer.getvalue()

    def test_custom_exit_word_and_language(self) -> None:
        console, buffer = _console()
        config = ExprCheckConfig(language="uk", exit_word="quit", show_tokens=False)
        checked = run_repl(console, config, _feeder(["(1", "  QUIT  ", "1"]))
        out = buffer.getvalue()
        assert checked == 1
        assert "'quit'" in out
        assert "незакриті дужки" in out

    @pytest.mark.parametrize("line", ["exit", " EXIT ", "Exit\n"])
    def test_is_exit(self, line: str) -> None:
        assert is_exit(line, "exit")

    def test_exit_inside_expression_is_not_exit(self) -> None:
        assert not is_exit("exit 1", "exit")
