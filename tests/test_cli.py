"""Tests for the command-line entry point."""

import json

import pytest

from exprcheck import __version__
from exprcheck.cli import create_parser, main
from exprcheck.core.config import get_config


class TestCheck:
    def test_all_accepted(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "1+2", "(3)"]) == 0
        out = capsys.readouterr().out
        assert out.count("[OK]") == 2

    def test_any_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-color", "check", "1+2", "1.2.3"]) == 1
        out = capsys.readouterr().out
        assert "malformed number '1.2.3'" in out

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["check", "--json", "(1+2", "3-2"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert [item["accepted"] for item in data] == [False, True]
        assert data[0]["reason"]["direction"] == "unclosed"
        assert data[1]["steps"][-1]["next_state"] == "ACCEPT"

    def test_language_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--language", "uk", "check", "*3"])
        assert "неочікуваний токен" in capsys.readouterr().out
        assert get_config().language == "uk"

    def test_hide_tokens(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--no-show-tokens", "check", "1"])
        assert "Tokens" not in capsys.readouterr().out

    def test_trace(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--trace", "check", "1"])
        assert "State machine trace" in capsys.readouterr().out


class TestTokens:
    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["tokens", "2*-3"]) == 0
        out = capsys.readouterr().out
        assert "-3" in out
        assert "OPERATOR" in out

    def test_lexical_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["tokens", "1+x"]) == 1
        assert "invalid character 'x'" in capsys.readouterr().out


class TestMisc:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])
        assert __version__ in capsys.readouterr().out

    def test_bad_env_config(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("EXPRCHECK_LANGUAGE", "fr")
        assert main(["check", "1"]) == 2
        assert "Unknown language" in capsys.readouterr().err

    def test_default_command_is_repl(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        lines = iter(["2*2", "exit"])
        monkeypatch.setattr("builtins.input", lambda *args: next(lines))
        assert main([]) == 0
        assert "[OK]" in capsys.readouterr().out
