"""Tests for CLI commands."""

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from prattcalc.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each command where no stray prattcalc.toml can be picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestEvalCommand:
    def test_integer_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1+2*3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "7"

    def test_leading_minus_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "-2+3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-5"

    def test_infinity(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1/0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "inf"

    def test_precision_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--precision", "3", "pi"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "3.14"

    def test_precision_from_config(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[repl]\nprecision = 4\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(path), "pi"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "3.142"

    def test_config_in_working_directory(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        write_config("[repl]\nprecision = 2\n")
        result = cli_runner.invoke(app, ["eval", "e"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2.7"

    def test_invalid_config(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config("[repl]\nprecision = 0\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(path), "1"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_unknown_function(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "foo(1)"])
        assert result.exit_code == 1
        assert "Unknown function 'foo'" in result.output

    def test_parse_error_shows_location(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(1+2"])
        assert result.exit_code == 1
        assert "1:5: Expected ')'" in result.output
        assert "^" in result.output

    def test_lex_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 [ 3"])
        assert result.exit_code == 1
        assert "Unexpected character: '['" in result.output

    def test_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--verbose", "eval", "1+1"])
        assert result.exit_code == 0
        assert "2" in result.stdout


class TestReplCommand:
    def test_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            app,
            ["repl"],
            input="1+2\n\nfoo(1)\n2^10\nquit\n999\n",
        )
        assert result.exit_code == 0
        assert "3" in result.stdout
        assert "1024" in result.stdout
        assert "Unknown function 'foo'" in result.output
        assert "999" not in result.output

    def test_errors_do_not_stop_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1+\n)\n6*7\n")
        assert result.exit_code == 0
        assert "Unexpected end of input" in result.output
        assert "42" in result.stdout

    def test_ends_at_eof(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="5-8\n")
        assert result.exit_code == 0
        assert "-3" in result.stdout

    def test_prompt_from_config(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        path = write_config('[repl]\nprompt = "calc% "\n')
        result = cli_runner.invoke(app, ["repl", "--config", str(path)], input="exit\n")
        assert result.exit_code == 0
        assert "calc% " in result.stdout


class TestInspectCommands:
    def test_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1 + pi"])
        assert result.exit_code == 0
        for expected in ("number", "plus", "ident", "pi"):
            assert expected in result.stdout

    def test_tokens_lex_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1 @"])
        assert result.exit_code == 1
        assert "Unexpected character" in result.output

    def test_tree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tree", "1+2*3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "(1.0 + (2.0 * 3.0))"

    def test_tree_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tree", "1+"])
        assert result.exit_code == 1
        assert "Unexpected end of input" in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "prattcalc version" in result.stdout
