"""Tests for the fusion and fusion-eval command line entry points."""

import json

from click.testing import CliRunner
from typer.testing import CliRunner as TyperCliRunner

from fusion.cmd.main import app
from fusion.main import main

runner = CliRunner()
typer_runner = TyperCliRunner()


class TestSessionCommand:
    def test_reads_stdin(self):
        result = runner.invoke(main, input="2+3*4\n(2+3)*4\n")
        assert result.exit_code == 0
        assert result.output == "14\n20\n"

    def test_reads_file(self, tmp_path):
        source = tmp_path / "exprs.txt"
        source.write_text("8/4/2\n-3+5\n")
        result = runner.invoke(main, [str(source)])
        assert result.exit_code == 0
        assert result.output == "1\n2\n"

    def test_failures_set_exit_code(self):
        result = runner.invoke(main, input="1/0\n1+1\n")
        assert result.exit_code == 1
        assert "division by zero" in result.output
        assert "2\n" in result.output

    def test_version(self):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "fusion" in result.output


class TestEvalCommand:
    def test_prints_value(self):
        result = typer_runner.invoke(app, ["(7 + 8) * 8 / 2"])
        assert result.exit_code == 0
        assert result.output == "60\n"

    def test_leading_minus(self):
        result = typer_runner.invoke(app, ["--", "-3+5"])
        assert result.exit_code == 0
        assert result.output.strip() == "2"

    def test_tokens(self):
        result = typer_runner.invoke(app, ["--tokens", "1+2"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:4] == [
            "   0 Number 1",
            "   1 Plus +",
            "   2 Number 2",
            "   3 EOF",
        ]
        assert lines[-1] == "3"

    def test_ast(self):
        result = typer_runner.invoke(app, ["--ast", "2*3"])
        assert result.exit_code == 0
        assert result.output == "Binary *\n  Number 2.0\n  Number 3.0\n6\n"

    def test_json_success(self):
        result = typer_runner.invoke(app, ["--json", "7/2"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"ok": True, "value": 3.5}

    def test_json_failure(self):
        result = typer_runner.invoke(app, ["--json", "1/0"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["code"] == "DIVISION_BY_ZERO"
        assert payload["stage"] == "eval"

    def test_error_diagnostic(self):
        result = typer_runner.invoke(app, ["3+a"])
        assert result.exit_code == 1
        assert "lex error" in result.output

    def test_ast_unary_minus(self):
        result = typer_runner.invoke(app, ["--ast", "--", "-3+5"])
        assert result.exit_code == 0
        assert result.output == (
            "Binary +\n  Unary -\n    Number 3.0\n  Number 5.0\n2\n"
        )

    def test_json_overflow_is_valid_json(self):
        result = typer_runner.invoke(app, ["--json", "9" * 400])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"ok": True, "value": "inf"}
