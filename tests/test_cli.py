"""Tests for callexpr CLI commands."""

import json

import pytest
from click.testing import CliRunner

from callexpr.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestRun:
    def test_run_with_string_arg(self, runner):
        result = runner.invoke(
            cli, ["run", '(concat, "Hello, ", (getArg, 0))', "--arg", "Alice"]
        )
        assert result.exit_code == 0
        assert result.output == "Hello, Alice\n"

    def test_args_parsed_as_json(self, runner):
        result = runner.invoke(
            cli, ["run", "(array, (getArg, 0), (getArg, 1))", "--arg", "42", "--arg", "[1, 2]"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == [42, [1, 2]]

    def test_non_string_result_printed_as_json(self, runner):
        result = runner.invoke(cli, ["run", "(array, 1, 2)"])
        assert result.exit_code == 0
        assert result.output == "[\n    1,\n    2\n]\n"

    def test_json_flag_quotes_strings(self, runner):
        result = runner.invoke(cli, ["run", '"hi"', "--json"])
        assert result.output == '"hi"\n'

    def test_args_file(self, runner, tmp_path):
        args_file = tmp_path / "args.yaml"
        args_file.write_text("- Alice\n- 42\n")

        result = runner.invoke(
            cli, ["run", "(map, (array, name, age), (array, (getArg, 0), (getArg, 1)))",
                  "--args-file", str(args_file)]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {"name": "Alice", "age": 42}

    def test_args_file_must_hold_list(self, runner, tmp_path):
        args_file = tmp_path / "args.yaml"
        args_file.write_text("name: Alice\n")

        result = runner.invoke(cli, ["run", "(getArg, 0)", "--args-file", str(args_file)])
        assert result.exit_code == 2
        assert "expected a list" in result.output

    def test_source_from_stdin(self, runner):
        result = runner.invoke(cli, ["run", "-"], input="(array)\n")
        assert result.exit_code == 0
        assert result.output == "[]\n"

    def test_unknown_function_fails(self, runner):
        result = runner.invoke(cli, ["run", "(foo, 1)"])
        assert result.exit_code == 1
        assert "Error: Unknown function: foo" in result.output

    def test_syntax_error_fails(self, runner):
        result = runner.invoke(cli, ["run", ""])
        assert result.exit_code == 1
        assert "Tokenization failed" in result.output

    def test_max_depth_option(self, runner):
        result = runner.invoke(cli, ["run", "(array, (array))", "--max-depth", "1"])
        assert result.exit_code == 1
        assert "Maximum nesting depth of 1 exceeded" in result.output

    def test_max_depth_from_env(self, runner):
        result = runner.invoke(
            cli, ["run", "(array, (array))"], env={"CALLEXPR_MAX_DEPTH": "1"}
        )
        assert result.exit_code == 1
        assert "Maximum nesting depth" in result.output

    def test_invalid_max_depth_env(self, runner):
        result = runner.invoke(cli, ["run", "1"], env={"CALLEXPR_MAX_DEPTH": "x"})
        assert result.exit_code == 2

    def test_verbose_flag(self, runner):
        result = runner.invoke(cli, ["-v", "run", "1"])
        assert result.exit_code == 0


class TestParse:
    def test_parse_prints_ast(self, runner):
        result = runner.invoke(cli, ["parse", '(concat, "a", 1)'])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "call": "concat",
            "args": [{"literal": "a"}, {"literal": 1}],
        }

    def test_parse_error(self, runner):
        result = runner.invoke(cli, ["parse", "("])
        assert result.exit_code == 1
        assert "Expected function name" in result.output


class TestTokens:
    def test_tokens(self, runner):
        result = runner.invoke(cli, ["tokens", "(array, 1)"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 5
        assert "LPAREN" in lines[0]
        assert "WORD" in lines[1] and "'array'" in lines[1]


class TestFunctions:
    def test_functions_listing(self, runner):
        result = runner.invoke(cli, ["functions"])
        assert result.exit_code == 0
        for name in ["array", "concat", "getArg", "map", "json"]:
            assert f"({name}" in result.output

    def test_functions_json(self, runner):
        result = runner.invoke(cli, ["functions", "--json"])
        doc = json.loads(result.output)
        assert doc["functions"]["map"]["returnType"] == "map|bool"
