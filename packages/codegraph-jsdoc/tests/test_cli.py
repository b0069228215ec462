"""
CLI tests (typer CliRunner).
"""

import json

import pytest
from typer.testing import CliRunner

from codegraph_jsdoc.cli import app

pytestmark = pytest.mark.integration

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ECMA_VERSION",
        "CATCH_HANDLER_FIELD",
        "PRIVILEGED_PATHS",
        "FALLBACK_PATHS",
        "CONTEXT_DIR",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(f"CODEGRAPH_JSDOC_{name}", raising=False)


class TestParseCommand:
    def test_prints_program_json(self, tmp_path):
        """Test parse prints the Program as JSON."""
        source = tmp_path / "add.js"
        source.write_text("/** Adds. */\nfunction add(a, b) { return a + b; }\n")

        result = runner.invoke(app, ["parse", str(source)])

        assert result.exit_code == 0
        program = json.loads(result.stdout)
        assert program["type"] == "Program"
        assert program["body"][0]["id"]["name"] == "add"
        assert program["body"][0]["leadingComments"][0]["raw"] == "/** Adds. */"

    def test_handlers_flag(self, tmp_path):
        """Test --handlers switches to the handlers list."""
        source = tmp_path / "try.js"
        source.write_text("try { a(); } catch (e) {}\n")

        result = runner.invoke(app, ["parse", str(source), "--handlers", "--pretty"])

        assert result.exit_code == 0
        stmt = json.loads(result.stdout)["body"][0]
        assert "handler" not in stmt
        assert stmt["handlers"][0]["param"]["name"] == "e"

    def test_unsupported_syntax_exits_1(self, tmp_path):
        """Test unsupported syntax exits with code 1."""
        source = tmp_path / "mod.js"
        source.write_text('import x from "y";\n')

        result = runner.invoke(app, ["parse", str(source)])

        assert result.exit_code == 1

    def test_language_level_option(self, tmp_path):
        """Test --ecma-version gates syntax."""
        source = tmp_path / "let.js"
        source.write_text("let a = 1;\n")

        assert runner.invoke(app, ["parse", str(source), "--ecma-version", "5"]).exit_code == 1
        assert runner.invoke(app, ["parse", str(source), "--ecma-version", "2015"]).exit_code == 0

    def test_invalid_language_level_exits_2(self, tmp_path):
        """Test an out-of-range --ecma-version exits with code 2."""
        source = tmp_path / "a.js"
        source.write_text("a;\n")

        assert runner.invoke(app, ["parse", str(source), "--ecma-version", "2020"]).exit_code == 2

    def test_wrong_encoding_exits_2(self, tmp_path):
        """Test undecodable input and unknown codecs exit with code 2."""
        source = tmp_path / "latin.js"
        source.write_bytes('var s = "caf\u00e9";\n'.encode("latin-1"))

        assert runner.invoke(app, ["parse", str(source)]).exit_code == 2
        assert runner.invoke(app, ["parse", str(source), "--encoding", "no-such-codec"]).exit_code == 2
        assert runner.invoke(app, ["parse", str(source), "--encoding", "latin-1"]).exit_code == 0


class TestResolveCommand:
    def test_prints_resolved_path(self, module_tree, tmp_path):
        """Test resolve prints the module path."""
        result = runner.invoke(
            app,
            ["resolve", "bar", "--path", str(module_tree), "--context", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert str((module_tree / "bar" / "bar.js").resolve()) in result.stdout

    def test_fallback_path(self, module_tree, tmp_path):
        """Test --fallback roots are searched."""
        empty = tmp_path / "empty"
        empty.mkdir()

        result = runner.invoke(
            app,
            ["resolve", "baz", "--path", str(empty), "--fallback", str(module_tree), "--context", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert "index.js" in result.stdout

    def test_not_found_exits_1(self, module_tree, tmp_path):
        """Test a missing module exits with code 1."""
        result = runner.invoke(
            app,
            ["resolve", "codegraph-jsdoc-nothing", "--path", str(module_tree), "--context", str(tmp_path)],
        )

        assert result.exit_code == 1

    def test_log_options(self, module_tree, tmp_path):
        """Test global logging options are accepted."""
        result = runner.invoke(
            app,
            [
                "--log-level",
                "ERROR",
                "--log-format",
                "json",
                "resolve",
                "foo",
                "--path",
                str(module_tree),
                "--context",
                str(tmp_path),
            ],
        )

        assert result.exit_code == 0


class TestLoggingOptions:
    """Logging setup from options and environment"""

    @pytest.fixture
    def captured(self, monkeypatch):
        calls = []
        monkeypatch.setattr("codegraph_jsdoc.cli.setup_logging", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_environment_sets_defaults(self, monkeypatch, captured, module_tree, tmp_path):
        """Test CODEGRAPH_JSDOC_LOG_* apply when no option is given."""
        monkeypatch.setenv("CODEGRAPH_JSDOC_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CODEGRAPH_JSDOC_LOG_FORMAT", "json")

        result = runner.invoke(app, ["resolve", "foo", "--path", str(module_tree), "--context", str(tmp_path)])

        assert result.exit_code == 0
        assert captured == [{"level": "DEBUG", "format": "json"}]

    def test_options_override_environment(self, monkeypatch, captured, module_tree, tmp_path):
        """Test --log-level wins over the environment."""
        monkeypatch.setenv("CODEGRAPH_JSDOC_LOG_LEVEL", "DEBUG")

        result = runner.invoke(
            app,
            ["--log-level", "ERROR", "resolve", "foo", "--path", str(module_tree), "--context", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert captured == [{"level": "ERROR", "format": "console"}]

    def test_invalid_environment_exits_2(self, monkeypatch, captured, module_tree):
        """Test a bad CODEGRAPH_JSDOC_LOG_FORMAT exits with code 2."""
        monkeypatch.setenv("CODEGRAPH_JSDOC_LOG_FORMAT", "xml")

        result = runner.invoke(app, ["resolve", "foo", "--path", str(module_tree)])

        assert result.exit_code == 2
        assert captured == []
