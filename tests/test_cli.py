"""
Tests for the CLI module (decaf_compiler/cli.py).

These tests cover the command-line interface and check_decaf_source function.
"""

import pytest
from click.testing import CliRunner

from decaf_compiler.cli import check_decaf_source, main, setup_logging
from decaf_compiler.src.common.constants import AnalyzerConfig

VALID_SOURCE = """
int total;

def int square(int n) {
    return n * n;
}

def int main() {
    total = square(4);
    return total;
}
"""

INVALID_SOURCE = """
def void main() {
    bool flag;
    flag = 1;
    break;
}
"""


class TestCheckDecafSource:
    """Tests for the check_decaf_source function."""

    def test_valid_program_passes(self):
        success, summary, messages = check_decaf_source(VALID_SOURCE)
        assert success is True
        assert summary == "Semantic analysis passed"
        assert messages == []

    def test_semantic_errors_fail(self):
        success, summary, messages = check_decaf_source(INVALID_SOURCE)
        assert success is False
        assert summary == "Semantic analysis failed with 2 error(s)"
        assert messages == [
            "ERROR [semantic:4:5]: Type mismatch on line 4. "
            "Expected 'flag' to be of type 'bool', but was 'int'",
            "ERROR [semantic:5:5]: Invalid break on line 5",
        ]

    def test_messages_include_column_when_known(self):
        success, _, messages = check_decaf_source("int x; int x;")
        assert success is False
        assert messages[0].startswith("ERROR [semantic:1:12]: Duplicate symbol 'x'")

    def test_syntax_error_raises(self):
        with pytest.raises(SyntaxError):
            check_decaf_source("def int main( {")

    def test_custom_config(self):
        source = "def int start() { return 0; }"
        success, _, _ = check_decaf_source(source)
        assert success is False
        success, _, _ = check_decaf_source(
            source, config=AnalyzerConfig(entry_point="start")
        )
        assert success is True

    def test_print_tree(self, capsys):
        success, _, _ = check_decaf_source(VALID_SOURCE, print_tree=True)
        assert success is True
        output = capsys.readouterr().out
        assert output.startswith("Program")
        assert "FuncDecl" in output
        assert "inferred_type: int" in output

    def test_different_log_levels(self):
        for level in ["debug", "info", "warning", "error"]:
            success, _, _ = check_decaf_source(VALID_SOURCE, log_level=level)
            assert success is True


class TestSetupLogging:
    """Tests for logging setup."""

    def test_valid_log_level(self):
        """Valid log levels don't raise."""
        for level in ["debug", "info", "warning", "error"]:
            setup_logging(level)  # Should not raise

    def test_invalid_log_level(self):
        """Invalid log level raises ValueError."""
        with pytest.raises(ValueError):
            setup_logging("invalid_level")


class TestCliMain:
    """Tests for the main CLI command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def valid_file(self, tmp_path):
        file = tmp_path / "valid.decaf"
        file.write_text(VALID_SOURCE, encoding="utf-8")
        return file

    @pytest.fixture
    def invalid_file(self, tmp_path):
        file = tmp_path / "invalid.decaf"
        file.write_text(INVALID_SOURCE, encoding="utf-8")
        return file

    def test_check_file(self, runner, valid_file):
        result = runner.invoke(main, [str(valid_file)])
        assert result.exit_code == 0
        assert "ERROR" not in result.output

    def test_check_string_input(self, runner):
        result = runner.invoke(main, ["--input", "def int main() { return 0; }"])
        assert result.exit_code == 0

    def test_failing_file(self, runner, invalid_file):
        result = runner.invoke(main, [str(invalid_file)])
        assert result.exit_code == 1
        assert "Invalid break on line 5" in result.output
        assert "Semantic analysis failed with 2 error(s)" in result.output

    def test_file_path_in_messages(self, runner, invalid_file):
        result = runner.invoke(main, [str(invalid_file)])
        assert result.exit_code == 1
        assert "ERROR [semantic:" in result.output

    def test_both_file_and_string_fails(self, runner, valid_file):
        result = runner.invoke(main, [str(valid_file), "--input", "int x;"])
        assert result.exit_code == 1
        assert "Cannot specify both" in result.output

    def test_no_input_fails(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 1
        assert "Must specify" in result.output

    def test_missing_file_fails(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.decaf")])
        assert result.exit_code != 0

    def test_syntax_error_file(self, runner, tmp_path):
        bad_file = tmp_path / "bad.decaf"
        bad_file.write_text("def int main() { return 0 }", encoding="utf-8")
        result = runner.invoke(main, [str(bad_file)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_print_ast_flag(self, runner, valid_file):
        result = runner.invoke(main, [str(valid_file), "--print-ast"])
        assert result.exit_code == 0
        assert "Program" in result.output
        assert "Return" in result.output

    def test_entry_point_option(self, runner):
        source = "def int start() { return 0; }"
        result = runner.invoke(main, ["--input", source])
        assert result.exit_code == 1
        assert "does not contain a 'main' function" in result.output

        result = runner.invoke(main, ["--input", source, "--entry-point", "start"])
        assert result.exit_code == 0

    def test_no_index_checks_flag(self, runner):
        source = "int a[2]; def int main() { a[7] = 1; return 0; }"
        result = runner.invoke(main, ["--input", source])
        assert result.exit_code == 1
        assert "index out of bounds for length 2" in result.output

        result = runner.invoke(main, ["--input", source, "--no-index-checks"])
        assert result.exit_code == 0

    def test_log_level_info_reports_summary(self, runner, valid_file):
        result = runner.invoke(main, [str(valid_file), "--log-level", "info"])
        assert result.exit_code == 0
        assert "Semantic analysis passed" in result.output

    def test_invalid_log_level_rejected(self, runner, valid_file):
        result = runner.invoke(main, [str(valid_file), "--log-level", "loud"])
        assert result.exit_code == 2
