"""Tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from mere_table.cli import cli

EXPECTED_TABLE = (
    "+-----+-------+\n"
    "|     |latency|\n"
    "| host|---+---|\n"
    "|     |p50|p99|\n"
    "+=====+===+===+\n"
    "|web-1| 12| 48|\n"
    "|web-2|  9|151|\n"
    "+-----+---+---+\n"
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self, runner: CliRunner) -> None:
        """Test CLI help message."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "mere-table box-drawn text table CLI" in result.output
        assert "--log-level" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        """Test render command help."""
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--file" in result.output
        assert "--output" in result.output

    def test_render_to_stdout(self, runner: CliRunner, manifest_file: Path) -> None:
        """Render prints the table exactly."""
        result = runner.invoke(cli, ["render", "-f", str(manifest_file)])
        assert result.exit_code == 0, result.output
        assert result.output == EXPECTED_TABLE

    def test_render_to_file(
        self, runner: CliRunner, manifest_file: Path, tmp_path: Path
    ) -> None:
        """Render writes the table to --output."""
        output = tmp_path / "out.txt"
        result = runner.invoke(cli, ["render", "-f", str(manifest_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text() == EXPECTED_TABLE
        assert f"Table written to: {output}" in result.output

    def test_render_reports_library_errors(self, runner: CliRunner, tmp_path: Path) -> None:
        """Library errors exit with status 1 and a message."""
        path = tmp_path / "bad.yaml"
        path.write_text("columns: [a, b]\nrows:\n  - [only-one]\n")

        result = runner.invoke(cli, ["render", "-f", str(path)])

        assert result.exit_code == 1
        assert "Error: Row has 1 value(s) but the table has 2 leaf column(s)" in result.output

    def test_render_reports_invalid_manifest(self, runner: CliRunner, tmp_path: Path) -> None:
        """A manifest without columns is rejected."""
        path = tmp_path / "empty.yaml"
        path.write_text("rows: []\n")

        result = runner.invoke(cli, ["render", "-f", str(path)])

        assert result.exit_code == 1
        assert "Error: Invalid manifest" in result.output

    def test_render_reports_undecodable_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A manifest that is not UTF-8 is reported, not raised."""
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"columns: [\xff\xfe]\n")

        result = runner.invoke(cli, ["render", "-f", str(path)])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert f"Error: Invalid manifest {path}: cannot read file" in result.output

    def test_render_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing manifest file is a usage error."""
        result = runner.invoke(cli, ["render", "-f", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2

    def test_widths(self, runner: CliRunner, manifest_file: Path) -> None:
        """Widths lists every column and subcolumn."""
        result = runner.invoke(cli, ["widths", "-f", str(manifest_file)])

        assert result.exit_code == 0, result.output
        assert result.output == "host: 5\nlatency: 7\n  p50: 3\n  p99: 3\n"

    def test_log_level_from_env(self, runner: CliRunner, manifest_file: Path) -> None:
        """The log level can be set through the environment."""
        result = runner.invoke(
            cli,
            ["render", "-f", str(manifest_file)],
            env={"MERE_TABLE_LOG_LEVEL": "debug"},
        )
        assert result.exit_code == 0, result.output

    def test_invalid_log_level(self, runner: CliRunner, manifest_file: Path) -> None:
        """Unknown log levels are rejected."""
        result = runner.invoke(cli, ["--log-level", "LOUD", "render", "-f", str(manifest_file)])
        assert result.exit_code == 2
