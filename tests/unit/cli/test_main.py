"""Unit tests for the main CLI application."""

from typer.testing import CliRunner
from uninstalltools import __version__
from uninstalltools.cli.main import app

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"uninstalltools version {__version__}" in result.stdout

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert "roots" in result.output
        assert "junk" in result.output
