"""Unit tests for the check command."""

from pathlib import Path

from typer.testing import CliRunner
from uninstalltools.cli.main import app

runner = CliRunner()


class TestCheckCommand:
    """Tests for uninstalltools check."""

    def test_blacklisted_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "Common Files"
        target.mkdir()

        result = runner.invoke(app, ["check", str(target)])

        assert result.exit_code == 1
        assert "system" in result.stdout

    def test_regular_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "VLC"
        target.mkdir()

        result = runner.invoke(app, ["check", str(target)])

        assert result.exit_code == 0
        assert "ok" in result.stdout

    def test_generic_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "Data"
        target.mkdir()

        result = runner.invoke(app, ["check", str(target)])

        assert result.exit_code == 0
        assert "generic" in result.stdout

    def test_missing_directory_warns(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", str(tmp_path / "missing")])

        assert result.exit_code == 0
        assert "Not a directory" in result.output

    def test_mixed_directories(self, tmp_path: Path) -> None:
        regular = tmp_path / "VLC"
        system = tmp_path / "Temp"
        regular.mkdir()
        system.mkdir()

        result = runner.invoke(app, ["check", str(regular), str(system)])

        assert result.exit_code == 1
