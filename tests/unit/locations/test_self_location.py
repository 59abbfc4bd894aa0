"""Tests for the install location lookup."""

import sys
from pathlib import Path

import pytest
import uninstalltools
from uninstalltools.locations import self_location
from uninstalltools.locations.self_location import get_install_location


@pytest.fixture(autouse=True)
def _reset_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with an empty memoized location."""
    monkeypatch.setattr(self_location, "_install_location", None)


class TestGetInstallLocation:
    """Tests for get_install_location."""

    def test_package_directory(self) -> None:
        result = get_install_location()

        assert result == Path(uninstalltools.__file__).parent.resolve()
        assert result.is_dir()

    def test_memoized(self) -> None:
        first = get_install_location()
        second = get_install_location()

        assert first is second

    def test_frozen_executable_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Frozen builds strip the executable down to its directory."""
        executable = tmp_path / "uninstalltools.exe"
        executable.write_bytes(b"MZ")
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(executable))

        assert get_install_location() == tmp_path.resolve()

    def test_frozen_executable_without_suffix(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        executable = tmp_path / "uninstalltools"
        executable.write_bytes(b"\x7fELF")
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(executable))

        assert get_install_location() == tmp_path.resolve()
