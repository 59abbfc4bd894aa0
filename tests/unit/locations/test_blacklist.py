"""Tests for the system directory blacklist."""

from pathlib import Path
from unittest.mock import patch

import pytest
from uninstalltools.locations.blacklist import (
    DIRECTORY_BLACKLIST,
    QUESTIONABLE_DIRECTORY_NAMES,
    is_questionable_directory_name,
    is_system_dir,
    is_system_directory,
)


class TestDirectoryBlacklist:
    """Tests for the DIRECTORY_BLACKLIST constant."""

    def test_blacklist_has_all_entries(self) -> None:
        """The blacklist contains the 17 system directory names."""
        assert len(DIRECTORY_BLACKLIST) == 17
        assert len(set(DIRECTORY_BLACKLIST)) == 17

    def test_blacklist_contains_shared_folders(self) -> None:
        """Shared component folders are blacklisted."""
        assert "Common Files" in DIRECTORY_BLACKLIST
        assert "InstallShield Installation Information" in DIRECTORY_BLACKLIST

    def test_questionable_names(self) -> None:
        """Questionable names are the generic data folder names."""
        assert QUESTIONABLE_DIRECTORY_NAMES == (
            "install",
            "settings",
            "config",
            "configuration",
            "users",
            "data",
        )


class TestIsSystemDirectory:
    """Tests for the is_system_directory predicate."""

    @pytest.mark.parametrize("name", DIRECTORY_BLACKLIST)
    def test_blacklisted_names(self, name: str) -> None:
        """Every blacklisted name is a system directory."""
        assert is_system_directory(name, False) is True

    @pytest.mark.parametrize("name", ["COMMON FILES", "common files", "wInDoWs Nt", "TEMP"])
    def test_case_insensitive(self, name: str) -> None:
        """Blacklist matching ignores case."""
        assert is_system_directory(name, False) is True

    @pytest.mark.parametrize("name", ["Mozilla Firefox", "7-Zip", "Microsoft Office", "Temp2"])
    def test_regular_names(self, name: str) -> None:
        """Names outside the blacklist are not system directories."""
        assert is_system_directory(name, False) is False

    @pytest.mark.parametrize("name", ["Mozilla Firefox", "7-Zip", ""])
    def test_system_attribute(self, name: str) -> None:
        """The system attribute alone makes a directory a system directory."""
        assert is_system_directory(name, True) is True

    def test_questionable_names_not_system(self) -> None:
        """Questionable names are informational only."""
        for name in QUESTIONABLE_DIRECTORY_NAMES:
            assert is_system_directory(name, False) is False


class TestIsSystemDir:
    """Tests for the is_system_dir guard on actual directories."""

    def test_blacklisted_directory(self, tmp_path: Path) -> None:
        """A real directory with a blacklisted name is a system directory."""
        target = tmp_path / "Common Files"
        target.mkdir()
        assert is_system_dir(target) is True

    def test_regular_directory(self, tmp_path: Path) -> None:
        """A regular directory without the system attribute is not."""
        target = tmp_path / "VideoLAN"
        target.mkdir()
        with patch("uninstalltools.locations.blacklist.has_system_attribute", return_value=False):
            assert is_system_dir(target) is False

    def test_system_attribute_directory(self, tmp_path: Path) -> None:
        """A directory flagged by the platform is a system directory."""
        target = tmp_path / "VideoLAN"
        target.mkdir()
        with patch("uninstalltools.locations.blacklist.has_system_attribute", return_value=True):
            assert is_system_dir(target) is True

    def test_trailing_separator(self, tmp_path: Path) -> None:
        """The name is taken from the last non-empty component."""
        target = tmp_path / "Temp"
        target.mkdir()
        assert is_system_dir(f"{target}/") is True

    def test_unreadable_directory_is_skipped(self, tmp_path: Path) -> None:
        """Directories whose attributes cannot be read are treated as system."""
        missing = tmp_path / "gone"
        assert is_system_dir(missing) is True


class TestIsQuestionableDirectoryName:
    """Tests for is_questionable_directory_name."""

    def test_generic_names(self) -> None:
        assert is_questionable_directory_name("Data") is True
        assert is_questionable_directory_name("SETTINGS") is True

    def test_specific_names(self) -> None:
        assert is_questionable_directory_name("Notepad++") is False
