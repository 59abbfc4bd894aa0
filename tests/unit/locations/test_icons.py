"""Tests for best-effort icon extraction."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from uninstalltools.locations.icons import (
    IconHandle,
    get_default_extractor,
    try_extract_associated_icon,
)


@pytest.fixture
def executable(tmp_path: Path) -> Path:
    path = tmp_path / "app.exe"
    path.write_bytes(b"MZ")
    return path


class TestTryExtractAssociatedIcon:
    """Tests for try_extract_associated_icon."""

    def test_icon_extracted(self, executable: Path) -> None:
        extractor = MagicMock(return_value=4242)

        result = try_extract_associated_icon(executable, extractor)

        assert result == IconHandle(handle=4242, source=str(executable))
        extractor.assert_called_once_with(str(executable))

    def test_none_path(self) -> None:
        extractor = MagicMock()
        assert try_extract_associated_icon(None, extractor) is None
        extractor.assert_not_called()

    def test_missing_file(self, tmp_path: Path) -> None:
        extractor = MagicMock()
        assert try_extract_associated_icon(tmp_path / "missing.exe", extractor) is None
        extractor.assert_not_called()

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        extractor = MagicMock()
        assert try_extract_associated_icon(tmp_path, extractor) is None

    def test_extractor_failure_swallowed(self, executable: Path) -> None:
        extractor = MagicMock(side_effect=OSError("file is locked"))
        assert try_extract_associated_icon(executable, extractor) is None

    def test_no_icon_in_file(self, executable: Path) -> None:
        extractor = MagicMock(return_value=None)
        assert try_extract_associated_icon(executable, extractor) is None

    def test_unsupported_platform(self, executable: Path) -> None:
        with patch("uninstalltools.locations.icons.get_default_extractor", return_value=None):
            assert try_extract_associated_icon(executable) is None


class TestGetDefaultExtractor:
    """Tests for get_default_extractor."""

    def test_none_outside_windows(self) -> None:
        with patch("uninstalltools.locations.icons.sys.platform", "linux"):
            assert get_default_extractor() is None

    def test_shell_extractor_on_windows(self) -> None:
        with patch("uninstalltools.locations.icons.sys.platform", "win32"):
            assert get_default_extractor() is not None
