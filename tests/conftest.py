"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from uninstalltools.locations.resolver import KnownLocation, MappingPathResolver


@pytest.fixture
def system_tree(tmp_path: Path) -> dict[KnownLocation, Path]:
    """Create a fake Windows directory layout with every known location."""
    layout = {
        KnownLocation.PROGRAM_FILES: tmp_path / "Program Files",
        KnownLocation.PROGRAM_FILES_X86: tmp_path / "Program Files (x86)",
        KnownLocation.PROGRAMS: tmp_path / "Roaming" / "Start Menu" / "Programs",
        KnownLocation.COMMON_PROGRAMS: tmp_path / "ProgramData" / "Start Menu" / "Programs",
        KnownLocation.APPDATA: tmp_path / "Roaming",
        KnownLocation.COMMON_APPDATA: tmp_path / "ProgramData",
        KnownLocation.LOCAL_APPDATA: tmp_path / "Local",
    }
    for path in layout.values():
        path.mkdir(parents=True, exist_ok=True)
    return layout


@pytest.fixture
def resolver(system_tree: dict[KnownLocation, Path]) -> MappingPathResolver:
    """Resolver pointing at the fake directory layout."""
    return MappingPathResolver(system_tree)
