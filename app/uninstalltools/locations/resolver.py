"""Resolution of well-known system locations.

Maps the well-known locations that discovery depends on (program files
roots, program menus and application data roots) to absolute paths, and
answers the platform "system attribute" query for directories.

Resolution failures are fatal: discovery has no fallback for a location
the platform cannot provide.
"""

import ntpath
import os
import stat
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

# Start menu program folder, relative to the roaming or shared app data root
_START_MENU_PROGRAMS: tuple[str, ...] = ("Microsoft", "Windows", "Start Menu", "Programs")

# FILE_ATTRIBUTE_SYSTEM; stat only exports it on Windows
_FILE_ATTRIBUTE_SYSTEM: int = getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0x4)


class KnownLocation(str, Enum):
    """Well-known locations consumed by discovery.

    Attributes:
        PROGRAM_FILES: Native program files root.
        PROGRAM_FILES_X86: Alternate (32-bit) program files root.
        PROGRAMS: Per-user program menu root.
        COMMON_PROGRAMS: Shared program menu root.
        APPDATA: Per-user (roaming) application data root.
        COMMON_APPDATA: Shared application data root.
        LOCAL_APPDATA: Per-user local application data root.
    """

    PROGRAM_FILES = "program_files"
    PROGRAM_FILES_X86 = "program_files_x86"
    PROGRAMS = "programs"
    COMMON_PROGRAMS = "common_programs"
    APPDATA = "appdata"
    COMMON_APPDATA = "common_appdata"
    LOCAL_APPDATA = "local_appdata"


# Environment variables per location, first non-empty wins.
# ProgramFiles points at the x86 root inside a 32-bit process, so the
# native root prefers ProgramW6432. Without an architecture split
# ProgramFiles(x86) is unset and the alternate root falls back to the native one.
_ENVIRONMENT_VARIABLES: dict[KnownLocation, tuple[str, ...]] = {
    KnownLocation.PROGRAM_FILES: ("ProgramW6432", "ProgramFiles"),
    KnownLocation.PROGRAM_FILES_X86: ("ProgramFiles(x86)", "ProgramFiles"),
    KnownLocation.PROGRAMS: ("APPDATA",),
    KnownLocation.COMMON_PROGRAMS: ("ProgramData", "ALLUSERSPROFILE"),
    KnownLocation.APPDATA: ("APPDATA",),
    KnownLocation.COMMON_APPDATA: ("ProgramData", "ALLUSERSPROFILE"),
    KnownLocation.LOCAL_APPDATA: ("LOCALAPPDATA",),
}

_START_MENU_LOCATIONS: frozenset[KnownLocation] = frozenset(
    {KnownLocation.PROGRAMS, KnownLocation.COMMON_PROGRAMS}
)


class LocationError(Exception):
    """Base exception for location discovery errors."""


class PathResolutionError(LocationError):
    """Raised when a well-known location cannot be resolved."""

    def __init__(self, location: KnownLocation, detail: str) -> None:
        self.location = location
        super().__init__(f"Cannot resolve {location.value}: {detail}")


class PathResolver(ABC):
    """Abstract source of absolute paths for well-known locations.

    Example:
        >>> resolver = EnvironmentPathResolver()
        >>> resolver.resolve(KnownLocation.PROGRAM_FILES)
        'C:\\\\Program Files'
    """

    @abstractmethod
    def resolve(self, location: KnownLocation) -> str:
        """Return the absolute path of a well-known location.

        Args:
            location: Location to resolve.

        Returns:
            Absolute path string.

        Raises:
            PathResolutionError: If the location cannot be resolved.
        """


class MappingPathResolver(PathResolver):
    """Resolver backed by a fixed, host-supplied mapping.

    Args:
        paths: Mapping of known locations to their paths.
    """

    def __init__(self, paths: Mapping[KnownLocation, str | Path]) -> None:
        self._paths = {location: str(path) for location, path in paths.items()}

    def resolve(self, location: KnownLocation) -> str:
        try:
            return self._paths[location]
        except KeyError:
            raise PathResolutionError(location, "no path configured") from None


class EnvironmentPathResolver(PathResolver):
    """Resolver reading the Windows shell folder environment variables.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def resolve(self, location: KnownLocation) -> str:
        names = _ENVIRONMENT_VARIABLES[location]

        for name in names:
            value = self._environ.get(name)
            if value:
                if location in _START_MENU_LOCATIONS:
                    return ntpath.join(value, *_START_MENU_PROGRAMS)
                return value

        raise PathResolutionError(location, f"environment variable {names[0]} is not set")


def get_default_resolver() -> PathResolver:
    """Get the resolver for the running platform."""
    return EnvironmentPathResolver()


def has_system_attribute(path: str | Path) -> bool:
    """Check whether the platform marks a directory as a system entry.

    Platforms without file attributes never report the flag.

    Args:
        path: Path of an existing directory.

    Returns:
        True if FILE_ATTRIBUTE_SYSTEM is set on the entry.

    Raises:
        OSError: If the entry cannot be inspected.
    """
    attributes = getattr(os.stat(path, follow_symlinks=False), "st_file_attributes", 0)
    return bool(attributes & _FILE_ATTRIBUTE_SYSTEM)
