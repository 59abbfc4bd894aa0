"""Domain models for discovered directories.

This module defines the immutable snapshots returned by program root
discovery: the directory reference itself and its architecture hint.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from uninstalltools.locations.blacklist import is_system_directory
from uninstalltools.locations.resolver import has_system_attribute


class ArchitectureHint(str, Enum):
    """Bitness of the applications installed below a program root.

    Attributes:
        DEFINITELY_X64: Native program files root on a 64-bit platform.
        DEFINITELY_X86: Alternate (32-bit) program files root.
        UNKNOWN: User-defined root whose bitness cannot be inferred.
    """

    DEFINITELY_X64 = "x64"
    DEFINITELY_X86 = "x86"
    UNKNOWN = "unknown"

    @property
    def is_64bit(self) -> bool | None:
        """Tri-state view of the hint (None when unknown)."""
        if self is ArchitectureHint.UNKNOWN:
            return None
        return self is ArchitectureHint.DEFINITELY_X64


@dataclass(frozen=True, slots=True)
class DirectoryRef:
    """Existence-checked snapshot of a directory.

    Attributes:
        path: Absolute directory path.
        name: Final path component.
        is_system: Whether the platform marks the directory as a system entry.
    """

    path: str
    name: str
    is_system: bool

    def __post_init__(self) -> None:
        """Validate directory reference data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_path(cls, path: str | Path) -> "DirectoryRef":
        """Snapshot an existing directory.

        Args:
            path: Directory path, made absolute before use.

        Returns:
            DirectoryRef for the directory.

        Raises:
            FileNotFoundError: If the path is not an existing directory.
            OSError: If the directory cannot be inspected.
        """
        absolute = os.path.abspath(path)
        if not os.path.isdir(absolute):
            msg = f"Directory does not exist: {absolute}"
            raise FileNotFoundError(msg)

        return cls(
            path=absolute,
            name=os.path.basename(absolute.rstrip("\\/")) or absolute,
            is_system=has_system_attribute(absolute),
        )

    @property
    def is_system_directory(self) -> bool:
        """Whether this directory must never be treated as an application root."""
        return is_system_directory(self.name, self.is_system)


@dataclass(frozen=True, slots=True)
class ClassifiedRoot:
    """A program root paired with its architecture hint."""

    directory: DirectoryRef
    architecture: ArchitectureHint

    @property
    def path(self) -> str:
        return self.directory.path
