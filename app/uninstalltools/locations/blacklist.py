"""System directories that must never be treated as application roots.

This module defines the directory names that are owned by the operating
system regardless of their attribute bits, and the predicate that guards
directory walkers against descending into system locations.
"""

import logging
import os
from pathlib import Path

from uninstalltools.locations.resolver import has_system_attribute

logger = logging.getLogger(__name__)

# Directory names owned by the system (matched case-insensitively).
# Uses immutable tuple per project conventions.
DIRECTORY_BLACKLIST: tuple[str, ...] = (
    "Microsoft",
    "Microsoft Games",
    "Temp",
    "Programs",
    "Common",
    "Common Files",
    "Clients",
    "Desktop",
    "Internet Explorer",
    "Windows NT",
    "Windows Photo Viewer",
    "Windows Mail",
    "Windows Defender",
    "Windows Media Player",
    "Uninstall Information",
    "Reference Assemblies",
    "InstallShield Installation Information",
)

# Generic names that rarely identify a single application.
# Informational only, never used to exclude a directory.
QUESTIONABLE_DIRECTORY_NAMES: tuple[str, ...] = (
    "install",
    "settings",
    "config",
    "configuration",
    "users",
    "data",
)

_BLACKLIST_FOLDED: frozenset[str] = frozenset(name.casefold() for name in DIRECTORY_BLACKLIST)
_QUESTIONABLE_FOLDED: frozenset[str] = frozenset(
    name.casefold() for name in QUESTIONABLE_DIRECTORY_NAMES
)


def is_system_directory(name: str, is_system_attribute_set: bool) -> bool:
    """Check if a directory is a protected system directory.

    Args:
        name: Directory name (final path component).
        is_system_attribute_set: Whether the platform marks the directory
            as a system entry.

    Returns:
        True if the name is blacklisted or the system attribute is set.
    """
    return is_system_attribute_set or name.casefold() in _BLACKLIST_FOLDED


def is_system_dir(path: str | Path) -> bool:
    """Check an actual directory against the blacklist and its attributes.

    Intended as a guard for directory walkers before they recurse.
    A directory whose attributes cannot be read is treated as a system
    directory so that walkers skip it.

    Args:
        path: Directory path.

    Returns:
        True if the directory must not be traversed as an application root.
    """
    name = os.path.basename(os.fspath(path).rstrip("\\/"))

    try:
        is_system = has_system_attribute(path)
    except OSError as e:
        logger.debug("Cannot read attributes of %s: %s", path, e)
        return True

    return is_system_directory(name, is_system)


def is_questionable_directory_name(name: str) -> bool:
    """Check if a directory name is too generic to identify an application.

    Args:
        name: Directory name.

    Returns:
        True if the name is in QUESTIONABLE_DIRECTORY_NAMES.
    """
    return name.casefold() in _QUESTIONABLE_FOLDED
