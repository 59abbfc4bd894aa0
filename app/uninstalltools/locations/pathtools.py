"""Platform-aware path comparison helpers.

Paths are compared the way the Windows filesystem compares them:
case-insensitively, with either separator, and ignoring trailing
separators.
"""

import ntpath
from collections.abc import Iterable
from pathlib import Path


def normalize_path(path: str | Path) -> str:
    """Normalize a path for equality comparison.

    Args:
        path: Path to normalize.

    Returns:
        Lowercase, backslash-separated path without trailing separators.

    Examples:
        >>> normalize_path("C:/Program Files/")
        'c:\\\\program files'
    """
    normalized = ntpath.normcase(ntpath.normpath(str(path)))

    # Keep the separator of a bare drive or filesystem root
    stripped = normalized.rstrip("\\")
    if not stripped or stripped.endswith(":"):
        return normalized
    return stripped


def paths_equal(first: str | Path, second: str | Path) -> bool:
    """Check if two paths refer to the same location."""
    return normalize_path(first) == normalize_path(second)


def distinct_paths(paths: Iterable[str]) -> list[str]:
    """Remove path-equal duplicates, keeping the first occurrence.

    Args:
        paths: Paths in priority order.

    Returns:
        Paths with duplicates removed, in first-seen order.
    """
    seen: set[str] = set()
    result: list[str] = []

    for path in paths:
        key = normalize_path(path)
        if key in seen:
            continue
        seen.add(key)
        result.append(path)

    return result
