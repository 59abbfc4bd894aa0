"""Directories worth scanning for leftover application data.

The junk search set is resolved once per cache instance: the program
menus, the application data roots and the per-application folders of
the VirtualStore redirection under the local application data root.
"""

import logging
import os
import threading

from uninstalltools.locations.pathtools import distinct_paths
from uninstalltools.locations.resolver import KnownLocation, PathResolver

logger = logging.getLogger(__name__)

# Redirection folder for writes to protected directories, below local app data
VIRTUAL_STORE_DIRNAME: str = "VirtualStore"

# Base junk locations, in search order
_JUNK_LOCATIONS: tuple[KnownLocation, ...] = (
    KnownLocation.PROGRAMS,
    KnownLocation.COMMON_PROGRAMS,
    KnownLocation.APPDATA,
    KnownLocation.COMMON_APPDATA,
)


class JunkLocationCache:
    """Memoizes the set of junk search directories.

    The first call resolves and scans; every later call returns the very
    same tuple, even if the filesystem changed in between. Concurrent
    first calls are serialized so the resolution runs at most once.

    Args:
        resolver: Source of the well-known application data locations.
    """

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver
        self._junk_dirs: tuple[str, ...] | None = None
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._junk_dirs is not None

    def get_junk_search_directories(self) -> tuple[str, ...]:
        """Get the deduplicated junk search directories.

        Returns:
            Directory paths in first-seen order.

        Raises:
            PathResolutionError: If a well-known location cannot be resolved.
                Nothing is cached in that case.
        """
        if self._junk_dirs is not None:
            return self._junk_dirs

        with self._lock:
            if self._junk_dirs is None:
                self._junk_dirs = self._resolve()
                logger.debug("Resolved %d junk search directories", len(self._junk_dirs))
            return self._junk_dirs

    def _resolve(self) -> tuple[str, ...]:
        local_data = self._resolver.resolve(KnownLocation.LOCAL_APPDATA)

        paths = [self._resolver.resolve(location) for location in _JUNK_LOCATIONS]
        paths.append(local_data)
        paths.extend(_virtual_store_directories(local_data))

        return tuple(distinct_paths(paths))


def _virtual_store_directories(local_data: str) -> list[str]:
    """List the per-application folders of the VirtualStore.

    Args:
        local_data: Local application data root.

    Returns:
        Subdirectory paths sorted by name, empty if the store is absent
        or cannot be read.
    """
    store = os.path.join(local_data, VIRTUAL_STORE_DIRNAME)
    if not os.path.isdir(store):
        return []

    try:
        with os.scandir(store) as entries:
            names = sorted(entry.name for entry in entries if entry.is_dir())
    except OSError as e:
        logger.warning("Cannot read virtual store %s: %s", store, e)
        return []

    return [os.path.join(store, name) for name in names]
