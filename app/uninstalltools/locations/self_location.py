"""Location of the running uninstalltools installation."""

import sys
import threading
from pathlib import Path

import uninstalltools

_install_location: Path | None = None
_lock = threading.Lock()


def get_install_location() -> Path:
    """Get the directory the running program is installed in.

    Frozen executables report their own directory, otherwise the
    directory of the uninstalltools package is used. The value is
    computed once and memoized.

    Returns:
        Absolute directory path.
    """
    global _install_location

    if _install_location is not None:
        return _install_location

    with _lock:
        if _install_location is None:
            _install_location = _locate()
        return _install_location


def _locate() -> Path:
    if getattr(sys, "frozen", False):
        location = Path(sys.executable)
    else:
        package_file = uninstalltools.__file__
        assert package_file is not None, "uninstalltools has no file location"
        location = Path(package_file).parent

    location = location.resolve()
    if location.is_file():
        location = location.parent

    return location
