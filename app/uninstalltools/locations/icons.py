"""Best-effort extraction of the icon associated with a file.

Extraction never raises: a missing file, an unsupported format or a
locked file all result in no icon.
"""

import logging
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IconHandle:
    """Native icon extracted from a file.

    Attributes:
        handle: Platform icon handle (HICON on Windows).
        source: Path of the file the icon was extracted from.
    """

    handle: int
    source: str


# Takes a file path, returns a native icon handle or None
IconExtractor = Callable[[str], int | None]


def _shell_extract_icon(path: str) -> int | None:
    """Extract the associated icon through the Windows shell."""
    import ctypes
    from ctypes import wintypes

    shell32 = ctypes.windll.shell32  # type: ignore[attr-defined]
    shell32.ExtractAssociatedIconW.restype = wintypes.HICON
    shell32.ExtractAssociatedIconW.argtypes = [
        wintypes.HINSTANCE,
        wintypes.LPWSTR,
        ctypes.POINTER(wintypes.WORD),
    ]

    buffer = ctypes.create_unicode_buffer(path, 260)
    index = wintypes.WORD(0)
    handle = shell32.ExtractAssociatedIconW(None, buffer, ctypes.byref(index))
    return handle or None


def get_default_extractor() -> IconExtractor | None:
    """Get the icon extractor of the running platform, None if unsupported."""
    if sys.platform == "win32":
        return _shell_extract_icon
    return None


def try_extract_associated_icon(
    path: str | Path | None,
    extractor: IconExtractor | None = None,
) -> IconHandle | None:
    """Extract the icon associated with a file.

    Args:
        path: File to extract the icon from.
        extractor: Extraction backend. Defaults to the platform extractor.

    Returns:
        IconHandle, or None if no icon could be extracted.
    """
    if path is None or not os.path.isfile(path):
        return None

    backend = extractor or get_default_extractor()
    if backend is None:
        return None

    source = os.fspath(path)
    try:
        handle = backend(source)
    except Exception as e:
        logger.debug("Icon extraction failed for %s: %s", source, e)
        return None

    if not handle:
        return None
    return IconHandle(handle=handle, source=source)
