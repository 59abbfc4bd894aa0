"""Console colors for the uninstalltools CLI.

Built-in colors can be overridden per name from the [colors] table of
~/.config/uninstalltools/theme.toml. A broken override file never stops
the CLI; it is reported and the built-in colors are used.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from uninstalltools.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class ThemeColors(BaseModel):
    """Named colors, each a #RGB or #RRGGBB hex code."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # One per architecture hint of a program root
    arch_x64: HexColor = "#c1ff62"
    arch_x86: HexColor = "#0e8ac8"
    arch_unknown: HexColor = "#d44ebc"


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load the theme colors, applying the user overrides if present.

    Args:
        path: Override file. If None, uses the default theme path.

    Returns:
        The validated colors, or the built-in ones if the file is missing
        or invalid.
    """
    theme_path = path or get_theme_path()

    try:
        with open(theme_path, "rb") as f:
            overrides = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Ignoring invalid colors in %s: %s", theme_path, e)
        return ThemeColors()

    logger.debug("Loaded theme overrides from %s", theme_path)
    return colors


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme the consoles render with.

    Every color is exposed as a style of the same name, plus the derived
    bold_header and dim styles.
    """
    colors = colors or load_theme()

    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, built on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
