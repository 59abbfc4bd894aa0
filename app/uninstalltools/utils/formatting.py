"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from uninstalltools.core.theme import get_theme
from uninstalltools.locations.models import ArchitectureHint, ClassifiedRoot


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())

_ARCH_STYLES: dict[ArchitectureHint, str] = {
    ArchitectureHint.DEFINITELY_X64: "arch_x64",
    ArchitectureHint.DEFINITELY_X86: "arch_x86",
    ArchitectureHint.UNKNOWN: "arch_unknown",
}


def create_roots_table(title: str = "Program Roots") -> Table:
    """Create a pre-configured table for displaying program roots.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for program root display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Architecture", width=12, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("System", style="muted", justify="center")
    return table


def format_root_row(root: ClassifiedRoot) -> tuple[str, str, str]:
    """Format a classified root as a table row with proper styling.

    Args:
        root: The classified program root to format.

    Returns:
        Tuple of (architecture, path, system flag) with Rich markup.
    """
    style = _ARCH_STYLES[root.architecture]
    arch = f"[{style}]{root.architecture.value}[/]"
    path = f"[text]{escape(root.path)}[/]"
    system = "[warning]yes[/]" if root.directory.is_system_directory else "-"
    return (arch, path, system)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
