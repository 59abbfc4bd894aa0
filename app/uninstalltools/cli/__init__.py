"""CLI package for uninstalltools.

This package contains the Typer application and all subcommands.
"""

from uninstalltools.cli.main import app

__all__ = ["app"]
