"""CLI commands for uninstalltools.

This package contains all subcommand implementations.
"""

from uninstalltools.cli.commands import check, config, junk, roots

__all__ = ["check", "config", "junk", "roots"]
