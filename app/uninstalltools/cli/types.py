"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from uninstalltools.core.config import ConfigError, ToolsConfig, load_config_or_default
from uninstalltools.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for discovery commands."""

    TABLE = "table"
    JSON = "json"


def get_config_path(ctx: typer.Context) -> Path | None:
    """Get the config file path given on the command line, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path")


def require_config(ctx: typer.Context) -> ToolsConfig:
    """Load the configuration, exiting with an error if it is invalid.

    A missing config file yields the default configuration.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Loaded ToolsConfig.

    Raises:
        typer.Exit: If the config file cannot be parsed or validated.
    """
    try:
        return load_config_or_default(get_config_path(ctx))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
