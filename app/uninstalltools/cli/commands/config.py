"""Configuration commands.

Provides commands to show the configuration and to manage custom
program roots and the unattended automation flags.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from uninstalltools.cli.types import get_config_path, require_config
from uninstalltools.core.config import ConfigError, ToolsConfig, save_config
from uninstalltools.core.paths import get_config_path as get_default_config_path
from uninstalltools.locations.pathtools import paths_equal
from uninstalltools.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Show and edit the uninstalltools configuration.",
    no_args_is_help=True,
)


def _save(ctx: typer.Context, config: ToolsConfig) -> Path:
    """Save the configuration, exiting with an error on failure."""
    try:
        return save_config(config, get_config_path(ctx))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = require_config(ctx)
    path = get_config_path(ctx) or get_default_config_path()

    console.print(f"[bold_header]Config file:[/] {escape(str(path))}")
    console.print(f"Quiet automation: {config.quiet_automation}")
    console.print(f"Kill stuck processes: {config.quiet_automation_kill_stuck}")

    if not config.custom_program_files:
        console.print("Custom program roots: [muted]none[/]")
        return

    console.print("Custom program roots:")
    for root in config.custom_program_files:
        console.print(f"  - {escape(root)}")


@app.command("add-root")
def add_root(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Directory applications get installed into.")],
) -> None:
    """Add a custom program root."""
    config = require_config(ctx)

    if any(paths_equal(path, root) for root in config.custom_program_files):
        print_info(f"Already configured: {path}")
        return

    try:
        updated = ToolsConfig.model_validate(
            {
                **config.model_dump(),
                "custom_program_files": (*config.custom_program_files, path),
            }
        )
    except ValidationError as e:
        print_error(f"Invalid program root: {e}")
        raise typer.Exit(code=1) from e

    saved = _save(ctx, updated)
    print_success(f"Added program root {path} to {saved}")


@app.command("remove-root")
def remove_root(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Configured program root to remove.")],
) -> None:
    """Remove a custom program root."""
    config = require_config(ctx)

    remaining = tuple(root for root in config.custom_program_files if not paths_equal(path, root))
    if len(remaining) == len(config.custom_program_files):
        print_error(f"Not a configured program root: {path}")
        raise typer.Exit(code=1)

    saved = _save(ctx, config.model_copy(update={"custom_program_files": remaining}))
    print_success(f"Removed program root {path} from {saved}")


@app.command()
def automation(
    ctx: typer.Context,
    quiet: Annotated[
        bool | None,
        typer.Option("--quiet/--no-quiet", help="Run uninstallers unattended."),
    ] = None,
    kill_stuck: Annotated[
        bool | None,
        typer.Option(
            "--kill-stuck/--no-kill-stuck",
            help="Allow unattended runs to terminate unresponsive processes.",
        ),
    ] = None,
) -> None:
    """Set the unattended automation flags."""
    config = require_config(ctx)

    update: dict[str, bool] = {}
    if quiet is not None:
        update["quiet_automation"] = quiet
    if kill_stuck is not None:
        update["quiet_automation_kill_stuck"] = kill_stuck

    if not update:
        print_info("Nothing to change. Use --quiet/--no-quiet or --kill-stuck/--no-kill-stuck.")
        return

    saved = _save(ctx, config.model_copy(update=update))
    print_success(f"Saved automation settings to {saved}")
