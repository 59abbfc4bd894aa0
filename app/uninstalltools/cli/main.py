"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from uninstalltools import __version__
from uninstalltools.cli.commands import check, config, junk, roots
from uninstalltools.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="uninstalltools",
    help="Discover program roots and leftover application data locations.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"uninstalltools version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ~/.config/uninstalltools/config.toml).",
        ),
    ] = None,
) -> None:
    """uninstalltools - Discover program roots and leftover data locations.

    Lists the directories applications get installed into and the
    directories where they leave data behind after removal.
    """
    _configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="roots")(roots.roots)
app.command(name="junk")(junk.junk)
app.command(name="check")(check.check)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
