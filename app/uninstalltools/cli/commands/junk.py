"""Junk search directory command.

Lists the directories that are scanned for leftover application data.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from uninstalltools.cli.types import OutputFormat
from uninstalltools.locations.junk import JunkLocationCache
from uninstalltools.locations.resolver import LocationError, get_default_resolver
from uninstalltools.utils.formatting import console, print_error


def junk(
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List directories searched for leftover application data."""
    cache = JunkLocationCache(get_default_resolver())

    try:
        directories = cache.get_junk_search_directories()
    except LocationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(list(directories)))
        return

    table = Table(
        title="Junk Search Directories",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("Path", no_wrap=True)

    for index, directory in enumerate(directories, start=1):
        table.add_row(str(index), f"[text]{escape(directory)}[/]")

    console.print(table)
    console.print(f"\n[dim]{len(directories)} directories[/dim]")
