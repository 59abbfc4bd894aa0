"""Program root discovery command.

Lists the directories applications get installed into, tagged with
their architecture hint.
"""

import json
from typing import Annotated

import typer

from uninstalltools.cli.types import OutputFormat, require_config
from uninstalltools.locations.models import ClassifiedRoot
from uninstalltools.locations.program_roots import ProgramRootAggregator
from uninstalltools.locations.resolver import LocationError, get_default_resolver
from uninstalltools.utils.formatting import (
    console,
    create_roots_table,
    format_root_row,
    print_error,
    print_warning,
)


def roots(
    ctx: typer.Context,
    no_custom: Annotated[
        bool,
        typer.Option("--no-custom", help="Only list the platform program roots."),
    ] = False,
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
    """List program roots with their architecture."""
    config = require_config(ctx)
    aggregator = ProgramRootAggregator(
        get_default_resolver(),
        custom_roots=config.custom_program_files,
    )

    try:
        found = aggregator.get_program_roots(include_custom=not no_custom)
    except LocationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(found)
        return

    if not found:
        print_warning("No program roots found.")
        return

    table = create_roots_table()
    for root in found:
        table.add_row(*format_root_row(root))
    console.print(table)
    console.print(f"\n[dim]Found {len(found)} program roots[/dim]")


def _print_json(found: list[ClassifiedRoot]) -> None:
    """Display program roots as JSON."""
    data = [
        {
            "path": root.path,
            "name": root.directory.name,
            "architecture": root.architecture.value,
            "is_64bit": root.architecture.is_64bit,
            "is_system": root.directory.is_system,
        }
        for root in found
    ]
    console.print_json(json.dumps(data))
