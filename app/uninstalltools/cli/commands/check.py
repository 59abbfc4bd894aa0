"""System directory check command.

Reports whether directories are protected system locations that must
never be treated as application roots.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from uninstalltools.locations.blacklist import is_questionable_directory_name, is_system_dir
from uninstalltools.utils.formatting import console, print_warning


def check(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Directories to check."),
    ],
) -> None:
    """Check whether directories are system directories.

    Exits with code 1 if any of the given directories is a system directory.
    """
    any_system = False

    for path in paths:
        if not path.is_dir():
            print_warning(f"Not a directory: {path}")
            continue

        label = escape(str(path))
        if is_system_dir(path):
            any_system = True
            console.print(f"[error]system[/]  {label}")
        elif is_questionable_directory_name(path.name):
            console.print(f"[warning]generic[/] {label}")
        else:
            console.print(f"[success]ok[/]      {label}")

    if any_system:
        raise typer.Exit(code=1)
