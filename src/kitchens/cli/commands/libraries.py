"""Library commands: show the material and module catalogs."""

import json
from pathlib import Path
from typing import Annotated

import typer

from kitchens.application.libraries import (
    ALL,
    LibraryCategoryError,
    describe_material_library,
    describe_module_library,
)
from kitchens.cli.commands.common import load_libraries


def materials_command(
    category: Annotated[
        str,
        typer.Argument(help="facades, countertops, handles or all"),
    ] = ALL,
    materials_file: Annotated[
        Path | None,
        typer.Option("--materials", help="Custom material library JSON file"),
    ] = None,
) -> None:
    """Show the material catalog as JSON.

    Example:
        kitchens materials facades
    """
    material_library, _ = load_libraries(materials_file, None)
    try:
        data = describe_material_library(material_library, category)
    except LibraryCategoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(data, indent=2))


def modules_command(
    module_type: Annotated[
        str,
        typer.Argument(help="Module type (base, sink, wall, ...) or all"),
    ] = ALL,
    modules_file: Annotated[
        Path | None,
        typer.Option("--modules", help="Custom module library JSON file"),
    ] = None,
) -> None:
    """Show the module catalog as JSON.

    Example:
        kitchens modules sink
    """
    _, module_library = load_libraries(None, modules_file)
    try:
        data = describe_module_library(module_library, module_type)
    except LibraryCategoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(data, indent=2))
