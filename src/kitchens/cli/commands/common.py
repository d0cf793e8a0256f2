"""Helpers shared by CLI commands: library loading and error display."""

from pathlib import Path

import typer

from kitchens.application.config import (
    ConfigError,
    MaterialLibrary,
    ModuleLibrary,
    load_material_library,
    load_module_library,
)
from kitchens.application.libraries import (
    default_material_library,
    default_module_library,
)


def load_libraries(
    materials_file: Path | None,
    modules_file: Path | None,
) -> tuple[MaterialLibrary, ModuleLibrary]:
    """Load custom library files, falling back to the bundled libraries.

    Exits with code 1 after displaying the error if a file cannot be loaded.
    """
    try:
        material_library = (
            load_material_library(materials_file)
            if materials_file is not None
            else default_material_library()
        )
        module_library = (
            load_module_library(modules_file)
            if modules_file is not None
            else default_module_library()
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return material_library, module_library


def display_load_error(error: ConfigError) -> None:
    """Display a configuration or library loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
