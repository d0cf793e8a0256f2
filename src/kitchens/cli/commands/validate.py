"""Validate command for checking kitchen configuration files.

This module provides the `validate` command that checks a JSON kitchen
configuration against the schema and the module library, reporting
errors, warnings and the corrections the validator applied.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from kitchens.application import ValidateConfigCommand
from kitchens.application.config import ConfigError, ValidationResult, load_config
from kitchens.cli.commands.common import display_load_error, load_libraries


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON kitchen configuration to validate"),
    ],
    modules_file: Annotated[
        Path | None,
        typer.Option("--modules", help="Custom module library JSON file"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the fixed configuration to this file"),
    ] = None,
) -> None:
    """Validate a kitchen configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema errors (missing fields, invalid widths, duplicate ids, ...)
    - Widths outside their module variant's bounds (clamped)
    - Layout lines whose modules overflow the line length
    - Wall cabinets aligned with a module that does not exist

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        kitchens validate my-kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    _, module_library = load_libraries(None, modules_file)
    result = ValidateConfigCommand(module_library).execute(config)

    _display_validation_result(result)

    if output is not None and result.fixed_config is not None:
        data = result.fixed_config.model_dump(mode="json", by_alias=True, exclude_none=True)
        output.write_text(json.dumps(data, indent=2), encoding="utf-8")
        typer.echo(f"Fixed configuration written to {output}")

    raise typer.Exit(code=result.exit_code)


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation errors, warnings and a summary line."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
