"""Typer CLI for kitchen layout generation."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from kitchens.application import GenerateLayoutCommand
from kitchens.application.config import CenteringOptions, ConfigError, load_config
from kitchens.cli.commands import (
    materials_command,
    modules_command,
    templates_app,
    validate_command,
)
from kitchens.cli.commands.common import display_load_error, load_libraries
from kitchens.infrastructure import JsonExporter, LayoutTableFormatter

OUTPUT_FORMATS = ("table", "json")

app = typer.Typer(
    name="kitchens",
    help="Validate kitchen configurations and generate 3D-ready module layouts.",
)

app.command(name="validate")(validate_command)
app.command(name="materials")(materials_command)
app.command(name="modules")(modules_command)
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Validate kitchen configurations and generate 3D-ready module layouts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON kitchen configuration"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json"),
    ] = "table",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    center: Annotated[
        bool,
        typer.Option("--center", help="Center the layout inside the room"),
    ] = False,
    offset_x: Annotated[
        float,
        typer.Option("--offset-x", help="Extra X translation when centering"),
    ] = 0.0,
    offset_y: Annotated[
        float,
        typer.Option("--offset-y", help="Y translation when centering"),
    ] = 0.0,
    offset_z: Annotated[
        float,
        typer.Option("--offset-z", help="Extra Z translation when centering"),
    ] = 0.0,
    materials_file: Annotated[
        Path | None,
        typer.Option("--materials", help="Custom material library JSON file"),
    ] = None,
    modules_file: Annotated[
        Path | None,
        typer.Option("--modules", help="Custom module library JSON file"),
    ] = None,
) -> None:
    """Generate the module layout of a kitchen configuration.

    The configuration is validated first; generation runs on the fixed
    copy and stops with exit code 1 if validation reports errors.

    Examples:
        kitchens generate my-kitchen.json
        kitchens generate my-kitchen.json --format json --center -o layout.json
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Error: Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    material_library, module_library = load_libraries(materials_file, modules_file)
    centering = CenteringOptions(
        enabled=center,
        offset_x=offset_x,
        offset_y=offset_y,
        offset_z=offset_z,
    )
    result = GenerateLayoutCommand(material_library, module_library).execute(
        config, centering
    )

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    if not result.success:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        text = JsonExporter().export(result)
    else:
        text = LayoutTableFormatter().format(result.modules)

    if output_file is not None:
        output_file.write_text(text, encoding="utf-8")
        typer.echo(f"Layout written to {output_file}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
