"""Templates commands for listing and initializing kitchen templates.

This module provides the `templates` command group with subcommands for
listing available templates and initializing new configuration files from
templates.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from kitchens.application.templates import (
    TemplateManager,
    TemplateNotFoundError,
    create_kitchen_config,
)

templates_app = typer.Typer(
    name="templates",
    help="Manage kitchen configuration templates.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all available kitchen templates.

    Example:
        kitchens templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()

    typer.echo("Available templates:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")

    typer.echo()
    typer.echo("Use 'kitchens templates init <name>' to create a configuration file from a template.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
    facade: Annotated[
        str | None,
        typer.Option("--facade", help="Facade material key (complete-kitchen only)"),
    ] = None,
) -> None:
    """Initialize a new configuration file from a template.

    Examples:
        kitchens templates init single-wall
        kitchens templates init corner-kitchen --output my-kitchen.json
        kitchens templates init complete-kitchen --facade cabinet_blue.light
    """
    manager = TemplateManager()

    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)

    if facade is not None and name != "complete-kitchen":
        typer.echo("Error: --facade is only supported for complete-kitchen", err=True)
        raise typer.Exit(code=1)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        if facade is None:
            manager.init_template(name, output)
        else:
            config = create_kitchen_config(facade)
            data = config.model_dump(mode="json", by_alias=True, exclude_none=True)
            output.write_text(json.dumps(data, indent=2), encoding="utf-8")
        typer.echo(f"Created: {output}")
    except TemplateNotFoundError:
        typer.echo(f"Error: Template not found: {name}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
