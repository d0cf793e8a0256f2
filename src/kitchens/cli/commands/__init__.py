"""CLI command implementations for the kitchens application.

This package contains subcommands for the kitchens CLI, including:
- validate: Validate a kitchen configuration file
- materials / modules: Show the library catalogs
- templates: Manage kitchen configuration templates
"""

from kitchens.cli.commands.libraries import materials_command, modules_command
from kitchens.cli.commands.templates import templates_app
from kitchens.cli.commands.validate import validate_command

__all__ = ["materials_command", "modules_command", "templates_app", "validate_command"]
