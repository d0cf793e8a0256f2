"""Template manager for bundled kitchen configuration templates.

This module provides the TemplateManager class for accessing and copying
bundled template configurations, and create_kitchen_config for building a
complete kitchen in a chosen facade.
"""

import json
from importlib import resources
from pathlib import Path

from kitchens.application.config.loader import load_config_from_dict
from kitchens.application.config.schemas import KitchenConfig


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "complete-kitchen": "Straight kitchen with a pantry, five base cabinets and wall cabinets",
    "single-wall": "Compact single wall with drawers, sink and wall cabinets",
    "corner-kitchen": "L-shaped kitchen along two walls",
}

DEFAULT_FACADE = "cabinet_blue.matte"


class TemplateManager:
    """Manager for bundled kitchen configuration templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("single-wall", Path("my-kitchen.json"))
    """

    def __init__(self) -> None:
        self._data_package = "kitchens.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def load_template(self, name: str) -> KitchenConfig:
        """Parse a template into a KitchenConfig."""
        return load_config_from_dict(json.loads(self.get_template(name)))

    def init_template(self, name: str, output_path: Path) -> None:
        """Copy a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name)
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        """Check if a template with the given name exists."""
        return name in TEMPLATE_METADATA


def create_kitchen_config(facade: str = DEFAULT_FACADE) -> KitchenConfig:
    """Build the complete kitchen template with the given facade material.

    Every module without its own override uses the facade, so one call per
    catalog variant gives a family of otherwise identical kitchens.
    """
    config = TemplateManager().load_template("complete-kitchen")
    materials = config.default_materials.model_copy(update={"facade": facade})
    return config.model_copy(update={"default_materials": materials})
