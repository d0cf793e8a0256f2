"""In-memory kitchen store driving the designer.

The store owns the configuration being edited. Every mutation re-runs the
pipeline (validate, then generate) so ``renderable_modules``, ``warnings``
and ``errors`` always describe the current configuration.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Any

from kitchens.application.config.schemas import (
    CenteringOptions,
    KitchenConfig,
    LayoutLine,
    MaterialLibrary,
    ModuleConfig,
    ModuleLibrary,
    RenderableModule,
)
from kitchens.application.libraries import (
    default_material_library,
    default_module_library,
)
from kitchens.application.services import generate_with_centering, validate_and_fix
from kitchens.application.templates import create_kitchen_config
from kitchens.domain.value_objects import MaterialSlot

logger = logging.getLogger(__name__)

STARTER_FACADE = "cabinet_blue"


class KitchenStore:
    """Holds the current kitchen and its generated layout.

    Example:
        store = KitchenStore()
        store.change_default_material(MaterialSlot.FACADE, "loft_dark_glossy")
        for module in store.renderable_modules:
            print(module.id, module.position)
    """

    def __init__(
        self,
        config: KitchenConfig | None = None,
        material_library: MaterialLibrary | None = None,
        module_library: ModuleLibrary | None = None,
        centering: CenteringOptions | None = None,
    ) -> None:
        self.material_library = material_library or default_material_library()
        self.module_library = module_library or default_module_library()
        self.centering = centering or CenteringOptions()
        self.current_config = config or create_kitchen_config(STARTER_FACADE)
        self.renderable_modules: list[RenderableModule] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self._ids = count(1)
        self.regenerate()

    def regenerate(self) -> None:
        """Validate the current config, adopt its fixed copy and regenerate.

        Modules are only generated from a config without errors; otherwise
        the previous layout is cleared and the errors are kept.
        """
        logger.debug(f"Regenerating kitchen '{self.current_config.kitchen_id}'")
        validation = validate_and_fix(
            self.current_config, None, self.module_library
        )
        self.warnings = list(validation.warnings)
        self.errors = list(validation.errors)
        self.renderable_modules = []
        if not validation.is_valid or validation.fixed_config is None:
            return

        self.current_config = validation.fixed_config
        self.renderable_modules = generate_with_centering(
            self.current_config, self.material_library, self.centering
        )

    def load_config(self, config: KitchenConfig) -> None:
        """Replace the current configuration."""
        self.current_config = config
        self.regenerate()

    def add_module_to_line(
        self,
        line_id: str,
        module_data: dict[str, Any],
    ) -> str | None:
        """Append a module to a line, giving it a fresh id.

        Args:
            line_id: Line to append to.
            module_data: Module fields without ``id``, snake_case or camelCase.

        Returns:
            The new module id, or None when the line does not exist.
        """
        line = self.current_config.find_line(line_id)
        if line is None:
            logger.warning(f"Cannot add module: line {line_id} not found")
            return None

        module_id = self._next_module_id()
        module = ModuleConfig.model_validate({**module_data, "id": module_id})
        self._replace_line(line.model_copy(update={"modules": [*line.modules, module]}))
        return module_id

    def update_module(
        self,
        line_id: str,
        module_id: str,
        updates: dict[str, Any],
    ) -> bool:
        """Merge field updates into a module on a line.

        The merged module is validated again, so invalid updates raise
        pydantic's ValidationError and leave the store unchanged.

        Returns:
            True if the module was found and updated.
        """
        line = self.current_config.find_line(line_id)
        if line is None:
            return False

        modules = list(line.modules)
        for index, module in enumerate(modules):
            if module.id == module_id:
                merged = module.model_dump(by_alias=True, exclude_none=True)
                merged.pop("finalWidth", None)
                merged.update(_aliased(updates))
                modules[index] = ModuleConfig.model_validate(merged)
                break
        else:
            return False

        self._replace_line(line.model_copy(update={"modules": modules}))
        return True

    def remove_module_from_line(self, line_id: str, module_id: str) -> bool:
        """Remove a module from a line.

        Returns:
            True if a module was removed.
        """
        line = self.current_config.find_line(line_id)
        if line is None:
            return False

        modules = [m for m in line.modules if m.id != module_id]
        if len(modules) == len(line.modules):
            return False

        self._replace_line(line.model_copy(update={"modules": modules}))
        return True

    def change_default_material(self, slot: MaterialSlot | str, key: str) -> None:
        """Change the kitchen-wide material of a slot."""
        slot = MaterialSlot(slot)
        materials = self.current_config.default_materials.model_copy(
            update={slot.value: key}
        )
        self.current_config = self.current_config.model_copy(
            update={"default_materials": materials}
        )
        self.regenerate()

    def set_centering(self, centering: CenteringOptions) -> None:
        """Change how the generated layout is centered in the room."""
        self.centering = centering
        self.regenerate()

    def _replace_line(self, new_line: LayoutLine) -> None:
        lines = [
            new_line if line.id == new_line.id else line
            for line in self.current_config.layout_lines
        ]
        self.current_config = self.current_config.model_copy(
            update={"layout_lines": lines}
        )
        self.regenerate()

    def _next_module_id(self) -> str:
        taken = {m.id for m in self.current_config.hanging_modules}
        taken |= self.current_config.line_module_ids()
        while True:
            candidate = f"module-{next(self._ids)}"
            if candidate not in taken:
                return candidate


def _aliased(updates: dict[str, Any]) -> dict[str, Any]:
    """Rename snake_case field names in ``updates`` to their wire aliases."""
    fields = ModuleConfig.model_fields
    return {
        (fields[key].alias or key) if key in fields else key: value
        for key, value in updates.items()
    }
