"""Application commands (use cases) for kitchen layout generation.

Commands are the boundary used by the assistant's tools, the store and
the outer interfaces. They accept raw JSON data or parsed configs, use
the bundled libraries unless given others, and report every failure in
their result instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any

from kitchens.application.config.schemas import (
    CenteringOptions,
    GlobalConstraints,
    KitchenConfig,
    MaterialLibrary,
    ModuleLibrary,
)
from kitchens.application.config.validator import ValidationResult
from kitchens.application.libraries import (
    default_material_library,
    default_module_library,
)
from kitchens.application.services import generate_with_centering, validate_and_fix

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


class ValidateConfigCommand:
    """Command to validate a kitchen configuration and fix what it can."""

    def __init__(self, module_library: ModuleLibrary | None = None) -> None:
        self.module_library = module_library or default_module_library()

    def execute(
        self,
        config: KitchenConfig | dict[str, Any],
        constraints: GlobalConstraints | None = None,
    ) -> ValidationResult:
        """Validate a configuration.

        Args:
            config: Kitchen configuration as a model or raw JSON data.
            constraints: Constraints to check against; the config's own
                (or the defaults, when it declares none) otherwise.

        Returns:
            ValidationResult; unexpected failures are reported as a single
            "Validation error: ..." entry.
        """
        try:
            return validate_and_fix(config, constraints, self.module_library)
        except Exception as e:
            logger.exception("Validation failed unexpectedly")
            return ValidationResult().add_error(f"Validation error: {e}")


class GenerateLayoutCommand:
    """Command to validate a configuration and generate its layout.

    Generation only runs when validation reports no errors, and always
    works on the validator's fixed copy.
    """

    def __init__(
        self,
        material_library: MaterialLibrary | None = None,
        module_library: ModuleLibrary | None = None,
    ) -> None:
        self.material_library = material_library or default_material_library()
        self.module_library = module_library or default_module_library()

    def execute(
        self,
        config: KitchenConfig | dict[str, Any],
        centering: CenteringOptions | None = None,
    ) -> LayoutOutput:
        """Execute the layout generation command.

        Args:
            config: Kitchen configuration as a model or raw JSON data.
            centering: Optional centering of the result inside the room.

        Returns:
            LayoutOutput with modules on success, or errors and no modules.
        """
        try:
            validation = validate_and_fix(config, None, self.module_library)
            if not validation.is_valid or validation.fixed_config is None:
                return LayoutOutput(
                    errors=list(validation.errors),
                    warnings=list(validation.warnings),
                )

            modules = generate_with_centering(
                validation.fixed_config,
                self.material_library,
                centering or CenteringOptions(),
            )
        except Exception as e:
            logger.exception("Layout generation failed")
            return LayoutOutput(errors=[f"Layout generation error: {e}"])

        logger.debug(f"Generated {len(modules)} module(s)")
        return LayoutOutput(
            modules=modules,
            warnings=list(validation.warnings),
            fixed_config=validation.fixed_config,
        )
