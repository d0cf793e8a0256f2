"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kitchens.application.config.schemas import KitchenConfig, RenderableModule


@dataclass
class LayoutOutput:
    """Output DTO containing the generated layout results.

    Attributes:
        modules: Renderable modules, line modules first, hanging modules after.
        errors: Error messages if generation failed; modules is empty then.
        warnings: Corrections the validator applied before generation.
        fixed_config: The validated configuration the layout was built from.
    """

    modules: list[RenderableModule] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    fixed_config: KitchenConfig | None = None

    @property
    def success(self) -> bool:
        """Check if the layout was generated successfully."""
        return len(self.errors) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{success, errors, warnings, modules}`` shape."""
        return {
            "success": self.success,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "modules": [
                m.model_dump(mode="json", by_alias=True, exclude_none=True)
                for m in self.modules
            ],
        }
