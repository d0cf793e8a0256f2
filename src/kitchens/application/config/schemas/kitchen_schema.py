"""Kitchen configuration root schemas.

This module contains KitchenConfig, the declarative input of the layout
pipeline, together with its global settings, constraints, default
materials and layout lines.
"""

from pydantic import Field, model_validator

from kitchens.application.config.schemas.base import ConfigModel, MismatchPolicy
from kitchens.application.config.schemas.module_schema import (
    HangingModuleConfig,
    ModuleConfig,
)
from kitchens.domain.value_objects import Direction


class RoomDimensions(ConfigModel):
    """Room size and cabinet dimension defaults, in centimetres.

    Attributes:
        side_a: Length of the room along +X.
        side_b: Length of the room along -Z.
        height: Room height.
        countertop_height: Height of the countertop surface.
        countertop_depth: Depth of the countertop and of floor modules.
        countertop_thickness: Thickness of the countertop slab.
        wall_gap: Gap between the countertop and wall cabinets.
        base_cabinet_height: Default height of floor modules.
        wall_cabinet_height: Height of wall cabinets.
        wall_cabinet_depth: Depth of wall cabinets.
        plinth_height: Height of the plinth under base and sink modules.
        plinth_depth: Depth of the plinth.
    """

    side_a: float | None = Field(default=None, gt=0)
    side_b: float | None = Field(default=None, gt=0)
    height: float = Field(default=220.0, gt=0)
    countertop_height: float = Field(default=90.0, gt=0)
    countertop_depth: float = Field(default=60.0, gt=0)
    countertop_thickness: float = Field(default=2.0, gt=0)
    wall_gap: float = Field(default=50.0, ge=0)
    base_cabinet_height: float = Field(default=90.0, gt=0)
    wall_cabinet_height: float = Field(default=70.0, gt=0)
    wall_cabinet_depth: float = Field(default=35.0, gt=0)
    plinth_height: float = Field(default=12.0, ge=0)
    plinth_depth: float = Field(default=50.0, ge=0)


class LayoutRules(ConfigModel):
    """Rules applied when fitting modules on layout lines."""

    mismatch_policy: MismatchPolicy = MismatchPolicy.AUTO_FIX
    gap_between_modules: float = Field(default=0.0, ge=0)


class GlobalSettings(ConfigModel):
    """Kitchen-wide settings."""

    dimensions: RoomDimensions = Field(default_factory=RoomDimensions)
    rules: LayoutRules = Field(default_factory=LayoutRules)


class ModuleWidthConstraints(ConfigModel):
    """Width bounds for modules not covered by the module library."""

    min_width: float = Field(default=30.0, gt=0)
    max_width: float = Field(default=120.0, gt=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "ModuleWidthConstraints":
        """Validate min_width does not exceed max_width."""
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) exceeds max_width ({self.max_width})"
            )
        return self


class HandleConstraints(ConfigModel):
    """Handle placement constraints."""

    min_distance_from_edge: float = Field(default=10.0, ge=0)


class GlobalConstraints(ConfigModel):
    """Kitchen-wide constraints checked by the validator."""

    modules: ModuleWidthConstraints = Field(default_factory=ModuleWidthConstraints)
    handles: HandleConstraints = Field(default_factory=HandleConstraints)


class DefaultMaterials(ConfigModel):
    """Material keys used when a module has no override."""

    facade: str | None = None
    countertop: str | None = None
    handle: str | None = None


class LayoutLine(ConfigModel):
    """A straight, directed track along a wall.

    Only the directions ``{x: 1, z: 0}`` and ``{x: 0, z: -1}`` receive a
    dedicated rotation; other vectors are placed along their dominant axis
    without rotation.
    """

    id: str = Field(min_length=1)
    name: str = ""
    length: float = Field(gt=0)
    direction: Direction = Field(default_factory=lambda: Direction(x=1, z=0))
    modules: list[ModuleConfig] = Field(default_factory=list)

    @property
    def auto_modules(self) -> list[ModuleConfig]:
        """Modules on this line using auto width."""
        return [m for m in self.modules if m.is_auto]


class KitchenConfig(ConfigModel):
    """Root configuration model for a kitchen.

    Attributes:
        kitchen_id: Identifier of the kitchen design.
        name: Display name.
        style: Free-form style label (modern, loft, ...).
        global_settings: Room dimensions and layout rules.
        global_constraints: Module width and handle constraints.
        default_materials: Material keys used when modules do not override.
        layout_lines: Lines of modules along the walls.
        hanging_modules: Wall cabinets aligned with line modules.
    """

    kitchen_id: str = Field(min_length=1)
    name: str
    style: str = ""
    global_settings: GlobalSettings = Field(default_factory=GlobalSettings)
    global_constraints: GlobalConstraints = Field(default_factory=GlobalConstraints)
    default_materials: DefaultMaterials = Field(default_factory=DefaultMaterials)
    layout_lines: list[LayoutLine] = Field(default_factory=list)
    hanging_modules: list[HangingModuleConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "KitchenConfig":
        """Validate module and line identifiers are unique."""
        line_ids = [line.id for line in self.layout_lines]
        duplicate_lines = sorted({i for i in line_ids if line_ids.count(i) > 1})
        if duplicate_lines:
            raise ValueError(f"duplicate layout line ids: {', '.join(duplicate_lines)}")

        module_ids = [m.id for line in self.layout_lines for m in line.modules]
        module_ids.extend(m.id for m in self.hanging_modules)
        duplicates = sorted({i for i in module_ids if module_ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate module ids: {', '.join(duplicates)}")
        return self

    def line_module_ids(self) -> set[str]:
        """Identifiers of every module placed on a layout line."""
        return {m.id for line in self.layout_lines for m in line.modules}

    def find_line(self, line_id: str) -> LayoutLine | None:
        """Find a layout line by id."""
        for line in self.layout_lines:
            if line.id == line_id:
                return line
        return None
