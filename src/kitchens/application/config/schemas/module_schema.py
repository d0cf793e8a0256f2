"""Module configuration schemas.

This module contains the cabinet slot models placed on layout lines
(ModuleConfig), wall-mounted modules aligned to them (HangingModuleConfig)
and the structure, carcass, handle and positioning models they share.
"""

from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator

from kitchens.application.config.schemas.base import (
    Anchor,
    ConfigModel,
    HandleOrientation,
    HandlePlacementType,
    WidthField,
)
from kitchens.domain.value_objects import FixedWidth

# Carcass panel thicknesses used when a module does not declare its own
DEFAULT_CARCASS_THICKNESS: float = 1.8
DEFAULT_BACK_PANEL_THICKNESS: float = 0.5


# =============================================================================
# Internal Structure
# =============================================================================


class ShelfConfig(ConfigModel):
    """A shelf inside a door-and-shelf module."""

    position_from_bottom: float = Field(ge=0)


class DrawerStructure(ConfigModel):
    """A stack of drawers.

    Attributes:
        count: Number of drawers.
        drawer_heights: Front height of each drawer, bottom to top.
        internal_depth: Depth of the drawer boxes (usually less than the
            module depth).
    """

    type: Literal["drawers"] = "drawers"
    count: int = Field(ge=1)
    drawer_heights: list[float] = Field(min_length=1)
    internal_depth: float = Field(gt=0)

    @field_validator("drawer_heights")
    @classmethod
    def validate_heights(cls, v: list[float]) -> list[float]:
        """Validate every drawer height is positive."""
        if any(h <= 0 for h in v):
            raise ValueError("drawer heights must be positive")
        return v

    @model_validator(mode="after")
    def validate_count(self) -> "DrawerStructure":
        """Validate there is one height per drawer."""
        if len(self.drawer_heights) != self.count:
            raise ValueError(
                f"drawer_heights lists {len(self.drawer_heights)} heights "
                f"for {self.count} drawers"
            )
        return self


class DoorAndShelfStructure(ConfigModel):
    """One or two doors in front of a set of shelves."""

    type: Literal["door-and-shelf"] = "door-and-shelf"
    door_count: int = Field(default=1, ge=1, le=2)
    shelves: list[ShelfConfig] = Field(default_factory=list)


Structure = Annotated[
    DrawerStructure | DoorAndShelfStructure,
    Field(discriminator="type"),
]


def count_fronts(structure: DrawerStructure | DoorAndShelfStructure) -> int:
    """Number of visible fronts (drawer faces or doors) of a structure.

    Raises:
        TypeError: If the structure is not a known variant.
    """
    if isinstance(structure, DrawerStructure):
        return structure.count
    if isinstance(structure, DoorAndShelfStructure):
        return structure.door_count
    raise TypeError(f"Unknown structure type: {type(structure).__name__}")


def default_structure(door_count: int = 1) -> DoorAndShelfStructure:
    """Structure used for modules that do not describe their interior."""
    return DoorAndShelfStructure(door_count=door_count, shelves=[])


class Carcass(ConfigModel):
    """Structural box of a module."""

    thickness: float = Field(default=DEFAULT_CARCASS_THICKNESS, gt=0)
    back_panel_thickness: float | None = Field(
        default=DEFAULT_BACK_PANEL_THICKNESS, gt=0
    )


# =============================================================================
# Positioning, Handles and Materials
# =============================================================================


class Offset(ConfigModel):
    """Vertical offset of a module."""

    y: float = Field(default=0.0, ge=0)


class Positioning(ConfigModel):
    """Vertical anchoring of a module on a layout line."""

    anchor: Anchor = Anchor.FLOOR
    offset: Offset = Field(default_factory=Offset)


class HangingPositioning(ConfigModel):
    """Anchoring of a wall-mounted module.

    Hanging modules always sit above the countertop and take their
    horizontal position from the module named by ``align_with_module``.
    """

    anchor: Anchor = Anchor.COUNTERTOP
    offset: Offset = Field(default_factory=Offset)
    align_with_module: str = Field(min_length=1)

    @field_validator("anchor")
    @classmethod
    def validate_anchor(cls, v: Anchor) -> Anchor:
        """Validate hanging modules are anchored to the countertop."""
        if v is not Anchor.COUNTERTOP:
            raise ValueError("hanging modules must use the 'countertop' anchor")
        return v


class HandlePlacement(ConfigModel):
    """Where and how a handle sits on a module front."""

    type: HandlePlacementType = HandlePlacementType.CENTERED
    orientation: HandleOrientation = HandleOrientation.VERTICAL
    offset_from_top: float | None = Field(default=None, ge=0)


class HandleConfig(ConfigModel):
    """Handle request of a module."""

    placement: HandlePlacement = Field(default_factory=HandlePlacement)


class MaterialOverrides(ConfigModel):
    """Per-module material keys replacing the kitchen defaults."""

    facade: str | None = None
    countertop: str | None = None
    handle: str | None = None


class SizingHints(ConfigModel):
    """Optional sizing hints authored alongside a module."""

    fills_remaining_space: bool = False


# =============================================================================
# Modules
# =============================================================================


class ModuleConfig(ConfigModel):
    """An abstract cabinet slot on a layout line.

    Attributes:
        id: Unique module identifier.
        type: Module type key in the module library (base, sink, tall, ...).
        variant: Variant key in the module library; "default" when omitted.
        width: Fixed width, or "auto" for an even share of the free space.
        positioning: Anchor and vertical offset.
        material_overrides: Material keys replacing the kitchen defaults.
        handle: Handle request, if the module has one.
        constraints: Optional sizing hints.
        structure: Drawers or doors-and-shelves interior.
        carcass: Panel thicknesses of the box.
        final_width: Width written by the validator when it shrinks an
            auto module to absorb a line overflow.
    """

    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    variant: str | None = None
    width: WidthField
    positioning: Positioning = Field(default_factory=Positioning)
    material_overrides: MaterialOverrides | None = None
    handle: HandleConfig | None = None
    constraints: SizingHints | None = None
    structure: Structure | None = None
    carcass: Carcass | None = None
    final_width: float | None = None

    @property
    def variant_key(self) -> str:
        """Variant used for module library lookups."""
        return self.variant or "default"

    @property
    def is_auto(self) -> bool:
        """Check if this module takes an auto width.

        A module hinted to fill the remaining space is auto whatever
        width it declares.
        """
        if self.constraints is not None and self.constraints.fills_remaining_space:
            return True
        return self.width.is_auto

    @property
    def fixed_width(self) -> float | None:
        """Width this module occupies before auto-width resolution.

        A validator-written ``final_width`` takes precedence; otherwise the
        declared fixed width is returned, or None for auto modules.
        """
        if self.final_width is not None:
            return self.final_width
        if self.is_auto or not isinstance(self.width, FixedWidth):
            return None
        return self.width.value


class HangingModuleConfig(ConfigModel):
    """A wall-mounted module aligned with a module on a layout line."""

    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    variant: str = "default"
    width: WidthField
    positioning: HangingPositioning
    material_overrides: MaterialOverrides | None = None
    handle: HandleConfig | None = None
    structure: Structure | None = None
    carcass: Carcass | None = None
