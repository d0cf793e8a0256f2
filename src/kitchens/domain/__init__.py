"""Domain layer - value objects and geometry for kitchen layouts."""

from .geometry import (
    DEFAULT_SIDE_A,
    DEFAULT_SIDE_B,
    calculate_bounding_box,
    position_along_line,
    room_center,
    rotation_for_direction,
)
from .value_objects import (
    AUTO,
    Anchor,
    AutoWidth,
    Axis,
    BoundingBox,
    Dimensions,
    Direction,
    FixedWidth,
    HandleOrientation,
    HandlePlacementType,
    HandleSourceType,
    MaterialSlot,
    MismatchPolicy,
    ModuleWidth,
    Position,
    Rotation,
)

__all__ = [
    "AUTO",
    "Anchor",
    "AutoWidth",
    "Axis",
    "BoundingBox",
    "DEFAULT_SIDE_A",
    "DEFAULT_SIDE_B",
    "Dimensions",
    "Direction",
    "FixedWidth",
    "HandleOrientation",
    "HandlePlacementType",
    "HandleSourceType",
    "MaterialSlot",
    "MismatchPolicy",
    "ModuleWidth",
    "Position",
    "Rotation",
    "calculate_bounding_box",
    "position_along_line",
    "room_center",
    "rotation_for_direction",
]
