"""Geometry helpers shared by the layout engine and its consumers.

These functions only depend on positions and dimensions, so they work on
any object exposing ``position`` and ``dimensions`` attributes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Protocol

from .value_objects import Axis, BoundingBox, Dimensions, Direction, Position, Rotation

# Room footprint used when the kitchen config does not state its sides
DEFAULT_SIDE_A: float = 300.0
DEFAULT_SIDE_B: float = 200.0


class Placed(Protocol):
    """Anything that has been placed in layout space."""

    @property
    def position(self) -> Position: ...

    @property
    def dimensions(self) -> Dimensions: ...


def rotation_for_direction(direction: Direction) -> Rotation:
    """Map a layout line direction to the rotation of its modules.

    Only the two axis-aligned directions used by kitchen layouts are
    recognised: ``{x: 1, z: 0}`` faces forward and ``{x: 0, z: -1}`` is
    turned 90 degrees around Y. Any other vector falls back to no rotation.
    """
    if direction.x == 1 and direction.z == 0:
        return Rotation(x=0, y=0, z=0)
    if direction.x == 0 and direction.z == -1:
        return Rotation(x=0, y=90, z=0)
    return Rotation(x=0, y=0, z=0)


def position_along_line(direction: Direction, center: float) -> Position:
    """Project a center distance from the line start onto its axis.

    Args:
        direction: Direction of the layout line.
        center: Distance of the module center from the line start.

    Returns:
        Line-local position with y = 0 and the off-axis component at 0.
    """
    along = direction.sign * center
    if direction.axis is Axis.X:
        return Position(x=along, y=0.0, z=0.0)
    return Position(x=0.0, y=0.0, z=along)


def calculate_bounding_box(modules: Iterable[Placed]) -> BoundingBox:
    """Compute the axis-aligned box enclosing all modules.

    Every axis extends half a dimension either side of the module
    position. An empty input yields a zero box at the origin.
    """
    min_x = min_y = min_z = math.inf
    max_x = max_y = max_z = -math.inf
    found = False

    for module in modules:
        found = True
        pos, dims = module.position, module.dimensions
        min_x = min(min_x, pos.x - dims.width / 2)
        max_x = max(max_x, pos.x + dims.width / 2)
        min_y = min(min_y, pos.y - dims.height / 2)
        max_y = max(max_y, pos.y + dims.height / 2)
        min_z = min(min_z, pos.z - dims.depth / 2)
        max_z = max(max_z, pos.z + dims.depth / 2)

    if not found:
        origin = Position(x=0.0, y=0.0, z=0.0)
        return BoundingBox(min=origin, max=origin)

    return BoundingBox(
        min=Position(x=min_x, y=min_y, z=min_z),
        max=Position(x=max_x, y=max_y, z=max_z),
    )


def room_center(
    side_a: float | None,
    side_b: float | None,
    height: float,
) -> Position:
    """Center of the room volume.

    Side A runs along +X from the origin and side B along -Z, so the room
    center sits at negative z.
    """
    a = side_a if side_a is not None else DEFAULT_SIDE_A
    b = side_b if side_b is not None else DEFAULT_SIDE_B
    return Position(x=a / 2, y=height / 2, z=-b / 2)
