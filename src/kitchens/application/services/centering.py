"""Re-centering of generated modules inside the room."""

from __future__ import annotations

import logging

from kitchens.application.config.schemas import CenteringOptions, RenderableModule
from kitchens.domain.geometry import calculate_bounding_box
from kitchens.domain.value_objects import Position

logger = logging.getLogger(__name__)


def apply_centering(
    modules: list[RenderableModule],
    room_center: Position,
    options: CenteringOptions,
) -> list[RenderableModule]:
    """Translate modules so their bounding box sits at the room center.

    X and Z move the box center onto the room center plus the configured
    offsets. Y only moves by ``offset_y`` so modules stay on the floor.
    Top-level modules and their direct children are translated; deeper
    descendants are not.
    """
    if not options.enabled or not modules:
        return list(modules)

    box_center = calculate_bounding_box(modules).center
    dx = room_center.x - box_center.x + options.offset_x
    dy = options.offset_y
    dz = room_center.z - box_center.z + options.offset_z
    logger.debug(f"Centering {len(modules)} module(s) by ({dx}, {dy}, {dz})")

    return [
        module.model_copy(
            update={
                "position": module.position.translated(dx, dy, dz),
                "children": [
                    child.model_copy(
                        update={"position": child.position.translated(dx, dy, dz)}
                    )
                    for child in module.children
                ],
            }
        )
        for module in modules
    ]
