"""Layout engine: turns a kitchen configuration into renderable modules.

Modules are walked along each layout line from its start, auto widths
receive an even share of the free space, and every module is given an
absolute position, rotation, dimensions and resolved materials. Hanging
modules are then aligned with the line modules they name.
"""

from __future__ import annotations

import logging
import re

from kitchens.application.config.schemas import (
    Carcass,
    CenteringOptions,
    DefaultMaterials,
    HandlePlacement,
    HangingModuleConfig,
    KitchenConfig,
    LayoutLine,
    MaterialDefinition,
    MaterialLibrary,
    ModuleConfig,
    RenderableModule,
    ResolvedMaterials,
    RoomDimensions,
    default_structure,
)
from kitchens.application.config.schemas.base import HandleOrientation
from kitchens.domain.geometry import (
    position_along_line,
    rotation_for_direction,
    room_center,
)
from kitchens.domain.value_objects import Dimensions, MaterialSlot, Position, Rotation

from .centering import apply_centering

logger = logging.getLogger(__name__)

# Module types standing on the plinth
PLINTH_MODULE_TYPES = frozenset({"base", "sink"})

HANDLE_DIMENSIONS = Dimensions(width=15.0, height=5.0, depth=3.0)
HANDLE_VARIANT = "standard"

_DOUBLE_DOOR_VARIANT = re.compile(r"double|two|2")


class LayoutError(Exception):
    """Raised when a layout line cannot be turned into positive widths."""

    def __init__(self, line_id: str, module_id: str, width: float) -> None:
        self.line_id = line_id
        self.module_id = module_id
        self.width = width
        super().__init__(
            f"Module {module_id} on line {line_id} resolves to "
            f"non-positive width {width}"
        )


def generate(
    config: KitchenConfig,
    material_library: MaterialLibrary,
) -> list[RenderableModule]:
    """Generate renderable modules without re-centering them."""
    return generate_with_centering(
        config, material_library, CenteringOptions(enabled=False)
    )


def generate_with_centering(
    config: KitchenConfig,
    material_library: MaterialLibrary,
    centering: CenteringOptions,
) -> list[RenderableModule]:
    """Generate renderable modules, optionally centered inside the room.

    Args:
        config: Validated kitchen configuration.
        material_library: Catalog used to resolve material keys.
        centering: Centering options; nothing moves when disabled.

    Returns:
        Line modules in line order, followed by hanging modules in
        declaration order.

    Raises:
        LayoutError: If a module's resolved width is not positive.
    """
    settings = config.global_settings
    modules: list[RenderableModule] = []

    for line in config.layout_lines:
        placed = _place_line(line, config, material_library)
        logger.debug(f"Line {line.id}: placed {len(placed)} module(s)")
        modules.extend(placed)

    by_id = {m.id: m for m in modules}
    for hanging in config.hanging_modules:
        base = by_id.get(hanging.positioning.align_with_module)
        if base is None:
            logger.warning(
                f"Hanging module {hanging.id} could not find its base module "
                f"{hanging.positioning.align_with_module}"
            )
            continue
        modules.append(
            _create_hanging_module(
                hanging,
                base,
                settings.dimensions,
                config.default_materials,
                material_library,
            )
        )

    if not centering.enabled:
        return modules

    dims = settings.dimensions
    center = room_center(dims.side_a, dims.side_b, dims.height)
    return apply_centering(modules, center, centering)


def resolve_line_widths(line: LayoutLine, gap: float) -> list[float]:
    """Resolve the width of every module on a line, in line order.

    Fixed modules keep their width, or the width the validator wrote to
    ``final_width``. The remaining auto modules share what is left of the
    line after fixed widths and gaps.
    """
    fixed_total = sum(
        m.fixed_width for m in line.modules if m.fixed_width is not None
    )
    open_modules = [m for m in line.modules if m.fixed_width is None]
    gaps = max(len(line.modules) - 1, 0) * gap
    remaining = line.length - fixed_total - gaps
    auto_width = remaining / len(open_modules) if open_modules else 0.0

    return [
        m.fixed_width if m.fixed_width is not None else auto_width
        for m in line.modules
    ]


def resolve_materials(
    module: ModuleConfig | HangingModuleConfig,
    default_materials: DefaultMaterials,
    material_library: MaterialLibrary,
) -> ResolvedMaterials:
    """Resolve the facade, countertop and handle materials of a module.

    A module override wins over the kitchen default. Keys missing from the
    library leave the slot empty so the renderer can fall back.
    """
    overrides = module.material_overrides
    resolved: dict[str, MaterialDefinition] = {}

    for slot in MaterialSlot:
        key = getattr(overrides, slot.value, None) if overrides else None
        key = key or getattr(default_materials, slot.value)
        if not key:
            continue
        entry = material_library.catalog(slot).get(key)
        if entry is None:
            continue
        resolved[slot.value] = entry.material if slot is MaterialSlot.HANDLE else entry

    return ResolvedMaterials(**resolved)


def _place_line(
    line: LayoutLine,
    config: KitchenConfig,
    material_library: MaterialLibrary,
) -> list[RenderableModule]:
    settings = config.global_settings
    gap = settings.rules.gap_between_modules
    rotation = rotation_for_direction(line.direction)
    widths = resolve_line_widths(line, gap)

    placed: list[RenderableModule] = []
    offset = 0.0
    for module, width in zip(line.modules, widths):
        if width <= 0:
            raise LayoutError(line.id, module.id, width)
        local = position_along_line(line.direction, offset + width / 2)
        placed.append(
            _create_line_module(
                module,
                width,
                local,
                rotation,
                settings.dimensions,
                config.default_materials,
                material_library,
            )
        )
        offset += width + gap
    return placed


def _create_line_module(
    module: ModuleConfig,
    width: float,
    local: Position,
    rotation: Rotation,
    dims: RoomDimensions,
    default_materials: DefaultMaterials,
    material_library: MaterialLibrary,
) -> RenderableModule:
    offset_y = module.positioning.offset.y
    plinth = dims.plinth_height if module.type in PLINTH_MODULE_TYPES else 0.0

    # A non-zero vertical offset doubles as the module height
    dimensions = Dimensions(
        width=width,
        height=offset_y or dims.base_cabinet_height,
        depth=dims.countertop_depth,
    )

    renderable = RenderableModule(
        id=module.id,
        type=module.type,
        variant=module.variant_key,
        position=Position(x=local.x, y=offset_y + plinth, z=local.z),
        rotation=rotation,
        dimensions=dimensions,
        structure=module.structure or default_structure(),
        carcass=module.carcass or Carcass(),
        materials=resolve_materials(module, default_materials, material_library),
    )
    return _attach_handle(renderable, module, default_materials, material_library)


def _create_hanging_module(
    hanging: HangingModuleConfig,
    base: RenderableModule,
    dims: RoomDimensions,
    default_materials: DefaultMaterials,
    material_library: MaterialLibrary,
) -> RenderableModule:
    width = base.dimensions.width if hanging.width.is_auto else hanging.width.value
    door_count = 2 if _DOUBLE_DOOR_VARIANT.search(hanging.variant) else 1

    renderable = RenderableModule(
        id=hanging.id,
        type=hanging.type,
        variant=hanging.variant,
        position=Position(
            x=base.position.x,
            y=dims.countertop_height + dims.wall_gap,
            z=base.position.z,
        ),
        rotation=base.rotation,
        dimensions=Dimensions(
            width=width,
            height=dims.wall_cabinet_height,
            depth=dims.wall_cabinet_depth,
        ),
        structure=hanging.structure or default_structure(door_count),
        carcass=hanging.carcass or Carcass(),
        materials=resolve_materials(hanging, default_materials, material_library),
    )
    return _attach_handle(renderable, hanging, default_materials, material_library)


def _attach_handle(
    renderable: RenderableModule,
    module: ModuleConfig | HangingModuleConfig,
    default_materials: DefaultMaterials,
    material_library: MaterialLibrary,
) -> RenderableModule:
    """Add a handle child when the module asks for one and a handle exists."""
    if module.handle is None or not default_materials.handle:
        return renderable
    definition = material_library.handles.get(default_materials.handle)
    if definition is None:
        return renderable

    handle = _create_handle_module(
        module.handle.placement, renderable, definition.material
    )
    return renderable.model_copy(update={"children": [*renderable.children, handle]})


def _create_handle_module(
    placement: HandlePlacement,
    parent: RenderableModule,
    material: MaterialDefinition,
) -> RenderableModule:
    rotation = parent.rotation
    if placement.orientation is HandleOrientation.HORIZONTAL:
        rotation = Rotation(x=rotation.x, y=rotation.y, z=rotation.z + 90)

    return RenderableModule(
        id=f"{parent.id}-handle",
        type="handle",
        variant=HANDLE_VARIANT,
        position=parent.position.translated(0.0, 0.0, parent.dimensions.depth / 2),
        rotation=rotation,
        dimensions=HANDLE_DIMENSIONS,
        structure=default_structure(),
        carcass=Carcass(),
        materials=ResolvedMaterials(facade=material),
    )
