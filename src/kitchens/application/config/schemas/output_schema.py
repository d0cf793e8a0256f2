"""Layout output and centering schemas.

RenderableModule is the unit handed to renderers: absolute position,
rotation, concrete dimensions and resolved materials, with handle
sub-modules as children.
"""

from pydantic import Field

from kitchens.application.config.schemas.base import ConfigModel, FrozenConfigModel
from kitchens.application.config.schemas.library_schema import MaterialDefinition
from kitchens.application.config.schemas.module_schema import Carcass, Structure
from kitchens.domain.value_objects import Dimensions, Position, Rotation


class ResolvedMaterials(FrozenConfigModel):
    """Materials resolved for a module; absent slots fall back to renderer defaults."""

    facade: MaterialDefinition | None = None
    countertop: MaterialDefinition | None = None
    handle: MaterialDefinition | None = None


class RenderableModule(FrozenConfigModel):
    """A fully positioned, dimensioned and material-resolved module.

    Attributes:
        id: Identifier copied from the module config.
        type: Module type (base, sink, tall, upper, handle, ...).
        variant: Variant key.
        position: Absolute position in layout space.
        rotation: Rotation in degrees.
        dimensions: Concrete width, height and depth.
        structure: Interior structure.
        carcass: Box panel thicknesses.
        materials: Resolved facade, countertop and handle materials.
        children: Sub-modules attached to this one (handles).
    """

    id: str
    type: str
    variant: str
    position: Position
    rotation: Rotation
    dimensions: Dimensions
    structure: Structure
    carcass: Carcass
    materials: ResolvedMaterials = Field(default_factory=ResolvedMaterials)
    children: list["RenderableModule"] = Field(default_factory=list)


class CenteringOptions(ConfigModel):
    """Options for re-centering generated modules inside the room.

    Attributes:
        enabled: Whether to translate the modules at all.
        offset_x: Extra translation on X applied after centering.
        offset_y: Translation on Y. Centering never moves modules
            vertically on its own, so floor anchoring is preserved.
        offset_z: Extra translation on Z applied after centering.
    """

    enabled: bool = False
    offset_x: float = 0.0
    offset_y: float = 0.0
    offset_z: float = 0.0
