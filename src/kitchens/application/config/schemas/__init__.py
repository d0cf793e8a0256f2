"""Pydantic schemas for kitchen configurations, libraries and layout output.

Schema modules:
    - base: Base models, shared enums and the width field type
    - module_schema: Modules, hanging modules, structures, carcass, handles
    - kitchen_schema: KitchenConfig and its settings, constraints and lines
    - library_schema: Material and module libraries
    - output_schema: RenderableModule and centering options
"""

from kitchens.application.config.schemas.base import (
    Anchor,
    ConfigModel,
    FrozenConfigModel,
    HandleOrientation,
    HandlePlacementType,
    HandleSourceType,
    MismatchPolicy,
    WidthField,
    dump_width,
    parse_width,
)
from kitchens.application.config.schemas.kitchen_schema import (
    DefaultMaterials,
    GlobalConstraints,
    GlobalSettings,
    HandleConstraints,
    KitchenConfig,
    LayoutLine,
    LayoutRules,
    ModuleWidthConstraints,
    RoomDimensions,
)
from kitchens.application.config.schemas.library_schema import (
    HandleDefinition,
    HandleSource,
    MaterialDefinition,
    MaterialLibrary,
    ModuleLibrary,
    ModuleTypeDefinition,
    ModuleVariantConstraints,
)
from kitchens.application.config.schemas.module_schema import (
    DEFAULT_BACK_PANEL_THICKNESS,
    DEFAULT_CARCASS_THICKNESS,
    Carcass,
    DoorAndShelfStructure,
    DrawerStructure,
    HandleConfig,
    HandlePlacement,
    HangingModuleConfig,
    HangingPositioning,
    MaterialOverrides,
    ModuleConfig,
    Offset,
    Positioning,
    ShelfConfig,
    SizingHints,
    Structure,
    count_fronts,
    default_structure,
)
from kitchens.application.config.schemas.output_schema import (
    CenteringOptions,
    RenderableModule,
    ResolvedMaterials,
)

__all__ = [
    # Base
    "Anchor",
    "ConfigModel",
    "FrozenConfigModel",
    "HandleOrientation",
    "HandlePlacementType",
    "HandleSourceType",
    "MismatchPolicy",
    "WidthField",
    "dump_width",
    "parse_width",
    # Kitchen
    "DefaultMaterials",
    "GlobalConstraints",
    "GlobalSettings",
    "HandleConstraints",
    "KitchenConfig",
    "LayoutLine",
    "LayoutRules",
    "ModuleWidthConstraints",
    "RoomDimensions",
    # Libraries
    "HandleDefinition",
    "HandleSource",
    "MaterialDefinition",
    "MaterialLibrary",
    "ModuleLibrary",
    "ModuleTypeDefinition",
    "ModuleVariantConstraints",
    # Modules
    "DEFAULT_BACK_PANEL_THICKNESS",
    "DEFAULT_CARCASS_THICKNESS",
    "Carcass",
    "DoorAndShelfStructure",
    "DrawerStructure",
    "HandleConfig",
    "HandlePlacement",
    "HangingModuleConfig",
    "HangingPositioning",
    "MaterialOverrides",
    "ModuleConfig",
    "Offset",
    "Positioning",
    "ShelfConfig",
    "SizingHints",
    "Structure",
    "count_fronts",
    "default_structure",
    # Output
    "CenteringOptions",
    "RenderableModule",
    "ResolvedMaterials",
]
