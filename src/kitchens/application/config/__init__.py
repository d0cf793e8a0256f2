"""Configuration schema and loading system for kitchen designs.

This package provides JSON-based configuration loading and validation for
kitchen configurations and the material/module libraries they reference.

Public API:
    - KitchenConfig: Root configuration model
    - MaterialLibrary / ModuleLibrary: Library models
    - RenderableModule: Layout output model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_material_library / load_module_library: Load library files
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results

Example:
    >>> from pathlib import Path
    >>> from kitchens.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-kitchen.json"))
    ...     print(f"{config.name}: {len(config.layout_lines)} line(s)")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from kitchens.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_material_library,
    load_material_library_from_dict,
    load_module_library,
    load_module_library_from_dict,
)
from kitchens.application.config.schemas import (
    Carcass,
    CenteringOptions,
    DefaultMaterials,
    DoorAndShelfStructure,
    DrawerStructure,
    GlobalConstraints,
    GlobalSettings,
    HandleConfig,
    HandleDefinition,
    HandlePlacement,
    HangingModuleConfig,
    HangingPositioning,
    KitchenConfig,
    LayoutLine,
    LayoutRules,
    MaterialDefinition,
    MaterialLibrary,
    MaterialOverrides,
    ModuleConfig,
    ModuleLibrary,
    ModuleVariantConstraints,
    Positioning,
    RenderableModule,
    ResolvedMaterials,
    RoomDimensions,
)
from kitchens.application.config.validator import ValidationResult

__all__ = [
    "Carcass",
    "CenteringOptions",
    "ConfigError",
    "DefaultMaterials",
    "DoorAndShelfStructure",
    "DrawerStructure",
    "GlobalConstraints",
    "GlobalSettings",
    "HandleConfig",
    "HandleDefinition",
    "HandlePlacement",
    "HangingModuleConfig",
    "HangingPositioning",
    "KitchenConfig",
    "LayoutLine",
    "LayoutRules",
    "MaterialDefinition",
    "MaterialLibrary",
    "MaterialOverrides",
    "ModuleConfig",
    "ModuleLibrary",
    "ModuleVariantConstraints",
    "Positioning",
    "RenderableModule",
    "ResolvedMaterials",
    "RoomDimensions",
    "ValidationResult",
    "load_config",
    "load_config_from_dict",
    "load_material_library",
    "load_material_library_from_dict",
    "load_module_library",
    "load_module_library_from_dict",
]
