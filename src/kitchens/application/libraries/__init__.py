"""Bundled material and module libraries and catalog lookups."""

from kitchens.application.libraries.manager import (
    ALL,
    MATERIAL_CATEGORIES,
    LibraryCategoryError,
    default_material_library,
    default_module_library,
    describe_material_library,
    describe_module_library,
)

__all__ = [
    "ALL",
    "MATERIAL_CATEGORIES",
    "LibraryCategoryError",
    "default_material_library",
    "default_module_library",
    "describe_material_library",
    "describe_module_library",
]
