"""Access to the bundled material and module libraries.

The default libraries ship as JSON package data and are parsed into the
same models custom library files are loaded into, so both go through one
validation path.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

from kitchens.application.config.loader import (
    load_material_library_from_dict,
    load_module_library_from_dict,
)
from kitchens.application.config.schemas import MaterialLibrary, ModuleLibrary
from kitchens.domain.value_objects import MaterialSlot

DATA_PACKAGE = "kitchens.application.libraries.data"

# Material categories accepted by describe_material_library
MATERIAL_CATEGORIES: tuple[str, ...] = tuple(s.library_key for s in MaterialSlot)
ALL = "all"


class LibraryCategoryError(Exception):
    """Raised when a library category or module type does not exist."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f'{kind} "{name}" not found')


def _read_data(filename: str) -> Any:
    data_file = resources.files(DATA_PACKAGE).joinpath(filename)
    return json.loads(data_file.read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def default_material_library() -> MaterialLibrary:
    """The bundled material library."""
    return load_material_library_from_dict(_read_data("materials.json"))


@lru_cache(maxsize=1)
def default_module_library() -> ModuleLibrary:
    """The bundled module library."""
    return load_module_library_from_dict(_read_data("modules.json"))


def describe_material_library(
    material_library: MaterialLibrary,
    category: str = ALL,
) -> dict[str, list[dict[str, Any]]]:
    """List catalog entries of one category, or of all of them.

    Every entry is the camelCase material (or handle) data with its key
    added as ``id``.

    Raises:
        LibraryCategoryError: If the category is unknown.
    """
    if category == ALL:
        categories = MATERIAL_CATEGORIES
    elif category in MATERIAL_CATEGORIES:
        categories = (category,)
    else:
        raise LibraryCategoryError("Material category", category)

    dumped = material_library.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {
        name: [{"id": key, **entry} for key, entry in dumped[name].items()]
        for name in categories
    }


def describe_module_library(
    module_library: ModuleLibrary,
    module_type: str = ALL,
) -> dict[str, Any]:
    """Return the variants of one module type, or the whole catalog.

    Raises:
        LibraryCategoryError: If the module type is unknown.
    """
    dumped = module_library.model_dump(mode="json", by_alias=True, exclude_none=True)
    if module_type == ALL:
        return dumped
    if module_type not in module_library:
        raise LibraryCategoryError("Module type", module_type)
    return {module_type: dumped[module_type]}
