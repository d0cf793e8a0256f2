"""Material and module library endpoints."""

from typing import Any

from fastapi import APIRouter

from kitchens.application.libraries import (
    ALL,
    describe_material_library,
    describe_module_library,
)
from kitchens.web.dependencies import MaterialLibraryDep, ModuleLibraryDep

router = APIRouter(prefix="/libraries", tags=["libraries"])


@router.get("/materials", response_model=dict[str, Any])
async def get_materials(
    material_library: MaterialLibraryDep,
    category: str = ALL,
) -> dict[str, Any]:
    """List materials of a category (facades, countertops, handles) or all."""
    return describe_material_library(material_library, category)


@router.get("/modules", response_model=dict[str, Any])
async def get_modules(
    module_library: ModuleLibraryDep,
    module_type: str = ALL,
) -> dict[str, Any]:
    """List the variants of a module type, or the whole module catalog."""
    return describe_module_library(module_library, module_type)
