"""FastAPI dependency injection for kitchen services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from kitchens.application.commands import GenerateLayoutCommand, ValidateConfigCommand
from kitchens.application.config import MaterialLibrary, ModuleLibrary
from kitchens.application.libraries import (
    default_material_library,
    default_module_library,
)
from kitchens.application.templates import TemplateManager
from kitchens.web.storage import ConfigStorage


def get_material_library() -> MaterialLibrary:
    """Dependency for the bundled material library."""
    return default_material_library()


def get_module_library() -> ModuleLibrary:
    """Dependency for the bundled module library."""
    return default_module_library()


def get_validate_command(
    module_library: Annotated[ModuleLibrary, Depends(get_module_library)],
) -> ValidateConfigCommand:
    """Dependency for ValidateConfigCommand."""
    return ValidateConfigCommand(module_library)


def get_generate_command(
    material_library: Annotated[MaterialLibrary, Depends(get_material_library)],
    module_library: Annotated[ModuleLibrary, Depends(get_module_library)],
) -> GenerateLayoutCommand:
    """Dependency for GenerateLayoutCommand."""
    return GenerateLayoutCommand(material_library, module_library)


def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


@lru_cache(maxsize=1)
def get_config_storage() -> ConfigStorage:
    """Get the process-wide saved-config storage."""
    return ConfigStorage()


# Type aliases for cleaner endpoint signatures
MaterialLibraryDep = Annotated[MaterialLibrary, Depends(get_material_library)]
ModuleLibraryDep = Annotated[ModuleLibrary, Depends(get_module_library)]
ValidateCommandDep = Annotated[ValidateConfigCommand, Depends(get_validate_command)]
GenerateCommandDep = Annotated[GenerateLayoutCommand, Depends(get_generate_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
ConfigStorageDep = Annotated[ConfigStorage, Depends(get_config_storage)]
