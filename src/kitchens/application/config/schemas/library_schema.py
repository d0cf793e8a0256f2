"""Material and module library schemas.

Libraries are static, read-only catalogs authored as data. They are
passed explicitly to the engines, never looked up as globals.
"""

from typing import Any

from pydantic import ConfigDict, Field, RootModel, model_validator
from pydantic.alias_generators import to_camel

from kitchens.application.config.schemas.base import (
    FrozenConfigModel,
    HandleSourceType,
)
from kitchens.domain.value_objects import MaterialSlot


class MaterialDefinition(FrozenConfigModel):
    """A renderable material.

    Only ``type`` is required. Renderer-specific keys (``shaderId``,
    ``colorTint``, ``shaderProperties``, ...) are kept as extras and passed
    through untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    type: str
    color: str | None = None
    finish: str | None = None
    roughness: float | None = Field(default=None, ge=0, le=1)
    metalness: float | None = Field(default=None, ge=0, le=1)
    diffuse_map: str | None = None
    normal_map: str | None = None
    roughness_map: str | None = None


class HandleSource(FrozenConfigModel):
    """Where a handle's geometry comes from."""

    type: HandleSourceType
    url: str | None = None
    generator: str | None = None
    params: dict[str, Any] | None = None

    @model_validator(mode="after")
    def validate_source(self) -> "HandleSource":
        """Validate static models carry a url and procedural ones a generator."""
        if self.type is HandleSourceType.STATIC_MODEL and not self.url:
            raise ValueError("static_model handle sources require a url")
        if self.type is HandleSourceType.PROCEDURAL and not self.generator:
            raise ValueError("procedural handle sources require a generator")
        return self


class HandleDefinition(FrozenConfigModel):
    """A handle: its geometry source and its material."""

    source: HandleSource
    material: MaterialDefinition


class MaterialLibrary(FrozenConfigModel):
    """Catalog of facade, countertop and handle materials."""

    facades: dict[str, MaterialDefinition] = Field(default_factory=dict)
    countertops: dict[str, MaterialDefinition] = Field(default_factory=dict)
    handles: dict[str, HandleDefinition] = Field(default_factory=dict)

    def catalog(self, slot: MaterialSlot) -> dict[str, Any]:
        """Return the dictionary backing a material slot."""
        return getattr(self, slot.library_key)


class ModuleVariantConstraints(FrozenConfigModel):
    """Sizing constraints of one module variant."""

    min_width: float = Field(gt=0)
    max_width: float = Field(gt=0)
    default_height: float | None = Field(default=None, gt=0)
    default_width: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "ModuleVariantConstraints":
        """Validate min_width does not exceed max_width."""
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) exceeds max_width ({self.max_width})"
            )
        return self


class ModuleTypeDefinition(FrozenConfigModel):
    """Variants available for a module type."""

    variants: dict[str, ModuleVariantConstraints] = Field(default_factory=dict)


class ModuleLibrary(RootModel[dict[str, ModuleTypeDefinition]]):
    """Catalog of module types keyed by type name."""

    model_config = ConfigDict(frozen=True)

    def __contains__(self, module_type: object) -> bool:
        return module_type in self.root

    def __getitem__(self, module_type: str) -> ModuleTypeDefinition:
        return self.root[module_type]

    def types(self) -> list[str]:
        """Sorted module type names."""
        return sorted(self.root)

    def lookup(self, module_type: str, variant: str) -> ModuleVariantConstraints | None:
        """Find the constraints of a type/variant pair, or None if unknown."""
        definition = self.root.get(module_type)
        if definition is None:
            return None
        return definition.variants.get(variant)
