"""Base model and shared field types for kitchen configuration schemas.

Kitchen configs travel as JSON between the designer front end, the
assistant's tool calls and this package, so field names are camelCase on
the wire (``kitchenId``, ``layoutLines``) and snake_case in Python. Both
spellings are accepted on input.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_camel

# Import domain enums directly so configs and engines share one definition
from kitchens.domain.value_objects import (
    AUTO,
    Anchor,
    AutoWidth,
    FixedWidth,
    HandleOrientation,
    HandlePlacementType,
    HandleSourceType,
    MismatchPolicy,
    ModuleWidth,
)

__all__ = [
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
]


class ConfigModel(BaseModel):
    """Base class for all kitchen configuration models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class FrozenConfigModel(BaseModel):
    """Base class for read-only library and output models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


def parse_width(value: Any) -> ModuleWidth:
    """Convert a wire width (positive number or ``"auto"``) to a ModuleWidth."""
    if isinstance(value, (FixedWidth, AutoWidth)):
        return value
    if value == "auto":
        return AUTO
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("width must be a positive number or 'auto'")
    return FixedWidth(float(value))


def dump_width(value: ModuleWidth) -> float | str:
    """Convert a ModuleWidth back to its wire representation."""
    if isinstance(value, FixedWidth):
        return value.value
    return "auto"


WidthField = Annotated[
    ModuleWidth,
    PlainValidator(parse_width, json_schema_input_type=float | Literal["auto"]),
    PlainSerializer(dump_width, return_type=float | str),
]
