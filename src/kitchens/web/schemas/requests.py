"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import Field

from kitchens.application.config import CenteringOptions
from kitchens.web.schemas.common import ApiModel


class ConfigValidateRequest(ApiModel):
    """Request for validating a kitchen configuration."""

    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")


class GenerateRequest(ApiModel):
    """Request for generating the layout of a kitchen configuration."""

    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")
    centering: CenteringOptions | None = Field(
        default=None, description="Optional centering of the layout in the room"
    )


class SaveConfigRequest(ApiModel):
    """Request for saving a kitchen design."""

    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")
    modules: list[dict[str, Any]] = Field(..., description="Generated modules")
    description: str | None = Field(default=None, description="Design description")
