"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import Field

from kitchens.web.schemas.common import ApiModel


class ValidationResultSchema(ApiModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the configuration has no errors")
    errors: list[str] = Field(default_factory=list, description="Blocking problems")
    warnings: list[str] = Field(default_factory=list, description="Applied corrections")
    fixed_config: dict[str, Any] | None = Field(
        default=None, description="Configuration with corrections applied"
    )


class LayoutOutputSchema(ApiModel):
    """Response for layout generation."""

    success: bool = Field(..., description="Whether the layout was generated")
    errors: list[str] = Field(default_factory=list, description="Generation errors")
    warnings: list[str] = Field(default_factory=list, description="Applied corrections")
    modules: list[dict[str, Any]] = Field(
        default_factory=list, description="Renderable modules"
    )


class TemplateListItemSchema(ApiModel):
    """Template list item."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(ApiModel):
    """Response for the template list."""

    templates: list[TemplateListItemSchema] = Field(..., description="Available templates")


class TemplateContentSchema(ApiModel):
    """Response for a template's content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Kitchen configuration JSON")


class SaveConfigResponseSchema(ApiModel):
    """Response for a saved design."""

    success: bool = Field(default=True, description="Whether the design was saved")
    config_id: str = Field(..., description="Identifier to fetch the design with")
    description: str = Field(..., description="Design description")
    timestamp: str = Field(..., description="Save time (ISO 8601, UTC)")


class SavedConfigSchema(ApiModel):
    """Response for a fetched design."""

    config_id: str = Field(..., description="Design identifier")
    config: dict[str, Any] = Field(..., description="Kitchen configuration JSON")
    modules: list[dict[str, Any]] = Field(..., description="Generated modules")
    description: str = Field(..., description="Design description")
    timestamp: str = Field(..., description="Save time (ISO 8601, UTC)")


class ErrorResponseSchema(ApiModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
