"""Pydantic schemas for the REST API."""

from kitchens.web.schemas.common import ApiModel
from kitchens.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateRequest,
    SaveConfigRequest,
)
from kitchens.web.schemas.responses import (
    ErrorResponseSchema,
    LayoutOutputSchema,
    SaveConfigResponseSchema,
    SavedConfigSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    "ApiModel",
    # Requests
    "ConfigValidateRequest",
    "GenerateRequest",
    "SaveConfigRequest",
    # Responses
    "ErrorResponseSchema",
    "LayoutOutputSchema",
    "SaveConfigResponseSchema",
    "SavedConfigSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
