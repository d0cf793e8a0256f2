"""Template endpoints."""

import json

from fastapi import APIRouter

from kitchens.application.templates import TEMPLATE_METADATA
from kitchens.web.dependencies import TemplateManagerDep
from kitchens.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List all available kitchen templates."""
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get the configuration of a template.

    Raises:
        TemplateNotFoundError: If the template does not exist (404).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
