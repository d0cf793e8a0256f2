"""Kitchen layout generation endpoints."""

import logging

from fastapi import APIRouter

from kitchens.application.config import load_config_from_dict
from kitchens.web.dependencies import GenerateCommandDep
from kitchens.web.exceptions import KitchenGenerationError
from kitchens.web.schemas.requests import GenerateRequest
from kitchens.web.schemas.responses import LayoutOutputSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=LayoutOutputSchema)
async def generate_layout(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> LayoutOutputSchema:
    """Validate a configuration and generate its renderable modules.

    Raises:
        ConfigError: If the configuration does not match the schema
            (handled by exception handler, 422).
        KitchenGenerationError: If validation or generation reports
            errors (handled by exception handler, 422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config, request.centering)
    if not output.success:
        raise KitchenGenerationError(output.errors, output.warnings)

    logger.debug(f"Generated {len(output.modules)} module(s) for {config.kitchen_id}")
    return LayoutOutputSchema.model_validate(output.to_dict())
