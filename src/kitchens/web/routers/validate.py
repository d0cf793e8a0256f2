"""Configuration validation endpoints."""

from fastapi import APIRouter

from kitchens.web.dependencies import ValidateCommandDep
from kitchens.web.schemas.requests import ConfigValidateRequest
from kitchens.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    command: ValidateCommandDep,
) -> ValidationResultSchema:
    """Validate a kitchen configuration without generating it.

    Schema problems are reported as errors in the body, so this endpoint
    answers 200 for any JSON object.
    """
    result = command.execute(request.config)
    return ValidationResultSchema.model_validate(result.to_dict())
