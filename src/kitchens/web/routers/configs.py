"""Saved kitchen design endpoints."""

from fastapi import APIRouter

from kitchens.web.dependencies import ConfigStorageDep
from kitchens.web.schemas.requests import SaveConfigRequest
from kitchens.web.schemas.responses import SaveConfigResponseSchema, SavedConfigSchema

DEFAULT_DESCRIPTION = "AI-generated kitchen design"

router = APIRouter(prefix="/kitchen-configs", tags=["kitchen-configs"])


@router.post("", response_model=SaveConfigResponseSchema)
async def save_config(
    request: SaveConfigRequest,
    storage: ConfigStorageDep,
) -> SaveConfigResponseSchema:
    """Save a configuration together with its generated modules."""
    saved = storage.save(
        request.config,
        request.modules,
        request.description or DEFAULT_DESCRIPTION,
    )
    return SaveConfigResponseSchema(
        config_id=saved.config_id,
        description=saved.description,
        timestamp=saved.timestamp,
    )


@router.get("/{config_id}", response_model=SavedConfigSchema)
async def get_config(config_id: str, storage: ConfigStorageDep) -> SavedConfigSchema:
    """Fetch a saved design.

    Raises:
        SavedConfigNotFoundError: If the id is unknown (404).
    """
    saved = storage.get(config_id)
    return SavedConfigSchema(
        config_id=saved.config_id,
        config=saved.config,
        modules=saved.modules,
        description=saved.description,
        timestamp=saved.timestamp,
    )
