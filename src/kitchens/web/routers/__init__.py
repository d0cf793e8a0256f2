"""API routers for the REST API."""

from kitchens.web.routers.configs import router as configs_router
from kitchens.web.routers.generate import router as generate_router
from kitchens.web.routers.libraries import router as libraries_router
from kitchens.web.routers.templates import router as templates_router
from kitchens.web.routers.validate import router as validate_router

__all__ = [
    "configs_router",
    "generate_router",
    "libraries_router",
    "templates_router",
    "validate_router",
]
