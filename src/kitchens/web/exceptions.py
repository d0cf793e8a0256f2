"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kitchens.application.config import ConfigError
from kitchens.application.libraries import LibraryCategoryError
from kitchens.application.templates import TemplateNotFoundError


class KitchenGenerationError(Exception):
    """Raised when validation or layout generation reports errors."""

    def __init__(self, errors: list[str], warnings: list[str] | None = None) -> None:
        self.errors = errors
        self.warnings = warnings or []
        super().__init__(f"Generation failed: {errors}")


class SavedConfigNotFoundError(Exception):
    """Raised when a saved kitchen configuration id is unknown."""

    def __init__(self, config_id: str) -> None:
        self.config_id = config_id
        super().__init__(f"Configuration not found: {config_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid kitchen configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ]
                or None,
            },
        )

    @app.exception_handler(KitchenGenerationError)
    async def generation_error_handler(
        request: Request, exc: KitchenGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Kitchen generation failed",
                "error_type": "generation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(LibraryCategoryError)
    async def library_category_handler(
        request: Request, exc: LibraryCategoryError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(SavedConfigNotFoundError)
    async def saved_config_not_found_handler(
        request: Request, exc: SavedConfigNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Configuration not found",
                "error_type": "not_found",
                "details": {"config_id": exc.config_id},
            },
        )
