"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kitchens.web.exceptions import register_exception_handlers
from kitchens.web.routers import (
    configs_router,
    generate_router,
    libraries_router,
    templates_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Kitchen Layout API",
        description="REST API for validating kitchen configurations and generating module layouts",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(generate_router, prefix="/api/v1")
    app.include_router(libraries_router, prefix="/api/v1")
    app.include_router(templates_router, prefix="/api/v1")
    app.include_router(configs_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
