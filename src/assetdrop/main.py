"""Main application entrypoint for AssetDrop."""

from fastapi import FastAPI

from assetdrop.api.v1 import routes_health
from assetdrop.api.v1.routes_upload import router as upload_router
from assetdrop.core.config import settings
from assetdrop.core.logging import setup_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    setup_logging()

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
    )

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(upload_router)

    return app


# Export app instance for ASGI servers
app = create_app()
