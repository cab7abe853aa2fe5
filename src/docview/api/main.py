"""FastAPI application for docview."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docview import __version__
from docview.api.routers import content, health, links
from docview.config import Settings, get_settings
from docview.config.logging import configure_logging
from docview.services.content import ContentService

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API.

    One ContentService, and with it one HTTP client, lives for the whole
    lifetime of the application.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging(log_level=settings.log_level, json_logs=settings.is_production)
        app.state.content_service = ContentService(settings)
        logger.info("docview API started", raw_host=settings.raw_host)
        try:
            yield
        finally:
            await app.state.content_service.aclose()

    app = FastAPI(
        title="docview",
        description="Markdown document viewer with origin-aware links",
        version=__version__,
        docs_url="/docs" if settings.api_docs else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(health.router, tags=["Health"])
    app.include_router(links.router, prefix="/api/v1", tags=["Links"])
    app.include_router(content.router, prefix="/api/v1", tags=["Content"])

    return app


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "docview.api.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        workers=settings.api_workers,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
