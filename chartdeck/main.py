"""
FastAPI application factory + lifespan.

This is the chart engine's HTTP surface:
- Dataset upload + preview.
- Axis / kind selection and chart generation per rendering target.
- Charts released on shutdown (view teardown).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chartdeck import __version__
from chartdeck.api.v1 import api_router
from chartdeck.core.config import settings
from chartdeck.core.log import configure_logging
from chartdeck.services.orchestrator import chart_orchestrator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging.
    Shutdown: release every bound chart.
    """
    configure_logging()
    logger.info(f"[App] Starting {settings.APP_NAME} v{__version__}")

    yield

    logger.info("[App] Shutting down, releasing charts")
    chart_orchestrator.shutdown()


def create_fastapi_app() -> FastAPI:
    """Application factory for FastAPI."""
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Spreadsheet data to render-ready chart descriptors",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "app": settings.APP_NAME,
            "version": __version__,
            "status": "running",
            "docs": "/api/docs" if settings.DEBUG else "disabled",
        }

    return app


# Module-level instance for ``uvicorn chartdeck.main:app``
app = create_fastapi_app()
