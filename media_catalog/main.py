"""Media Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → {"message": ...} responses
    - CORS configured from settings (not hardcoded)
    - Exactly one store per app, created in create_app and exposed on app.state
    - Settings passed to create_app are the ones routes and lifespan see

Design Decisions:
    - create_app factory: tests build a fresh app around their own store
    - Store attached eagerly, not in lifespan: ASGI test transports skip lifespan
    - Lifespan configures logging and logs startup/shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from media_catalog.api.error_handlers import register_error_handlers
from media_catalog.api.routes import convert, downloads, health, media
from media_catalog.config import Settings, get_settings
from media_catalog.core.repository_protocols import CatalogStorage
from media_catalog.infrastructure.memory_storage import MemStorage
from media_catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    storage: CatalogStorage | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the API around a store (a seeded MemStorage by default)."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.dependency_overrides[get_settings] = lambda: settings
    app.state.storage = (
        storage if storage is not None
        else MemStorage(seed=settings.seed_sample_data)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(media.router)
    app.include_router(downloads.router)
    app.include_router(convert.router)

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
