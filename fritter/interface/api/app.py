"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fritter.config import Settings
from fritter.interface.api.errors import register_error_handlers
from fritter.interface.api.routes import (
    content,
    credibility,
    filters,
    follow,
    freets,
    health,
    tags,
    users,
)
from fritter.util.di.container import create_container
from fritter.util.observability import instrument_fastapi


def create_api_router() -> APIRouter:
    """Router holding every resource under /api."""
    api = APIRouter(prefix="/api")
    api.include_router(users.router)
    api.include_router(freets.router)
    api.include_router(tags.router)
    api.include_router(credibility.router)
    api.include_router(follow.router)
    api.include_router(filters.router)
    api.include_router(content.router)
    return api


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to serve from, the production one by default
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Fritter API",
        description="Backend API for Fritter - short posts with tags, follows, filters and credibility votes",
        version=health.API_VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(create_api_router())

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
