"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from comet.config import Settings
from comet.interface.api.errors import register_error_handlers
from comet.interface.api.routes import admin, areas, auth, comments, health
from comet.util.di.container import create_container, setup_di
from comet.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        settings: Application settings (loaded from environment when omitted)
        container: DI container (the production container when omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Comet Comments API",
        description="Embeddable threaded comment areas with admin moderation",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Areas are embedded on arbitrary sites, so origins come from settings.
    # The admin cookie is only sent cross-origin to explicitly listed origins.
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(areas.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
