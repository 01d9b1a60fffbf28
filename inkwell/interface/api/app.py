"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkwell.config import Settings
from inkwell.interface.api.routes import categories, health, posts, tags
from inkwell.interface.error import register_error_handlers
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.observability import instrument_fastapi


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application without dependency injection wired.

    Callers attach a container with ``setup_di``; ``app`` below uses the
    production container, tests use one with in-memory persistence.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Inkwell API",
        description="Backend API for Inkwell - posts, categories and tags for a blogging platform",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(tags.router)

    return app_instance


def create_production_app() -> FastAPI:
    """Create the application wired to the production container."""
    app_instance = create_app()
    setup_di(app_instance, create_container())
    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_production_app()
