"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from .errors import register_exception_handlers
from .routes import health, users
from modules.auth.routes import router as auth_router
from modules.assignments.routes import (
    router as assignments_router,
    legacy_router as legacy_assignments_router,
)
from modules.notes.routes import (
    router as notes_router,
    legacy_router as legacy_notes_router,
)
from modules.voice.routes import router as voice_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once from settings."""
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        "Starting %s on %s:%s (%s)",
        settings.app_name, settings.host, settings.port, settings.environment,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Raises:
        ConfigurationError: If no token signing secret is configured

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    # Fail before serving anything if tokens can't be signed
    settings.resolve_jwt_secret()

    app = FastAPI(
        title=settings.app_name,
        description="Accessible, voice-driven assignment and notes tracker for students",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(assignments_router, prefix="/api/assignments", tags=["assignments"])
    app.include_router(notes_router, prefix="/api/notes", tags=["notes"])
    app.include_router(voice_router, prefix="/api/voice", tags=["voice"])

    if settings.enable_legacy_routes:
        logger.warning("Legacy unauthenticated routes are enabled")
        app.include_router(
            legacy_assignments_router, prefix="/api/legacy/assignments", tags=["legacy"]
        )
        app.include_router(legacy_notes_router, prefix="/api/legacy/notes", tags=["legacy"])

    return app


# Application instance for uvicorn
app = create_app()
