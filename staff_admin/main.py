"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staff_admin import __version__
from staff_admin.config import Settings, get_settings
from staff_admin.application.services.otp_service import DisabledStaffNotifier, StaffNotifier
from staff_admin.core.exceptions import register_exception_handlers
from staff_admin.core.logging import configure_logging
from staff_admin.core.middleware import setup_middleware
from staff_admin.infrastructure.database import Database
from staff_admin.interfaces.api.staff import router as staff_router

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    notifier: Optional[StaffNotifier] = None,
) -> FastAPI:
    """Build the application. The store is opened at startup unless one is injected."""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Staff Admin API...", env=settings.ENVIRONMENT)
        if settings.uses_default_secret:
            logger.warning("TOKEN_SECRET is not set, using the built-in default secret")

        owns_database = app.state.database is None
        if owns_database:
            app.state.database = Database(settings.DATABASE_URL)
        app.state.database.initialize()

        yield

        if owns_database:
            app.state.database.dispose()
            app.state.database = None
        logger.info("Staff Admin API stopped")

    app = FastAPI(
        title="Staff Admin API",
        description="Admin panel endpoints for managing staff accounts",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.notifier = notifier or DisabledStaffNotifier()

    setup_middleware(app)
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(staff_router)

    @app.get("/")
    def root():
        return {
            "name": "Staff Admin API",
            "version": __version__,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
