"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courseapi import __version__
from courseapi.api import web
from courseapi.api.errors import register_exception_handlers
from courseapi.api.routes import courses, registrations, students, system
from courseapi.config import Settings
from courseapi.logging import get_logger, sanitize_for_log
from courseapi.store import Database

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database for the lifetime of the app and close it on shutdown."""
    settings: Settings = app.state.settings

    # Startup
    database = Database(settings.database_url)
    database.create_tables()
    app.state.database = database
    logger.info("API ready (database=%s)", sanitize_for_log(settings.database_url))

    yield

    # Shutdown
    app.state.database = None
    database.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Course Registration API",
        description="REST API for managing courses, students and registrations",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager and dependencies
    app.state.settings = settings if settings is not None else Settings.from_env()
    app.state.database = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(system.router, prefix="/api")
    app.include_router(courses.router, prefix="/api")
    app.include_router(students.router, prefix="/api")
    app.include_router(registrations.router, prefix="/api")
    # Catch-all client route goes last
    app.include_router(web.router)

    return app


# Default app instance
app = create_app()
