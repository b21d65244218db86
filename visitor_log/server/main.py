"""
Main Application Entry Point.

This module builds the FastAPI application, configures middleware (CORS,
request tracing), registers exception handlers and includes all API routers.
The visitor repository is injected into ``create_app`` and lives on
``app.state``; each call produces an independent application.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visitor_log.core.logging_config import get_logger, setup_logging
from visitor_log.core.monitoring import initialize_logfire
from visitor_log.core.repositories import InMemoryVisitorRepository, VisitorRepository

from .api.v1 import health, visitors
from .core import constant
from .core.config import Settings, settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.visitors import VisitorService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Handles startup and shutdown events for the FastAPI application.
    """
    repository = app.state.visitor_service.repository
    logger.info(f"Starting up {constant.PROJECT_NAME} Server with {type(repository).__name__}...")

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")


def create_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[VisitorRepository] = None,
) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the values bound from the environment.
        repository: Visitor store; defaults to a fresh in-memory repository.

    Returns:
        The application, with its VisitorService available as ``app.state.visitor_service``.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        Visitor Log API

        Sign visitors in with a name and mobile number, list the log and sign visitors out.
        """,
        version=constant.API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.visitor_service = VisitorService(repository if repository is not None else InMemoryVisitorRepository())

    cors = app_settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.add_middleware(LogfireMiddleware)

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(visitors.router, prefix=f"{constant.API_PREFIX}/visitors", tags=["visitors"])

    initialize_logfire(app, app_settings.logfire)
    return app


setup_logging(log_level=settings.log_level, log_format=settings.log_format)
app = create_app()


def run() -> None:
    """Serve the application with uvicorn using host/port from settings."""
    uvicorn.run(
        "visitor_log.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
