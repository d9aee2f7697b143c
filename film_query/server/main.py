"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request monitoring), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from film_query import __version__
from film_query.core.database import engine, init_db
from film_query.core.logging_config import get_logger, setup_logging
from film_query.core.monitoring import initialize_logfire

from .api.v1 import films, health
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

setup_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Handles startup and shutdown events for the FastAPI application.
    A database initialization failure is logged and does not prevent startup;
    the readiness endpoint reports the database state.
    """
    logger.info(f"Starting up {settings.app_name}...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, handlers and routers."""
    application = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
    Film Query Service API

    Read-only access to the Sakila film catalogue. Films can be listed in full
    or filtered by the first letter of their title.
    """,
        version=__version__,
        openapi_url=f"{constant.API_V1_STR}/api-docs",
        docs_url=f"{constant.API_V1_STR}/swagger-ui.html",
        redoc_url=f"{constant.API_V1_STR}/redoc",
        lifespan=lifespan,
    )

    cors = settings.cors
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    application.add_middleware(LogfireMiddleware)

    setup_exception_handlers(application)

    application.include_router(health.router, tags=["health"])
    application.include_router(films.router, prefix=f"{constant.API_V1_STR}/films", tags=["films"])

    initialize_logfire(application)
    return application


app = create_app()


def run() -> None:
    """Run the server with uvicorn using the configured host, port and log level."""
    uvicorn.run(
        "film_query.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
