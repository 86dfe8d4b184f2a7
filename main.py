"""
MealFinder FastAPI Application
Main entry point: app factory, middleware, and configuration management
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import health, recipes
from adapters.mealdb_adapter import MealDBAdapter
from app.config import Settings, settings as default_settings
from app.exceptions import ServiceError
from api.middleware import (
    OptionsMiddleware,
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)

_logger = logging.getLogger("mealfinder.main")


def configure_logging(settings: Settings) -> None:
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )


def create_app(
    settings: Optional[Settings] = None, mealdb: Optional[MealDBAdapter] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings
        mealdb: Pre-built TheMealDB adapter. When omitted, one is created on
            startup from ``settings`` and closed on shutdown.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_adapter = app.state.mealdb is None
        if owns_adapter:
            app.state.mealdb = MealDBAdapter(
                settings.mealdb_base_url, timeout=settings.mealdb_timeout_sec
            )

        _logger.info(f"Starting MealFinder in {settings.environment.value} mode")
        _logger.info(f"Server running on port {settings.port}")
        _logger.info(f"TheMealDB API is configured at {settings.mealdb_base_url}")

        try:
            yield
        finally:
            _logger.info("Shutting down MealFinder")
            if owns_adapter:
                try:
                    await app.state.mealdb.close()
                except Exception as e:
                    _logger.exception("Error closing TheMealDB client during shutdown: %s", e)
                app.state.mealdb = None

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    app.state.settings = settings
    app.state.mealdb = mealdb

    # CORS preflights are answered before this; bare OPTIONS end here
    app.add_middleware(OptionsMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(recipes.router, prefix=settings.api_prefix)

    return app


configure_logging(default_settings)
app = create_app(default_settings)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
