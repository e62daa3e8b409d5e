"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillswapper.api.middleware.error_handler import add_error_handlers
from skillswapper.api.middleware.logging import LoggingMiddleware
from skillswapper.api.middleware.rate_limiter import RateLimiterMiddleware
from skillswapper.api.routes import admin, auth, health, matches, notifications, skills, users
from skillswapper.config.database import close_database_connections
from skillswapper.config.logging import get_logger
from skillswapper.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Application startup", environment=settings.ENVIRONMENT)
    try:
        yield
    finally:
        await close_database_connections()
        logger.info("Application shutdown")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    docs_enabled = settings.ENABLE_SWAGGER and not settings.is_production
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Reciprocal skill-exchange matching and connection workflow",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.API_PREFIX}/docs" if docs_enabled else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)

    # Rate limiting applies in production only; logging wraps it
    if settings.RATE_LIMIT_ENABLED and settings.is_production:
        RateLimiterMiddleware(app)
    LoggingMiddleware(app)

    for module in (health, auth, users, skills, matches, notifications, admin):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    return app
