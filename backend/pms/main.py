"""PMS - Modern Property Suite - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pms.core.config import Settings
from pms.core.env_validation import validate_environment
from pms.core.errors import PMSError
from pms.core.logging_config import configure_logging
from pms.middleware import RequestContextMiddleware
from pms.routers import (
    agreements_router,
    applications_router,
    auth_router,
    dashboard_router,
    maintenance_router,
    notifications_router,
    payments_router,
    properties_router,
)
from pms.services.store import RecordStore, get_record_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("PMS API starting")
    yield
    logger.info("PMS API stopped")


async def pms_error_handler(request: Request, exc: PMSError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    # Hard-fails (exit 1) on inconsistent configuration
    settings = validate_environment(settings)
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Property lifecycle suite: listings, tenant screening, leases, rent and maintenance.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    allowed_origins = [origin.strip() for origin in settings.allowed_origins.split(",")]
    logger.info(f"CORS configured with origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestContextMiddleware,
        header_name=settings.request_id_header,
        user_header=settings.auth_header_user_email,
    )
    app.add_exception_handler(PMSError, pms_error_handler)

    # API v1 routers
    for router in (
        auth_router,
        properties_router,
        applications_router,
        agreements_router,
        payments_router,
        maintenance_router,
        notifications_router,
        dashboard_router,
    ):
        app.include_router(router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check(store: RecordStore = Depends(get_record_store)):
        """Health check endpoint; reports a store that fell back to seed data."""
        store.load()
        return {
            "status": "degraded" if store.recovered_from_corruption else "healthy",
            "service": settings.app_name,
            "store_recovered": store.recovered_from_corruption,
        }

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs" if settings.debug else "Disabled in production",
        }

    return app


app = create_app()
