"""
FastAPI application for Campaign Similarity.

Serves the browser client, which posts the campaign snapshot it read from the
contract and gets back:
- Ranked similar campaigns for a focal campaign
- Similarity groups with the ungrouped remainder
- Campaign status summaries and target-range sections
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from .dependencies import SimilarityServiceDependency
from .errors import APIError, api_error_handler
from .routers import campaigns, similarity
from ..core.config import get_settings

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for fast JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return msgspec.json.encode(content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and shutdown."""
    settings = get_settings()
    logger.info(
        "Starting %s %s (threshold=%.2f, third_axis=%s, grouping=%s)",
        settings.app_name,
        settings.app_version,
        settings.similarity_threshold,
        settings.third_axis.value,
        settings.grouping_strategy.value,
    )
    yield
    logger.info("Shutting down %s...", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Similarity scoring and grouping for crowdfunding campaigns",
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        lifespan=lifespan,
    )

    # CORS middleware - allows the browser client to call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # GZip compression middleware - compresses responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add timing header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        return response

    # Register custom API error handler for consistent error responses
    app.add_exception_handler(APIError, api_error_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with consistent format."""
        logger.error("Unhandled exception: %s", exc, exc_info=True)
        show_detail = settings.debug and settings.environment != "production"
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "detail": str(exc) if show_detail else None,
                }
            },
        )

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(tz=timezone.utc).isoformat()}

    @app.get(f"{settings.api_prefix}/status", tags=["health"])
    def service_status(service: SimilarityServiceDependency):
        """Effective similarity configuration."""
        return service.get_status()

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
        }

    app.include_router(
        similarity.router,
        prefix=f"{settings.api_prefix}/similarity",
        tags=["similarity"],
    )
    app.include_router(
        campaigns.router,
        prefix=f"{settings.api_prefix}/campaigns",
        tags=["campaigns"],
    )

    return app


app = create_app()
