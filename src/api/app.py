# src/api/app.py - v1
"""FastAPI application factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fraudshield.api.facade import ScanService, build_service
from fraudshield.api.models import ErrorResponse
from fraudshield.api.routes import health_router, router
from fraudshield.config.settings import Settings
from fraudshield.scan.orchestrator import EmptyContentError
from fraudshield.version import __version__

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    service: ScanService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Global settings. Loaded from .env if None.
        service: Pre-built scan service (tests inject one with a memory
            cache and a fake analyzer). Built from settings if None.
    """
    settings = settings or (service.settings if service else Settings())
    service = service or build_service(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await service.startup()
        logger.info(
            "FraudShield API started: environment=%s, provider=%s",
            settings.environment, service.provider_name,
        )
        yield
        logger.info("FraudShield API stopped")

    app = FastAPI(
        title="FraudShield AI",
        description="Classify text, URLs and news excerpts as safe, suspicious or scam.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.include_router(health_router)

    @app.exception_handler(EmptyContentError)
    async def empty_content_handler(request: Request, exc: EmptyContentError):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=str(exc)).model_dump(exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        message = str(exc) if settings.is_development else "Something went wrong"
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error", message=message).model_dump(),
        )

    return app
