"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import health, parkings, stats
from .config import settings
from .models.errors import StorageError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, root_path="")
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(UpstreamUnavailableError)
    def upstream_unavailable(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
        logger.error("Upstream failure while handling %s: %s", request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})

    @app.exception_handler(StorageError)
    def storage_failure(request: Request, exc: StorageError) -> JSONResponse:
        logger.exception("Storage failure while handling %s", request.url.path)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(parkings.router, prefix=settings.api_prefix)
    app.include_router(stats.router, prefix=settings.api_prefix)
    return app


app = create_app()
