"""HalalNest gateway — FastAPI application factory.

Serves the scholar and prayer-times proxies, a health probe, and the static
frontend bundle for every other path.
"""

from __future__ import annotations

import pathlib

import httpx
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from halalnest.core.config import GatewaySettings
from halalnest.core.config import settings as default_settings
from halalnest.core.errors import register_exception_handlers
from halalnest.core.events import lifespan
from halalnest.core.logging import setup_logging
from halalnest.core.middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from halalnest.routers import health
from halalnest.routers.prayer_times import router as prayer_times_router
from halalnest.routers.scholar import router as scholar_router

log = structlog.get_logger()


def create_app(
    settings: GatewaySettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the gateway.

    Args:
        settings: Configuration; defaults to the environment-loaded settings.
        http_client: Outbound client to use instead of the one the lifespan
            opens. The caller keeps ownership and must close it.
    """
    settings = settings or default_settings
    setup_logging(settings)

    application = FastAPI(
        title="HalalNest Gateway",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.http_client = http_client

    # Any origin may read any response; no credentials are involved
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(SecurityHeadersMiddleware)
    application.add_middleware(RequestContextMiddleware)

    register_exception_handlers(application)

    application.include_router(health.router)
    application.include_router(scholar_router)
    application.include_router(prayer_times_router)

    # Mounted last so the API routes above take precedence
    public_dir = pathlib.Path(settings.public_dir).resolve()
    if public_dir.is_dir():
        application.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
    else:
        log.warning("public directory missing, static files disabled", public_dir=str(public_dir))

    return application


app = create_app()
