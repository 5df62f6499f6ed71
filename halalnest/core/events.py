"""Application lifespan (startup / shutdown hooks)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI

from halalnest.core.config import GatewaySettings

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared outbound client unless one was injected."""
    settings: GatewaySettings = app.state.settings
    owns_client = app.state.http_client is None
    if owns_client:
        app.state.http_client = httpx.AsyncClient(
            timeout=settings.upstream_timeout,
            follow_redirects=True,
        )

    log.info("halalnest starting up", url=f"http://localhost:{settings.port}")
    if settings.scholar_available:
        log.info("scholar assistant enabled")
    else:
        log.warning("scholar assistant disabled - set OPENROUTER_API_KEY and restart")

    yield

    log.info("halalnest shutting down")
    if owns_client:
        await app.state.http_client.aclose()
        app.state.http_client = None
