"""FastAPI dependencies exposing the per-application singletons."""

from __future__ import annotations

import httpx
from fastapi import Request

from halalnest.core.config import GatewaySettings


def get_settings(request: Request) -> GatewaySettings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound client, opened by the lifespan or injected by the caller."""
    client: httpx.AsyncClient | None = request.app.state.http_client
    if client is None:
        raise RuntimeError("outbound HTTP client is not initialised")
    return client
