"""Prayer times route (relays Aladhan timings by city)."""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from halalnest.core.config import GatewaySettings
from halalnest.core.deps import get_http_client, get_settings
from halalnest.schemas import ErrorResponse
from halalnest.services.prayer_client import (
    DEFAULT_CITY,
    DEFAULT_COUNTRY,
    DEFAULT_METHOD,
    fetch_timings,
)

router = APIRouter(prefix="/api", tags=["Prayer times"])


@router.get("/prayer-times", responses={500: {"model": ErrorResponse}})
async def prayer_times(
    city: str = Query(DEFAULT_CITY),
    country: str = Query(DEFAULT_COUNTRY),
    method: str = Query(DEFAULT_METHOD),
    settings: GatewaySettings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> JSONResponse:
    """Timings for a city, relayed verbatim from upstream."""
    data = await fetch_timings(
        http_client,
        settings.prayer_times_base_url,
        city=city,
        country=country,
        method=method,
    )
    return JSONResponse(content=data)
