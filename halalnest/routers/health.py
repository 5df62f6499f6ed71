"""Health-check endpoint.

The gateway is a stateless proxy, so there is no readiness probe; the only
thing worth reporting is whether the scholar assistant has a key.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from halalnest.core.clock import utc_timestamp
from halalnest.core.config import GatewaySettings
from halalnest.core.deps import get_settings
from halalnest.schemas import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus, summary="Liveness probe")
async def health(settings: GatewaySettings = Depends(get_settings)) -> HealthStatus:
    return HealthStatus(time=utc_timestamp(), scholar_available=settings.scholar_available)
