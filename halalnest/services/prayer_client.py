"""Prayer times — Aladhan ``timingsByCity`` client."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from halalnest.core.errors import GatewayError
from halalnest.core.jsonbody import strict_json

logger = structlog.get_logger()

PRAYER_UNAVAILABLE_MSG = "Prayer times service unavailable"

DEFAULT_CITY = "Riyadh"
DEFAULT_COUNTRY = "Saudi Arabia"
# Aladhan calculation method id, passed through untouched
DEFAULT_METHOD = "2"


async def fetch_timings(
    http_client: httpx.AsyncClient,
    base_url: str,
    *,
    city: str,
    country: str,
    method: str,
) -> Any:
    """Fetch timings for a city and return the parsed upstream body as-is.

    The upstream status is not inspected: whatever JSON Aladhan answers with
    (including its own error envelopes) is relayed to the caller.
    """
    url = f"{base_url}/timingsByCity"
    try:
        response = await http_client.get(
            url,
            params={"city": city, "country": country, "method": method},
        )
        return strict_json(response)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning(
            "prayer_times_upstream_failed",
            url=url,
            city=city,
            country=country,
            error=repr(exc),
        )
        raise GatewayError(500, PRAYER_UNAVAILABLE_MSG) from exc
