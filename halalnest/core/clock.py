"""UTC timestamps in the format callers receive."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
