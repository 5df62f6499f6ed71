"""Error body shared by every failing route."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str
