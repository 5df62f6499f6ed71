"""Scholar assistant route (forwards questions to the model provider)."""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Request, status

from halalnest.core.config import GatewaySettings
from halalnest.core.deps import get_http_client, get_settings
from halalnest.core.errors import GatewayError
from halalnest.schemas import ErrorResponse, ScholarRequest, ScholarResponse
from halalnest.services.scholar_client import SCHOLAR_UNAVAILABLE_MSG, ask_scholar

router = APIRouter(prefix="/api", tags=["Scholar"])

ASK_PROMPT_MSG = "Please type a question."


@router.post(
    "/ask-scholar",
    response_model=ScholarResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def ask(
    request: Request,
    settings: GatewaySettings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> ScholarResponse:
    """Answer an Islamic question via the configured model."""
    # Checked before the body so a disabled assistant never reports 400
    if not settings.scholar_available:
        raise GatewayError(status.HTTP_503_SERVICE_UNAVAILABLE, SCHOLAR_UNAVAILABLE_MSG)

    if not _is_json(request):
        raise GatewayError(status.HTTP_400_BAD_REQUEST, ASK_PROMPT_MSG)
    try:
        payload = ScholarRequest.model_validate(await request.json())
    except ValueError:
        raise GatewayError(status.HTTP_400_BAD_REQUEST, ASK_PROMPT_MSG)

    return await ask_scholar(http_client, settings, question=payload.question)


def _is_json(request: Request) -> bool:
    """Only ``application/json`` bodies are read; anything else has no question."""
    media_type = request.headers.get("content-type", "").split(";")[0]
    return media_type.strip().lower() == "application/json"
