"""Scholar assistant — OpenRouter chat-completions client.

One outbound call per question; no retries and no streaming. Every failure
is raised as a ``GatewayError`` carrying the status the caller should see.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from halalnest.core.clock import utc_timestamp
from halalnest.core.config import GatewaySettings
from halalnest.core.errors import GatewayError
from halalnest.core.jsonbody import strict_json
from halalnest.schemas.scholar import ScholarResponse

logger = structlog.get_logger()

SCHOLAR_UNAVAILABLE_MSG = (
    "❌ The scholar assistant is currently unavailable. "
    "Please try again later or consult your local imam."
)
EMPTY_ANSWER_MSG = "Empty response from scholar. Please retry."

SYSTEM_PROMPT = (
    "You are a trusted Islamic scholar assistant. Use Qur’an, authentic Sunnah "
    "and established fiqh. Be clear, cite sources when possible, and suggest "
    "asking a local scholar for complex matters. Conclude with ‘Wallahu a‘lam’."
)


def build_headers(settings: GatewaySettings) -> dict[str, str]:
    """Headers OpenRouter requires: bearer key plus app attribution."""
    api_key = settings.openrouter_api_key.get_secret_value() if settings.openrouter_api_key else ""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "HTTP-Referer": settings.scholar_referer,
        "X-Title": settings.scholar_title,
    }


def build_payload(settings: GatewaySettings, question: str) -> dict[str, Any]:
    return {
        "model": settings.scholar_model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ],
        "temperature": settings.scholar_temperature,
        "max_tokens": settings.scholar_max_tokens,
    }


def _dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None at the first missing step."""
    for key in path:
        if isinstance(key, int):
            if not isinstance(data, list) or len(data) <= key:
                return None
            data = data[key]
        elif isinstance(data, dict):
            data = data.get(key)
        else:
            return None
    return data


def upstream_error_message(status_code: int, data: Any) -> str:
    """Best-effort caller-facing text for a non-2xx upstream reply."""
    message = _dig(data, "error", "message")
    if not message:
        if status_code == 503:
            message = SCHOLAR_UNAVAILABLE_MSG
        else:
            message = f"Upstream {status_code}"
    return f"Scholar error: {message}"


def interpret_completion(status_code: int, data: Any) -> ScholarResponse:
    """Map an upstream status and parsed body to an answer or a GatewayError."""
    if not 200 <= status_code < 300:
        raise GatewayError(status_code, upstream_error_message(status_code, data))

    answer = _dig(data, "choices", 0, "message", "content")
    if not isinstance(answer, str) or not answer:
        raise GatewayError(502, EMPTY_ANSWER_MSG)

    return ScholarResponse(
        answer=answer,
        model=_dig(data, "model"),
        usage=_dig(data, "usage"),
        at=utc_timestamp(),
    )


async def ask_scholar(
    http_client: httpx.AsyncClient,
    settings: GatewaySettings,
    *,
    question: str,
) -> ScholarResponse:
    """Send ``question`` to the model provider and return its answer."""
    url = f"{settings.openrouter_base_url}/chat/completions"

    try:
        response = await http_client.post(
            url,
            headers=build_headers(settings),
            json=build_payload(settings, question),
        )
        # Parsed before the status check: a non-JSON error page is a 500
        data = strict_json(response)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("scholar_upstream_failed", url=url, error=repr(exc))
        raise GatewayError(500, SCHOLAR_UNAVAILABLE_MSG) from exc

    if not response.is_success:
        logger.warning(
            "scholar_upstream_error",
            url=url,
            status_code=response.status_code,
        )

    result = interpret_completion(response.status_code, data)
    logger.info("scholar_answered", model=result.model, answer_chars=len(result.answer))
    return result
