"""Strict JSON decoding of upstream bodies."""

from __future__ import annotations

import json
from typing import Any

import httpx


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token!r}")


def strict_json(response: httpx.Response) -> Any:
    """Decode ``response`` as RFC 8259 JSON.

    ``NaN``, ``Infinity`` and ``-Infinity`` are refused so every body we
    accept can be serialised back out unchanged.
    """
    return json.loads(response.content, parse_constant=_reject_constant)
