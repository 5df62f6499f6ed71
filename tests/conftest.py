"""Shared fixtures: a gateway wired to a simulated upstream."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from halalnest.core.config import GatewaySettings
from halalnest.main import create_app

Handler = Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """Records outbound requests and answers them with ``handler``."""

    def __init__(self, handler: Handler | None = None) -> None:
        self.handler = handler or (lambda request: httpx.Response(200, json={}))
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OPENROUTER_API_KEY", "openrouter_api_key", "PORT", "PUBLIC_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings(tmp_path) -> Callable[..., GatewaySettings]:
    def _make(**overrides: Any) -> GatewaySettings:
        values: dict[str, Any] = {
            "openrouter_api_key": "test-key",
            "public_dir": str(tmp_path / "no-public"),
        }
        values.update(overrides)
        return GatewaySettings(_env_file=None, **values)

    return _make


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(make_settings, upstream) -> Callable[..., TestClient]:
    def _make(**overrides: Any) -> TestClient:
        app = create_app(settings=make_settings(**overrides), http_client=upstream.client())
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
