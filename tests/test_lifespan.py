"""Startup and shutdown of the shared outbound client."""

import logging

import httpx
import pytest
from fastapi.testclient import TestClient

from halalnest.main import create_app


def test_owned_client_is_opened_and_closed(make_settings):
    app = create_app(settings=make_settings())

    with TestClient(app) as client:
        owned = app.state.http_client
        assert isinstance(owned, httpx.AsyncClient)
        assert owned.timeout == httpx.Timeout(None)
        assert owned.is_closed is False
        assert client.get("/health").status_code == 200

    assert owned.is_closed is True
    assert app.state.http_client is None


def test_configured_timeout_is_applied(make_settings):
    app = create_app(settings=make_settings(upstream_timeout=5.0))

    with TestClient(app):
        assert app.state.http_client.timeout == httpx.Timeout(5.0)


def test_injected_client_is_left_open(make_settings, upstream):
    injected = upstream.client()
    app = create_app(settings=make_settings(), http_client=injected)

    with TestClient(app):
        assert app.state.http_client is injected

    assert app.state.http_client is injected
    assert injected.is_closed is False


def test_missing_key_warns_at_startup(make_settings, caplog):
    app = create_app(settings=make_settings(openrouter_api_key=None))
    # create_app resets the root handlers, so attach the capture handler afterwards
    logging.getLogger().addHandler(caplog.handler)

    with TestClient(app):
        pass

    warnings = [
        record.msg.get("event", "")
        for record in caplog.records
        if record.levelno == logging.WARNING and isinstance(record.msg, dict)
    ]
    assert any(event.startswith("scholar assistant disabled") for event in warnings)


def test_requests_fail_loudly_without_a_client(make_settings):
    app = create_app(settings=make_settings())
    client = TestClient(app)

    with pytest.raises(RuntimeError, match="not initialised"):
        client.get("/api/prayer-times")
