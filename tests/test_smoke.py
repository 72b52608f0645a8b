"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.
"""

from __future__ import annotations

import httpx
import pytest

from cep_weather.api.app import create_app
from cep_weather.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    app = create_app(settings=Settings(env="test"))

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/healthz")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_request_id_is_propagated() -> None:
    app = create_app(settings=Settings(env="test"))

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
        assert r.headers["x-request-id"] == "abc-123"

        r = await client.get("/healthz")
        assert r.headers["x-request-id"]


def test_settings_hide_weather_api_key() -> None:
    settings = Settings(env="test", weather_api_key="super-secret")
    assert settings.weather_api_key == "super-secret"
    assert "super-secret" not in repr(settings)


def test_settings_read_unprefixed_weather_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_API_KEY", "from-env")
    monkeypatch.setenv("CEP_WEATHER_API_PORT", "9090")
    settings = Settings()
    assert settings.weather_api_key == "from-env"
    assert settings.api_port == 9090
