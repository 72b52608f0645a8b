"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide seeded upstream doubles (see `tests.fakes`).
- Build apps with explicit Settings and upstream overrides (no network, no os.environ).
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi import FastAPI

from cep_weather.api import deps
from cep_weather.api.app import create_app
from cep_weather.errors import WeatherFetchError
from cep_weather.settings import Settings
from tests.fakes import StaticLocalityResolver, StaticWeatherProvider


@pytest.fixture
def resolver() -> StaticLocalityResolver:
    return StaticLocalityResolver(
        {
            "01310100": "São Paulo",
            "20040020": "Rio de Janeiro",
            "80010000": "Curitiba",
            "30112000": "Belo Horizonte",
        }
    )


@pytest.fixture
def provider() -> StaticWeatherProvider:
    return StaticWeatherProvider(
        {
            "São Paulo": 22.5,
            "Rio de Janeiro": 28.3,
            "Curitiba": 0.0,
            "Belo Horizonte": WeatherFetchError("upstream 503"),
        }
    )


@pytest.fixture
def make_app(
    resolver: StaticLocalityResolver, provider: StaticWeatherProvider
) -> Callable[..., FastAPI]:
    def _make(*, weather_api_key: str | None = "test-key") -> FastAPI:
        app = create_app(settings=Settings(env="test", weather_api_key=weather_api_key))
        app.dependency_overrides[deps.locality_resolver] = lambda: resolver
        app.dependency_overrides[deps.weather_provider] = lambda: provider
        return app

    return _make


# --- Module Notes -----------------------------------------------------------
# Client-level tests (ViaCEP / WeatherAPI parsing) use httpx.MockTransport instead.
