"""
cep_weather.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the app's Settings to routers.
- Provide a request-scoped httpx client and the upstream clients built on it.
- Assemble the `WeatherService` with its explicit credential.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Depends, Request

from cep_weather.clients.base import LocalityResolver, WeatherProvider
from cep_weather.clients.viacep import ViaCepResolver
from cep_weather.clients.weatherapi import WeatherApiProvider
from cep_weather.services.weather_service import WeatherService
from cep_weather.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Stored by `api.app.create_app`.
    return request.app.state.settings  # type: ignore[attr-defined]


async def http_client(
    settings: Settings = Depends(settings_dep),
) -> AsyncIterator[httpx.AsyncClient]:
    # One client per request, no pooling across requests.
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as http:
        yield http


def locality_resolver(
    http: httpx.AsyncClient = Depends(http_client),
    settings: Settings = Depends(settings_dep),
) -> LocalityResolver:
    return ViaCepResolver(http=http, base_url=settings.viacep_base_url)


def weather_provider(
    http: httpx.AsyncClient = Depends(http_client),
    settings: Settings = Depends(settings_dep),
) -> WeatherProvider:
    return WeatherApiProvider(
        http=http,
        base_url=settings.weatherapi_base_url,
        lang=settings.weather_lang,
    )


def weather_service(
    resolver: LocalityResolver = Depends(locality_resolver),
    provider: WeatherProvider = Depends(weather_provider),
    settings: Settings = Depends(settings_dep),
) -> WeatherService:
    return WeatherService(resolver=resolver, provider=provider, api_key=settings.weather_api_key)


# --- Module Notes -----------------------------------------------------------
# Tests swap `locality_resolver` / `weather_provider` through `app.dependency_overrides`.
