"""
cep_weather.clients.base

Capability interfaces consumed by `services.weather_service.WeatherService`.

Responsibilities:
- Describe what a locality resolver and a weather provider must offer.
- Document which exceptions each capability may raise.
"""

from __future__ import annotations

from typing import Protocol


class LocalityResolver(Protocol):
    async def resolve_locality(self, cep: str) -> str:
        """
        Return the trimmed locality name for `cep`.

        Raises `LocalityLookupError` on transport/status failures and
        `LocalityNotFoundError` when the code is unknown or the name is empty.
        """
        ...


class WeatherProvider(Protocol):
    async def current_temperature(self, locality: str, api_key: str) -> float:
        """
        Return the current Celsius temperature for `locality`.

        Raises `WeatherFetchError` on transport/status failures and
        `WeatherPayloadError` when the body cannot be decoded. A payload without
        a temperature field yields 0.0.
        """
        ...


# --- Module Notes -----------------------------------------------------------
# Test doubles only need to implement these coroutines; see tests/conftest.py.
