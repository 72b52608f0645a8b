"""
cep_weather.clients.weatherapi

WeatherAPI.com client: locality → current Celsius temperature.

Responsibilities:
- Issue a single GET to `{base_url}/current.json` with key, query and language.
- Translate transport/status/decoding failures into `WeatherError`s.

Note:
- A payload without `current.temp_c` is read as 0.0 degrees rather than an
  error. Callers rely on this pass-through; do not turn it into a failure here.
"""

from __future__ import annotations

import math

import httpx
from pydantic import BaseModel, StrictFloat, ValidationError

from cep_weather.errors import WeatherFetchError, WeatherPayloadError


class CurrentConditions(BaseModel):
    # Strict: "23.4" or true are malformed readings, not numbers. JSON null reads as 0.0.
    temp_c: StrictFloat | None = 0.0


class CurrentWeatherPayload(BaseModel):
    current: CurrentConditions | None = None


class WeatherApiProvider:
    def __init__(self, *, http: httpx.AsyncClient, base_url: str, lang: str = "pt") -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._lang = lang

    async def current_temperature(self, locality: str, api_key: str) -> float:
        # httpx percent-encodes params; localities carry spaces and accents ("São Paulo").
        params = {"key": api_key, "q": locality, "lang": self._lang}
        try:
            r = await self._http.get(f"{self._base_url}/current.json", params=params)
        except httpx.HTTPError as e:
            # Only the type name: httpx messages can embed the request URL, key included.
            raise WeatherFetchError(f"weatherapi request failed: {type(e).__name__}") from e

        if r.status_code != httpx.codes.OK:
            raise WeatherFetchError(f"weatherapi returned status {r.status_code}")

        try:
            payload = CurrentWeatherPayload.model_validate_json(r.content)
        except ValidationError as e:
            raise WeatherPayloadError("unreadable weatherapi payload") from e

        if payload.current is None or payload.current.temp_c is None:
            return 0.0
        celsius = payload.current.temp_c
        # Out-of-range literals (1e400) decode to inf, which has no JSON rendering downstream.
        if not math.isfinite(celsius):
            raise WeatherPayloadError("non-finite weatherapi temperature")
        return celsius


# --- Module Notes -----------------------------------------------------------
# No plausibility bounds on the reading at this layer; only non-finite values are rejected.
