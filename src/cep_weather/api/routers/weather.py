"""
cep_weather.api.routers.weather

Public weather endpoint.

Responsibilities:
- Expose `GET /weather?cep=<postal code>`.
- Delegate to `WeatherService`; errors are rendered by the app-level handler.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from cep_weather.api.deps import weather_service
from cep_weather.domain.temperature import ConvertedTemperature
from cep_weather.services.weather_service import WeatherService

router = APIRouter(tags=["weather"])


@router.get("/weather", response_model=ConvertedTemperature)
async def get_weather(
    cep: str | None = Query(default=None, description="8-digit postal code, digits only"),
    svc: WeatherService = Depends(weather_service),
) -> ConvertedTemperature:
    # A missing `cep` reaches the service as None and fails validation there (422).
    return await svc.current_temperature(cep)


# --- Module Notes -----------------------------------------------------------
# Error bodies are plain text (see `api.app._lookup_error_handler`), not FastAPI's JSON detail.
