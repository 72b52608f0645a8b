"""
cep_weather.services.weather_service

Request orchestrator for `GET /weather`.

Responsibilities:
- Validate the postal code before any network call.
- Resolve the locality, check the credential, then fetch the temperature,
  strictly in that order.
- Convert the reading and return the response payload.

Every failure surfaces as a `WeatherLookupError` subclass; the API layer maps
those to HTTP responses.
"""

from __future__ import annotations

from cep_weather.clients.base import LocalityResolver, WeatherProvider
from cep_weather.domain.postal_code import is_valid_postal_code
from cep_weather.domain.temperature import ConvertedTemperature
from cep_weather.errors import (
    InvalidPostalCodeError,
    LocalityError,
    MissingCredentialError,
    WeatherError,
)
from cep_weather.observability.logging import get_logger

log = get_logger(__name__)


class WeatherService:
    def __init__(
        self,
        *,
        resolver: LocalityResolver,
        provider: WeatherProvider,
        api_key: str | None,
    ) -> None:
        self._resolver = resolver
        self._provider = provider
        self._api_key = api_key

    async def current_temperature(self, cep: str | None) -> ConvertedTemperature:
        if cep is None or not is_valid_postal_code(cep):
            log.info("invalid_postal_code")
            raise InvalidPostalCodeError()

        try:
            locality = await self._resolver.resolve_locality(cep)
        except LocalityError as e:
            log.info("locality_lookup_failed", cep=cep, reason=type(e).__name__, error=str(e))
            raise
        log.info("locality_resolved", cep=cep, locality=locality)

        # Checked after locality resolution and before any weather call.
        if not self._api_key:
            log.error("weather_api_key_missing")
            raise MissingCredentialError()

        try:
            celsius = await self._provider.current_temperature(locality, self._api_key)
        except WeatherError as e:
            log.warning(
                "weather_fetch_failed",
                locality=locality,
                reason=type(e).__name__,
                error=str(e),
            )
            raise

        result = ConvertedTemperature.from_celsius(celsius)
        log.info("temperature_converted", locality=locality, temp_c=result.temp_C)
        return result


# --- Module Notes -----------------------------------------------------------
# No retries: one failed upstream attempt is final for the request.
