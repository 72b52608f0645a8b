"""
cep_weather.errors

Error taxonomy for the weather lookup pipeline.

Responsibilities:
- Define one exception family per user-visible failure condition.
- Carry the HTTP status and public text each condition maps to, so the API
  layer renders them without knowing pipeline internals.
"""

from __future__ import annotations


class WeatherLookupError(Exception):
    """
    Base class for every terminal pipeline failure.

    `detail` is the only text ever returned to the caller; the exception message
    (if any) stays internal and is used for logs.
    """

    status_code: int = 500
    detail: str = "internal error"


class InvalidPostalCodeError(WeatherLookupError):
    status_code = 422
    detail = "invalid zipcode"


class LocalityError(WeatherLookupError):
    # Transport failures and "not found" share one public condition.
    status_code = 404
    detail = "can not find zipcode"


class LocalityLookupError(LocalityError):
    """ViaCEP unreachable or answered with a non-200 status."""


class LocalityNotFoundError(LocalityError):
    """ViaCEP flagged the code as unknown or returned an empty locality."""


class MissingCredentialError(WeatherLookupError):
    status_code = 500
    detail = "weather api key not set"


class WeatherError(WeatherLookupError):
    status_code = 502
    detail = "error fetching weather"


class WeatherFetchError(WeatherError):
    """Weather provider unreachable or answered with a non-200 status."""


class WeatherPayloadError(WeatherError):
    """Weather provider body could not be decoded."""


# --- Module Notes -----------------------------------------------------------
# Rendering lives in `api.app` (single exception handler for WeatherLookupError).
