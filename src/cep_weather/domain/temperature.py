"""
cep_weather.domain.temperature

Temperature conversion and the `/weather` response payload.

Responsibilities:
- Convert a Celsius reading to Fahrenheit and Kelvin.
- Define the serialized shape (`temp_C`, `temp_F`, `temp_K`).

Note:
- Kelvin uses a 273 offset, not 273.15. This is the formula the service has
  always returned to clients; changing it is a product decision.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

KELVIN_OFFSET = 273.0


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


class ConvertedTemperature(BaseModel):
    # inf/nan would serialize as JSON null; every field must stay a number.
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temp_C: float
    temp_F: float
    temp_K: float

    @classmethod
    def from_celsius(cls, celsius: float) -> ConvertedTemperature:
        return cls(
            temp_C=celsius,
            temp_F=celsius_to_fahrenheit(celsius),
            temp_K=celsius_to_kelvin(celsius),
        )


# --- Module Notes -----------------------------------------------------------
# No range validation happens here; upstream readings are converted as-is.
