"""
cep_weather.api

API package for the CEP weather service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: query parsing + delegation to `services.weather_service`.
