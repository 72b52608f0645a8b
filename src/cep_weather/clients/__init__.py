"""
cep_weather.clients

Upstream client package.

Responsibilities:
- Declare the capabilities the pipeline depends on (locality resolution, weather).
- Provide the httpx-backed implementations for ViaCEP and WeatherAPI.com.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service layer depends on `clients.base` protocols, never on HTTP details.
