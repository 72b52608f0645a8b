"""
cep_weather.domain

Pure domain helpers (no I/O).

Responsibilities:
- Postal code syntax validation.
- Temperature scale conversion and the response payload model.
"""

# Package marker.
