"""
cep_weather.services

Service-layer package.

Responsibilities:
- Orchestrate validation, upstream lookups and conversion for one request.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake clients.
