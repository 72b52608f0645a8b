"""
cep_weather.api.routers.health

Liveness endpoint.

Responsibilities:
- Provide liveness probe (`/healthz`).
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only: upstream APIs are not probed, the service holds no state to check.
    return {"status": "ok"}
