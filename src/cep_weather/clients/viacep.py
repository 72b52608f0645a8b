"""
cep_weather.clients.viacep

ViaCEP client: postal code → locality name.

Responsibilities:
- Issue a single GET to `{base_url}/{cep}/json/`.
- Translate transport/status failures and empty results into `LocalityError`s.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ValidationError

from cep_weather.errors import LocalityLookupError, LocalityNotFoundError


class ViaCepPayload(BaseModel):
    # ViaCEP sends {"erro": true} (or "true" on newer deployments) for unknown codes.
    localidade: str = ""
    erro: bool = False


class ViaCepResolver:
    def __init__(self, *, http: httpx.AsyncClient, base_url: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def resolve_locality(self, cep: str) -> str:
        try:
            r = await self._http.get(f"{self._base_url}/{cep}/json/")
        except httpx.HTTPError as e:
            raise LocalityLookupError(f"viacep request failed: {e!r}") from e

        if r.status_code != httpx.codes.OK:
            raise LocalityLookupError(f"invalid status returned from viacep: {r.status_code}")

        try:
            payload = ViaCepPayload.model_validate_json(r.content)
        except ValidationError as e:
            # An undecodable body carries no locality; same outcome as an empty one.
            raise LocalityNotFoundError("unreadable viacep payload") from e

        locality = payload.localidade.strip()
        if payload.erro or not locality:
            raise LocalityNotFoundError(f"cep {cep} not found")
        return locality
