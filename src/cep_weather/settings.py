"""
cep_weather.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the API, clients and logging.
- Keep the weather API credential out of repr/logging.
- Offer a cached settings instance for the process entry point.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven settings, prefixed with `CEP_WEATHER_`.

    The weather credential is the exception: it keeps the conventional
    unprefixed `WEATHER_API_KEY` name used by deployments of this service.
    """

    model_config = SettingsConfigDict(
        env_prefix="CEP_WEATHER_",
        case_sensitive=False,
        populate_by_name=True,
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "cep-weather"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Upstream services
    viacep_base_url: str = "https://viacep.com.br/ws"
    weatherapi_base_url: str = "https://api.weatherapi.com/v1"
    weather_lang: str = "pt"
    http_timeout_seconds: float = 10.0

    weather_api_key: str | None = Field(
        default=None,
        validation_alias="WEATHER_API_KEY",
        repr=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The app reads settings from `app.state.settings` (see `api.deps.settings_dep`), so
# tests can build an app with explicit Settings(...) without touching os.environ.
