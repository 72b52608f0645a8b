"""
cep_weather.api.app

FastAPI app factory for the CEP weather service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Render pipeline failures as the plain-text error responses clients expect.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from cep_weather import __version__
from cep_weather.api.routers.health import router as health_router
from cep_weather.api.routers.weather import router as weather_router
from cep_weather.errors import WeatherLookupError
from cep_weather.observability.logging import configure_logging, get_logger
from cep_weather.observability.middleware import RequestContextMiddleware
from cep_weather.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        # Never log the key itself, only whether it is configured.
        log.info("startup", env=settings.env, weather_api_key_set=bool(settings.weather_api_key))
        yield
        log.info("shutdown")

    app = FastAPI(
        title="CEP Weather",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(weather_router)
    app.add_exception_handler(WeatherLookupError, _lookup_error_handler)

    return app


async def _lookup_error_handler(_: Request, exc: Exception) -> PlainTextResponse:
    status_code = getattr(exc, "status_code", 500)
    detail = getattr(exc, "detail", "internal error")
    # Plain text with a trailing newline; the body never includes the internal cause.
    return PlainTextResponse(
        f"{detail}\n",
        status_code=status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )


# --- Module Notes -----------------------------------------------------------
# Upstream clients are request-scoped (see `api.deps.http_client`), so the lifespan
# hook has no resources to open or dispose.
