"""
cep_weather.api.__main__

Entrypoint for running the service via `python -m cep_weather.api` (or `cep-weather`).

Responsibilities:
- Load settings (including `WEATHER_API_KEY`) once from the environment.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from cep_weather.api.app import create_app
from cep_weather.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
        access_log=False,  # RequestContextMiddleware logs requests
    )


if __name__ == "__main__":
    main()
