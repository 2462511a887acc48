"""REST service that classifies mixed-type tokens."""

from __future__ import annotations

import logging

import uvicorn

from app.core.app import create_app
from app.settings.app import AppSettings

settings = AppSettings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("bfhl_backend")

app = create_app(settings)


def run() -> None:  # pragma: no cover
    logger.info("Server is running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    run()
