"""
Run the storefront API with uvicorn.

Usage:
    python -m storefront.entrypoints.http
    HOST=0.0.0.0 PORT=8080 python -m storefront.entrypoints.http
"""

from __future__ import annotations

import uvicorn

from storefront.entrypoints.http.app import build_app
from storefront.infra.config import load_settings
from storefront.infra.logging_config import configure_logging


def main() -> None:
    settings = load_settings()
    logger = configure_logging(settings.log_level)

    app = build_app(settings)

    logger.info("[ ready ] http://%s:%s", settings.host, settings.port)
    logger.info("[ ready ] Swagger UI available at http://%s:%s/docs", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
