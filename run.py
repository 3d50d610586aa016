"""Entry point for the Product API.

This script serves the FastAPI application with Uvicorn.  Host, port
and log level are read from the environment through ``Settings``
(``HOST``, ``PORT`` and ``LOG_LEVEL``; defaults ``0.0.0.0``, ``9090``
and ``INFO``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_api.app.core.config import settings
from product_api.app.main import app


async def run_api() -> None:
    """Start the API server and block until it shuts down."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
