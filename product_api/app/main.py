"""
Main entrypoint for the Product API.

This module assembles the FastAPI application, sets up logging,
creates the product repository and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so the service can be
run with uvicorn or another ASGI server, e.g.::

    uvicorn product_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.product_repository import ProductRepository, seed_products


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    repository : Optional[ProductRepository]
        Product store to serve.  When omitted a new repository is
        created, seeded with the demo products if
        ``settings.seed_products`` is true.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if repository is None:
        repository = ProductRepository(seed_products() if settings.seed_products else None)
    app.state.product_repository = repository

    app.include_router(v1_router, prefix="/api/v1")
    # Clients of the original service call /products directly.  Serve the
    # same routes there, hidden from the schema.
    app.include_router(v1_router, include_in_schema=False)

    logging.getLogger(__name__).info(
        "%s %s ready with %d product(s)", settings.project_name, settings.api_version, len(repository)
    )
    return app


app = create_app()
