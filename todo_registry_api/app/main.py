"""
Main entrypoint for the Todo Registry API.

This module assembles the FastAPI application, sets up logging,
creates the todo registry and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn todo_registry_api.app.main:app --reload

The registry is created empty with each app and lives on
``app.state``; it is discarded together with the process.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.dispatcher import CallDispatcher
from .services.registry import TodoRegistry


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with an empty registry.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the registry
    # creation below is logged with the configured handlers.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    registry = TodoRegistry(capacity=settings.capacity, page_size=settings.page_size)
    app.state.settings = settings
    app.state.registry = registry
    app.state.dispatcher = CallDispatcher(registry)
    logging.getLogger(__name__).info(
        "Todo registry ready (capacity=%s, page_size=%s)", registry.capacity, registry.page_size
    )

    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
