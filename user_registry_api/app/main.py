"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging, CORS
and error handling, creates the record store and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``.
Importing the app here makes it easy to run with uvicorn or another
ASGI server, e.g.::

    uvicorn user_registry_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, settings as default_settings
from .core.error_handlers import setup_error_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.user_store import UserStore


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds its own ``UserStore`` (unless one is supplied), so
    separate applications never share records.  Tests rely on this to
    start every case from an empty collection.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    store : Optional[UserStore]
        Pre‑built store to serve.  A fresh empty store is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.user_store = store if store is not None else UserStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_error_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
