"""
Process bootstrap for the API server.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``core.config``).  Defaults are ``0.0.0.0`` and
``3001``.
"""

import asyncio
import logging

from uvicorn import Config, Server

from .core.config import settings
from .core.logging_config import log_level_name, uvicorn_log_config
from .main import app

logger = logging.getLogger(__name__)


async def run_api() -> None:
    """Serve the application with Uvicorn until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=uvicorn_log_config(settings),
        log_level=logging.getLevelName(log_level_name(settings)),
    )
    server = Server(config)
    logger.info("Server running on port %s", settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
