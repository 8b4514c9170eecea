"""
Logging configuration built from ``Settings``.

The application and uvicorn share one line format and the same
destinations: the console, plus ``settings.log_file`` when it is set.
``setup_logging`` configures the root logger for the application's own
modules; ``uvicorn_log_config`` produces the ``log_config`` dictionary
handed to ``uvicorn.Config`` so that server and access logs look the
same.  Neither touches loggers the other one owns.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_level_name(settings: Settings) -> str:
    """Return ``settings.log_level`` as a level name, ``INFO`` if unknown."""
    name = settings.log_level.upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


def _base_config(settings: Settings) -> Dict[str, Any]:
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(settings.log_file).resolve()),
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
    }


def uvicorn_log_config(settings: Settings) -> Dict[str, Any]:
    """Build the ``log_config`` for ``uvicorn.Config``.

    Only the ``uvicorn`` loggers are configured; they do not propagate,
    so the root logger and whatever handlers it carries are left alone.
    """
    config = _base_config(settings)
    level = log_level_name(settings)
    handlers = list(config["handlers"])
    config["loggers"] = {
        "uvicorn": {"handlers": handlers, "level": level, "propagate": False},
        "uvicorn.error": {"level": level},
        "uvicorn.access": {"handlers": handlers, "level": level, "propagate": False},
    }
    return config


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    Does nothing when the root logger already has handlers, which is
    the case when ``create_app`` runs more than once in a process.
    """
    if logging.getLogger().handlers:
        return

    config = _base_config(settings)
    config["root"] = {"level": log_level_name(settings), "handlers": list(config["handlers"])}
    logging.config.dictConfig(config)
