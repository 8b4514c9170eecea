"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all.  Values are read
when a ``Settings`` instance is created, which lets tests build their
own instances after adjusting the environment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "User Registry API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When unset, logs go to the console only.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Network binding used by ``run.py``.  The port falls back to 3001
    # when ``PORT`` is not set.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3001")))

    # Prefix under which the versioned router is mounted.  Empty by
    # default so that the collection lives at ``/users``.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", ""))

    # Comma‑separated list of allowed origins.  ``*`` allows any origin.
    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list, ignoring blanks."""
        origins = [origin.strip() for origin in self.cors_origins.split(",")]
        return [origin for origin in origins if origin] or ["*"]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
