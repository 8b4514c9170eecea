"""Entry point for the User Registry API.

This script launches the HTTP server.  It is intended to be executed
from the project root, for example under Docker, where you only
specify a single Python file to run.

Configuration such as ``PORT``, ``HOST``, ``LOG_LEVEL`` and
``CORS_ORIGINS`` is read from environment variables.

Usage:
    python run.py
"""
from user_registry_api.app.server import main


if __name__ == "__main__":
    main()
