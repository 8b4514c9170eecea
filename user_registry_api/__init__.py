"""
Top‑level package for the User Registry API.

This file makes ``user_registry_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``user_registry_api.app.main``.  All functionality lives in
submodules under ``app``; running the package with ``python -m
user_registry_api`` starts the HTTP server.
"""

__all__ = []
