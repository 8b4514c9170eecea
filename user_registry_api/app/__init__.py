"""
Application package initializer.

The project is organised into small layers: ``core`` holds settings,
logging and error handling, ``schemas`` the request and response
models, ``services`` the record store and the business rules applied
to it, and ``api`` the versioned routers that expose those services
over HTTP.
"""

from .main import app  # noqa: F401
