"""Error handling for the FastAPI application.

Every failure leaves the API as a JSON object with a ``message`` key,
whether it comes from the user service, from routing (unknown path or
method) or from request body parsing.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import UserRegistryError

logger = logging.getLogger(__name__)


def setup_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on ``app``.

    Args:
        app: The FastAPI application instance to configure
    """

    @app.exception_handler(UserRegistryError)
    async def handle_user_registry_error(request: Request, exc: UserRegistryError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render routing errors (404, 405, ...) with the common body shape."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report unparseable or wrongly typed bodies as a bad request.

        Field level details are listed under ``errors`` next to the
        summary ``message``.
        """
        errors: List[Dict[str, Any]] = []
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            errors.append({"field": field, "message": error["msg"]})

        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
        # Log the full exception; clients only get a generic message.
        logger.exception("Unexpected error occurred: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"message": "An internal server error occurred"},
        )
