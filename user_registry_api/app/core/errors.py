"""Domain exceptions raised by the user service.

Each exception carries the HTTP status code and the client facing
message it maps to; ``core.error_handlers`` renders them as
``{"message": ...}`` responses.
"""

from typing import Optional


class UserRegistryError(Exception):
    """Base class for user registry failures."""

    status_code = 500
    default_message = "User registry error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UserNotFoundError(UserRegistryError):
    """No user with the requested id exists."""

    status_code = 404
    default_message = "User not found"


class UserValidationError(UserRegistryError):
    """A replacement payload is missing ``name`` or ``age``."""

    status_code = 400
    default_message = "Name and age are required"
