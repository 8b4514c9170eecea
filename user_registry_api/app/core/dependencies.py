"""FastAPI dependencies that hand the application's store to handlers."""

from fastapi import Depends, Request

from ..services.user_service import UserService
from ..services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store created for the running application."""
    return request.app.state.user_store


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    return UserService(store)
