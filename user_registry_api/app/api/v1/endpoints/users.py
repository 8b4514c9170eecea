"""
User endpoints for API v1.

Expose listing, creation, replacement and deletion of users.  Failures
raised by ``UserService`` are turned into ``{"message": ...}``
responses by the handlers in ``core.error_handlers``.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from user_registry_api.app.core.dependencies import get_user_service
from user_registry_api.app.schemas.user import UserPayload, UserRead
from user_registry_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users.  There is no filtering or pagination."""
    return await service.list_users()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Optional[UserPayload] = Body(None),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user from ``name`` and ``age``.

    Neither field is required; an empty body creates a user whose
    ``name`` and ``age`` are null.
    """
    return await service.create_user(payload or UserPayload())


@router.put("/{user_id}", response_model=UserRead)
async def replace_user(
    user_id: str,
    payload: Optional[UserPayload] = Body(None),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace ``name`` and ``age`` of a user.

    Responds 404 when the id is unknown and 400 when either field is
    missing.
    """
    return await service.replace_user(user_id, payload or UserPayload())


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user by id; 404 when the id is unknown."""
    await service.delete_user(user_id)
    return None
