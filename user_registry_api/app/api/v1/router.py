"""
Top‑level router for version 1 of the API.

Resource routers are mounted here under their collection prefix.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
