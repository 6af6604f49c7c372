"""
Top-level router for the API.

This router aggregates the endpoint routers.  The user resource is
mounted at the absolute path ``/api/usuarios``; the greeting lives at
the site root.
"""

from fastapi import APIRouter

from .endpoints import home, users

router = APIRouter()

router.include_router(home.router, tags=["home"])
router.include_router(users.router, prefix="/api/usuarios", tags=["usuarios"])
