"""
Top‑level router.

Aggregates the domain routers.  The user router defines its own
``/user`` path internally, so no prefix is given here; a prefixed
``"/"`` route would answer ``/user/`` and redirect ``/user``.
"""

from fastapi import APIRouter

from .endpoints import greeting, users


router = APIRouter()

router.include_router(greeting.router, tags=["greeting"])
router.include_router(users.router, tags=["users"])
