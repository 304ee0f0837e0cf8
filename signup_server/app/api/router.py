"""
Top‑level router.

Aggregates the page routers.  Both routers define their own paths, so
they are included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import landing, signup

router = APIRouter()

router.include_router(landing.router, tags=["landing"])
router.include_router(signup.router, tags=["signup"])
