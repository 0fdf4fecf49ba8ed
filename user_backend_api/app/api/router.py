"""
Top‑level router.

Users live under ``/api/users``; the health probe sits at the root so
that load balancers can reach it without knowing the API prefix.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(users.router, prefix="/api/users", tags=["users"])
router.include_router(health.router, tags=["system"])
