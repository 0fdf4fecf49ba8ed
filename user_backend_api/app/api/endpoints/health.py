"""
Liveness probe.
"""

from fastapi import APIRouter

from ...schemas.health import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(status="ok", message="Service is running")
