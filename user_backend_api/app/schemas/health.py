"""
Pydantic model for the liveness probe.

The health body is deliberately not wrapped in the success envelope
used by the user endpoints.
"""

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("ok", examples=["ok"])
    message: str = Field(..., examples=["Service is running"])
