"""Health check response model for the master gate API."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness of the gate process.

    Attributes:
        status: "healthy" while the process serves requests.
        version: Installed master_gate version.
    """

    status: str = Field(..., description="Health status, e.g. healthy")
    version: str = Field(..., description="master_gate package version")
