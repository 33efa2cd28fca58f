"""Health check endpoint."""

from fastapi import APIRouter

from master_gate import __version__
from master_gate.api.models.health import HealthResponse

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the gate is up, with its version."""
    return HealthResponse(status="healthy", version=__version__)
