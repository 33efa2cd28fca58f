"""API routers."""

from master_gate.api.routes.health import router as health_router
from master_gate.api.routes.master import router as master_router

__all__: list[str] = ["health_router", "master_router"]
