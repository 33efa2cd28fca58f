"""FastAPI application entry point for Master Gate."""

from fastapi import FastAPI

from master_gate import __version__
from master_gate.api.middleware.correlation import CorrelationMiddleware
from master_gate.api.routes.health import router as health_router
from master_gate.api.routes.master import router as master_router
from master_gate.bootstrap.logging import configure_logging

configure_logging()

app = FastAPI(
    title="Master Gate API",
    description="Threshold multi-signature authorization for privileged instructions",
    version=__version__,
)

app.add_middleware(CorrelationMiddleware)
app.include_router(health_router)
app.include_router(master_router)
