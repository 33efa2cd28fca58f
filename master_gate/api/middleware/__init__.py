"""HTTP middleware."""

from master_gate.api.middleware.correlation import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
)

__all__: list[str] = ["CORRELATION_HEADER", "CorrelationMiddleware"]
