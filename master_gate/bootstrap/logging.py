"""Startup logging for the master gate.

The renderer follows the gate configuration: JSON lines in production,
console output in development.
"""

from __future__ import annotations

from master_gate.config.master_config import MasterGateConfig
from master_gate.infrastructure.observability.logging import configure_structlog


def configure_logging(config: MasterGateConfig | None = None) -> MasterGateConfig:
    """Configure structlog for a gate configuration.

    Args:
        config: Gate configuration; read from the environment when None.

    Returns:
        The configuration logging was set up for.
    """
    effective = config if config is not None else MasterGateConfig.from_environment()
    configure_structlog(environment=effective.environment)
    return effective


__all__ = ["configure_logging"]
