"""Master API dependencies.

Dependency injection for the master endpoints. The gate is built once per
process from MasterGateConfig.from_environment() and shared by every
request; without external collaborators it runs on the in-memory stubs.

Note: Production deployments pass a real identity registry and ledger to
build_master_gate and install the result with set_master_gate().
"""

from master_gate.application.services.master_executor_service import (
    MasterExecutorService,
)
from master_gate.bootstrap.master import MasterGate, build_master_gate
from master_gate.config.master_config import MasterGateConfig

# Singleton gate
_master_gate: MasterGate | None = None


def get_master_gate() -> MasterGate:
    """Get the process-wide master gate, building it on first use.

    Returns:
        The wired MasterGate.
    """
    global _master_gate
    if _master_gate is None:
        _master_gate = build_master_gate(MasterGateConfig.from_environment())
    return _master_gate


def get_master_executor() -> MasterExecutorService:
    """Get the master executor service."""
    return get_master_gate().executor


def set_master_gate(gate: MasterGate) -> None:
    """Set a custom gate for testing.

    Args:
        gate: Gate to serve requests with.
    """
    global _master_gate
    _master_gate = gate


def reset_master_dependencies() -> None:
    """Reset the singleton so the next request builds a fresh gate."""
    global _master_gate
    _master_gate = None
