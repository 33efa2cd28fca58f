"""FastAPI dependency providers."""

from master_gate.api.dependencies.master import (
    get_master_executor,
    get_master_gate,
    reset_master_dependencies,
    set_master_gate,
)

__all__: list[str] = [
    "get_master_executor",
    "get_master_gate",
    "reset_master_dependencies",
    "set_master_gate",
]
