"""Bootstrap wiring helpers."""

from master_gate.bootstrap.logging import configure_logging
from master_gate.bootstrap.master import MasterGate, build_master_gate

__all__ = ["MasterGate", "build_master_gate", "configure_logging"]
