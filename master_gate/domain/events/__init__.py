"""Domain events emitted by Master Gate."""

from master_gate.domain.events.master_executed import (
    MASTER_EXECUTED_EVENT_TYPE,
    MasterExecutedEvent,
)

__all__: list[str] = ["MASTER_EXECUTED_EVENT_TYPE", "MasterExecutedEvent"]
