"""Master event emitter stub for development and testing.

Records every emitted event in memory. Can be told to fail so tests can
check that a failing event sink never undoes a committed execution.
"""

from __future__ import annotations

from master_gate.application.ports.master_event_emitter import MasterEventEmitterPort
from master_gate.domain.events.master_executed import MasterExecutedEvent


class MasterEventEmitterStub(MasterEventEmitterPort):
    """In-memory stub implementation of MasterEventEmitterPort."""

    def __init__(self) -> None:
        self.events: list[MasterExecutedEvent] = []
        self._failure: Exception | None = None

    async def emit_executed(self, event: MasterExecutedEvent) -> None:
        if self._failure is not None:
            raise self._failure
        self.events.append(event)

    def set_failure(self, error: Exception | None) -> None:
        """Raise error on every emission; None restores normal behaviour."""
        self._failure = error

    def clear(self) -> None:
        self.events.clear()
