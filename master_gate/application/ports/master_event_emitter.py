"""Master event emitter port.

Events are emitted after a commit. The ledger is the source of truth, so
emission failures are logged by the caller and never undo an execution.
"""

from __future__ import annotations

from typing import Protocol

from master_gate.domain.events.master_executed import MasterExecutedEvent


class MasterEventEmitterPort(Protocol):
    """Protocol for publishing master execution events to observers."""

    async def emit_executed(self, event: MasterExecutedEvent) -> None:
        """Publish a master.executed event.

        Args:
            event: The committed execution.
        """
        ...
