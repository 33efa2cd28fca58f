"""Event payload emitted after a master instruction commits.

The event is emitted only after the ledger has applied the instruction
and advanced the round. It identifies the proposal by digest and never
carries the instruction bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from master_gate.domain.models.did import Did

# Event type constant for executed master instructions
MASTER_EXECUTED_EVENT_TYPE: str = "master.executed"


@dataclass(frozen=True)
class MasterExecutedEvent:
    """Payload for a committed master execution - immutable.

    Attributes:
        round_no: Round the instruction executed in.
        new_round: Round after the advance (round_no + 1).
        proposal_digest: SHA-256 hex of the canonical proposal.
        voters: Identities whose votes authorized the execution, sorted.
        executed_at: When the commit was observed.
    """

    round_no: int
    new_round: int
    proposal_digest: str
    voters: tuple[Did, ...]
    executed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for event sinks and structured logs."""
        return {
            "event_type": MASTER_EXECUTED_EVENT_TYPE,
            "round_no": self.round_no,
            "new_round": self.new_round,
            "proposal_digest": self.proposal_digest,
            "voters": [did.qualified() for did in self.voters],
            "executed_at": self.executed_at.isoformat(),
        }
