"""Outcomes of vote verification and master execution.

Rejections here are expected, observable results - "not executed" - and
are returned, never raised. Structurally malformed submissions raise
VoteSetError instead, so callers can tell "your request was malformed"
apart from "your request was valid but not authorized".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from master_gate.domain.models.did import Did


class VoteStatus(Enum):
    """Verdict for a single vote. Only ACCEPTED counts towards quorum."""

    ACCEPTED = "accepted"
    UNKNOWN_IDENTITY = "unknown_identity"
    SCHEME_MISMATCH = "scheme_mismatch"
    SCHEME_UNSUPPORTED = "scheme_unsupported"
    SIGNATURE_INVALID = "signature_invalid"


@dataclass(frozen=True)
class VoteVerdict:
    """Result of verifying one vote against the proposal.

    Attributes:
        did: The voter.
        status: Why the vote was accepted or discarded.
    """

    did: Did
    status: VoteStatus

    @property
    def accepted(self) -> bool:
        return self.status is VoteStatus.ACCEPTED


class ExecutionOutcome(Enum):
    """Whether the instruction was forwarded to the ledger."""

    EXECUTED = "executed"
    REJECTED = "rejected"


class RejectionReason(Enum):
    """Why a well-formed submission was not executed."""

    STALE_ROUND = "stale_round"
    INSUFFICIENT_QUORUM = "insufficient_quorum"


@dataclass(frozen=True)
class ExecutionResult:
    """Result of one submission to the master executor.

    Attributes:
        outcome: EXECUTED or REJECTED.
        reason: Rejection reason; None when executed.
        proposal_round: Round the submitted proposal was bound to.
        current_round: Ledger round after processing (advanced by one
            only when executed).
        threshold: Quorum threshold the submission was judged against.
        accepted_voters: Voters whose votes were accepted, sorted.
        verdicts: Per-vote verdicts in canonical (sorted) order.
        proposal_digest: SHA-256 hex of the canonical proposal encoding.
    """

    outcome: ExecutionOutcome
    reason: RejectionReason | None
    proposal_round: int
    current_round: int
    threshold: int
    accepted_voters: tuple[Did, ...]
    verdicts: tuple[VoteVerdict, ...]
    proposal_digest: str

    @property
    def executed(self) -> bool:
        return self.outcome is ExecutionOutcome.EXECUTED

    @property
    def accepted_count(self) -> int:
        return len(self.accepted_voters)
