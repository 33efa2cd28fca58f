"""Request and response models for the master endpoints.

Binary values travel as ``0x``-prefixed (or bare) hex strings. DIDs
accept either ``did:master:0x...`` or bare hex.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class VoteRequest(BaseModel):
    """One council member's vote."""

    did: str = Field(..., description="Voter DID, qualified or hex")
    scheme: str = Field(
        ..., min_length=1, max_length=64, description="Signature scheme tag, e.g. Ed25519"
    )
    signature_hex: str = Field(..., description="Signature over the proposal, hex")


class ExecuteRequest(BaseModel):
    """Submission of a privileged instruction with its votes."""

    instruction_hex: str = Field(..., description="Opaque instruction bytes, hex")
    round: int | None = Field(
        default=None,
        ge=0,
        description="Round the votes were signed for; current round if omitted",
    )
    votes: list[VoteRequest] = Field(default_factory=list)


class VoteVerdictResponse(BaseModel):
    did: str
    status: str


class ExecutionResponse(BaseModel):
    """Outcome of a submission.

    Attributes:
        outcome: "executed" or "rejected".
        reason: "stale_round" or "insufficient_quorum" when rejected.
        proposal_round: Round the proposal was bound to.
        current_round: Ledger round after processing.
        threshold: Quorum threshold applied.
        accepted_voters: Voters whose votes counted.
        verdicts: Per-vote verdicts in canonical order.
        proposal_digest: SHA-256 hex of the canonical proposal.
    """

    outcome: str
    reason: str | None
    proposal_round: int
    current_round: int
    threshold: int
    accepted_voters: list[str]
    verdicts: list[VoteVerdictResponse]
    proposal_digest: str


class RoundResponse(BaseModel):
    round: int


class PolicyResponse(BaseModel):
    threshold: int
    max_votes: int
    domain_tag: str
    supported_schemes: list[str]


class ProposalResponse(BaseModel):
    """Canonical message voters sign for an (instruction, round) pair."""

    round: int
    message_hex: str
    digest: str
