"""Adapters between master API models and domain objects.

Parsing errors surface as ValidationError subclasses or ValueError; the
routes translate both into HTTP 400.
"""

from __future__ import annotations

from master_gate.api.models.master import (
    ExecuteRequest,
    ExecutionResponse,
    VoteRequest,
    VoteVerdictResponse,
)
from master_gate.domain.models.did import Did
from master_gate.domain.models.execution_result import ExecutionResult
from master_gate.domain.models.public_key import SignatureScheme
from master_gate.domain.models.vote import Vote


def parse_hex(value: str, field_name: str) -> bytes:
    """Decode ``0x``-prefixed or bare hex.

    Raises:
        ValueError: If value is not valid hex.
    """
    raw = value[2:] if value.startswith(("0x", "0X")) else value
    try:
        return bytes.fromhex(raw)
    except ValueError as e:
        raise ValueError(f"{field_name} is not valid hex") from e


class MasterRequestAdapter:
    """Converts request models into domain votes and instructions."""

    @staticmethod
    def to_scheme(tag: str) -> SignatureScheme | str:
        """Resolve a scheme tag, passing unrecognized tags through verbatim.

        An unrecognized tag is a verification failure of that one vote,
        not a malformed submission.
        """
        try:
            return SignatureScheme.from_tag(tag)
        except ValueError:
            return tag

    @staticmethod
    def to_vote(vote: VoteRequest) -> Vote:
        return Vote(
            did=Did.parse(vote.did),
            scheme=MasterRequestAdapter.to_scheme(vote.scheme),
            signature=parse_hex(vote.signature_hex, "signature_hex"),
        )

    @staticmethod
    def to_votes(request: ExecuteRequest) -> list[Vote]:
        return [MasterRequestAdapter.to_vote(vote) for vote in request.votes]

    @staticmethod
    def to_instruction(request: ExecuteRequest) -> bytes:
        return parse_hex(request.instruction_hex, "instruction_hex")


class ExecutionResultAdapter:
    """Converts ExecutionResult into the API response model."""

    @staticmethod
    def to_response(result: ExecutionResult) -> ExecutionResponse:
        return ExecutionResponse(
            outcome=result.outcome.value,
            reason=result.reason.value if result.reason is not None else None,
            proposal_round=result.proposal_round,
            current_round=result.current_round,
            threshold=result.threshold,
            accepted_voters=[did.qualified() for did in result.accepted_voters],
            verdicts=[
                VoteVerdictResponse(did=v.did.qualified(), status=v.status.value)
                for v in result.verdicts
            ],
            proposal_digest=result.proposal_digest,
        )
