"""Canonical proposal encoding for master votes.

Council members never sign a raw instruction. They sign the canonical
encoding of a (instruction, round) proposal:

    u8 len(tag) || tag || u32-be len(instruction) || instruction || u64-be round

The domain tag scopes a signature to this authorization protocol, so it
cannot be replayed as approval for any other message type. Binding the
round makes every signature single-use: once the round advances, an old
signature no longer matches any proposal the gate will accept.

Encoding is pure and deterministic. Two members computing it for the same
inputs get identical bytes without talking to each other.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from master_gate.domain.errors.validation import InvalidProposalError

# Domain separation tag, versioned; never change once signatures exist
MASTER_VOTE_DOMAIN_TAG: bytes = b"master-gate:MasterVote:v1"

# Exclusive upper bounds for the fixed-width fields
MAX_ROUND: int = 1 << 64
MAX_INSTRUCTION_LENGTH: int = (1 << 32) - 1


def _u8(value: int) -> bytes:
    return value.to_bytes(1, "big")


def _u32(value: int) -> bytes:
    return value.to_bytes(4, "big")


def _u64(value: int) -> bytes:
    return value.to_bytes(8, "big")


@dataclass(frozen=True)
class Proposal:
    """An instruction bound to the round it is meant to execute in.

    Attributes:
        instruction: Opaque, pre-encoded privileged instruction.
        round_no: Round the proposal is bound to.
    """

    instruction: bytes
    round_no: int

    def __post_init__(self) -> None:
        """Validate both fields fit their encoded widths.

        Raises:
            InvalidProposalError: If the instruction is not bytes, is too
                long, or the round is outside the unsigned 64-bit range.
        """
        if not isinstance(self.instruction, bytes):
            raise InvalidProposalError(
                f"instruction must be bytes, got {type(self.instruction).__name__}"
            )
        if len(self.instruction) > MAX_INSTRUCTION_LENGTH:
            raise InvalidProposalError(
                f"instruction too long: {len(self.instruction)} bytes"
            )
        if isinstance(self.round_no, bool) or not isinstance(self.round_no, int):
            raise InvalidProposalError(
                f"round must be an integer, got {type(self.round_no).__name__}"
            )
        if not 0 <= self.round_no < MAX_ROUND:
            raise InvalidProposalError(
                f"round out of unsigned 64-bit range: {self.round_no}"
            )

    def encode(self) -> bytes:
        """Return the canonical bytes council members sign."""
        return b"".join(
            (
                _u8(len(MASTER_VOTE_DOMAIN_TAG)),
                MASTER_VOTE_DOMAIN_TAG,
                _u32(len(self.instruction)),
                self.instruction,
                _u64(self.round_no),
            )
        )

    def digest(self) -> str:
        """Return the SHA-256 hex digest of the canonical encoding.

        Used to identify a proposal in logs and events without
        carrying the instruction itself.
        """
        return hashlib.sha256(self.encode()).hexdigest()


def encode_proposal(instruction: bytes, round_no: int) -> bytes:
    """Canonically encode (instruction, round_no) for signing or verifying."""
    return Proposal(instruction=instruction, round_no=round_no).encode()
