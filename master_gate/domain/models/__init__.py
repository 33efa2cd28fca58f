"""Domain models for Master Gate.

Value objects for identities, keys, proposals, votes, the quorum policy
and execution outcomes. All models are immutable.
"""

from master_gate.domain.models.did import DID_BYTE_LENGTH, DID_METHOD_PREFIX, Did
from master_gate.domain.models.execution_result import (
    ExecutionOutcome,
    ExecutionResult,
    RejectionReason,
    VoteStatus,
    VoteVerdict,
)
from master_gate.domain.models.proposal import (
    MASTER_VOTE_DOMAIN_TAG,
    Proposal,
    encode_proposal,
)
from master_gate.domain.models.public_key import PublicKey, SignatureScheme
from master_gate.domain.models.quorum_policy import QuorumPolicy
from master_gate.domain.models.vote import DEFAULT_MAX_VOTES, Vote, VoteSet

__all__: list[str] = [
    "DEFAULT_MAX_VOTES",
    "DID_BYTE_LENGTH",
    "DID_METHOD_PREFIX",
    "MASTER_VOTE_DOMAIN_TAG",
    "Did",
    "ExecutionOutcome",
    "ExecutionResult",
    "Proposal",
    "PublicKey",
    "QuorumPolicy",
    "RejectionReason",
    "SignatureScheme",
    "Vote",
    "VoteSet",
    "VoteStatus",
    "VoteVerdict",
    "encode_proposal",
]
