"""Domain errors for Master Gate.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from MasterGateError.
"""

from master_gate.domain.errors.ledger import InstructionApplicationError
from master_gate.domain.errors.quorum import QuorumConfigurationError
from master_gate.domain.errors.round import StaleRoundError
from master_gate.domain.errors.signature import UnsupportedSignatureSchemeError
from master_gate.domain.errors.validation import (
    InvalidDidError,
    InvalidProposalError,
    InvalidPublicKeyError,
    ValidationError,
)
from master_gate.domain.errors.vote_set import (
    DuplicateVoterError,
    VoteSetError,
    VoteSetTooLargeError,
)

__all__: list[str] = [
    "DuplicateVoterError",
    "InstructionApplicationError",
    "InvalidDidError",
    "InvalidProposalError",
    "InvalidPublicKeyError",
    "QuorumConfigurationError",
    "StaleRoundError",
    "UnsupportedSignatureSchemeError",
    "ValidationError",
    "VoteSetError",
    "VoteSetTooLargeError",
]
