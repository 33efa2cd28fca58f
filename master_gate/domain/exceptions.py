"""Base exception classes for the Master Gate domain layer."""


class MasterGateError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Subclass families:
    - ValidationError: malformed DIDs, keys or proposals
    - VoteSetError: structurally invalid vote sets (duplicate voters, oversize)
    - StaleRoundError: proposal round does not match the ledger round
    - QuorumConfigurationError: invalid threshold configuration
    - InstructionApplicationError: ledger refused the instruction
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
