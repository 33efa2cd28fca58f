"""Input validation errors for Master Gate.

Raised when a DID, public key or proposal cannot be constructed from the
supplied values. These are caller mistakes, never verification outcomes.
"""

from master_gate.domain.exceptions import MasterGateError


class ValidationError(MasterGateError):
    """Base class for malformed input errors."""

    pass


class InvalidDidError(ValidationError):
    """Raised when a DID is not exactly 32 bytes or cannot be parsed.

    Attributes:
        value: The rejected input, rendered for diagnostics.
        reason: Why the input was rejected.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid DID {value!r}: {reason}")


class InvalidPublicKeyError(ValidationError):
    """Raised when public key bytes do not fit their signature scheme.

    Attributes:
        scheme: Scheme tag the key was declared with.
        length: Length of the rejected key bytes.
    """

    def __init__(self, scheme: str, length: int, expected: str) -> None:
        self.scheme = scheme
        self.length = length
        super().__init__(
            f"Invalid {scheme} public key: got {length} bytes, expected {expected}"
        )


class InvalidProposalError(ValidationError):
    """Raised when an (instruction, round) pair cannot be canonically encoded."""

    pass
