"""Quorum configuration errors for Master Gate."""

from master_gate.domain.exceptions import MasterGateError


class QuorumConfigurationError(MasterGateError):
    """Raised when a quorum threshold is not a positive integer.

    Attributes:
        threshold: The rejected threshold value.
    """

    def __init__(self, threshold: object) -> None:
        self.threshold = threshold
        super().__init__(
            f"Quorum threshold must be a positive integer, got {threshold!r}"
        )
