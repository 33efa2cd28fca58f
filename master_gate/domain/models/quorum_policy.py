"""Quorum policy: the minimum number of independently valid votes.

The threshold is injected from configuration. The gate never derives it
from council size and never changes it.
"""

from __future__ import annotations

from dataclasses import dataclass

from master_gate.domain.errors.quorum import QuorumConfigurationError


@dataclass(frozen=True)
class QuorumPolicy:
    """Accept a batch iff the accepted-vote count reaches the threshold.

    More valid votes than required authorize exactly like an exact match.

    Attributes:
        threshold: Minimum number of accepted votes (at least 1).
    """

    threshold: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.threshold, bool)
            or not isinstance(self.threshold, int)
            or self.threshold < 1
        ):
            raise QuorumConfigurationError(self.threshold)

    def is_met(self, accepted_count: int) -> bool:
        """Return True if accepted_count satisfies the threshold."""
        return accepted_count >= self.threshold

    def shortfall(self, accepted_count: int) -> int:
        """Return how many more accepted votes are needed (0 if met)."""
        return max(0, self.threshold - accepted_count)
