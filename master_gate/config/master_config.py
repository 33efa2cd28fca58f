"""Master gate configuration.

Defines the quorum threshold and submission limits, with environment
variable overrides for deployment.

Environment Variables:
- MASTER_QUORUM_THRESHOLD: Minimum accepted votes to execute (default: 2)
- MASTER_MAX_VOTES: Maximum votes per submission (default: 256)
- MASTER_ENVIRONMENT: "production" or "development" (default: development)

Unparseable values fall back to the defaults; parsed values that are out
of range fail validation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from master_gate.domain.models.quorum_policy import QuorumPolicy

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower()


@dataclass(frozen=True)
class MasterGateConfig:
    """Configuration for the master gate.

    Attributes:
        quorum_threshold: Minimum number of accepted votes. Externally
            configured; never derived from council size.
        max_votes_per_submission: Largest vote set accepted.
        environment: Selects JSON (production) or console logging.
    """

    quorum_threshold: int = 2
    max_votes_per_submission: int = 256
    environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.quorum_threshold < 1:
            raise ValueError(
                f"quorum_threshold must be at least 1, got {self.quorum_threshold}"
            )
        if self.max_votes_per_submission < self.quorum_threshold:
            raise ValueError(
                f"max_votes_per_submission ({self.max_votes_per_submission}) must be "
                f"at least quorum_threshold ({self.quorum_threshold})"
            )
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> MasterGateConfig:
        """Create config from environment variables with defaults."""
        return cls(
            quorum_threshold=_get_int_env("MASTER_QUORUM_THRESHOLD", 2),
            max_votes_per_submission=_get_int_env("MASTER_MAX_VOTES", 256),
            environment=_get_str_env("MASTER_ENVIRONMENT", "development"),
        )

    def quorum_policy(self) -> QuorumPolicy:
        """Build the quorum policy this configuration injects."""
        return QuorumPolicy(threshold=self.quorum_threshold)


# Default config (development, threshold 2)
DEFAULT_MASTER_CONFIG = MasterGateConfig()

# Testing config with a small vote bound
TEST_MASTER_CONFIG = MasterGateConfig(
    quorum_threshold=2,
    max_votes_per_submission=8,
    environment="development",
)
