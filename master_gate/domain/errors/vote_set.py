"""Vote set structural errors for Master Gate.

A vote set that fails these checks is malformed input. The whole submission
is rejected before any signature is verified, and callers can tell this
apart from a well-formed batch that simply was not authorized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from master_gate.domain.exceptions import MasterGateError

if TYPE_CHECKING:
    from master_gate.domain.models.did import Did


class VoteSetError(MasterGateError):
    """Base class for structurally invalid vote sets."""

    pass


class DuplicateVoterError(VoteSetError):
    """Raised when the same identity votes more than once in one set.

    Duplicates are invalid input, not redundant votes: they would let a
    single member inflate the accepted count.

    Attributes:
        duplicates: The identities that appeared more than once, sorted.
    """

    def __init__(self, duplicates: tuple[Did, ...]) -> None:
        self.duplicates = duplicates
        rendered = ", ".join(did.qualified() for did in duplicates)
        super().__init__(f"Duplicate voter(s) in vote set: {rendered}")


class VoteSetTooLargeError(VoteSetError):
    """Raised when a vote set exceeds the configured maximum size.

    Attributes:
        size: Number of votes submitted.
        max_votes: Configured upper bound.
    """

    def __init__(self, size: int, max_votes: int) -> None:
        self.size = size
        self.max_votes = max_votes
        super().__init__(
            f"Vote set has {size} votes, maximum allowed is {max_votes}"
        )
