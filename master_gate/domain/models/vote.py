"""Votes and vote sets for master authorization.

A vote is one member's signature over one proposal, tagged with the
scheme the member signed with. A vote set gathers the votes for a single
submission.

Vote order never affects the outcome. The set canonicalizes itself by
sorting on the DID (unsigned byte-wise lexicographic), so callers may
submit votes in any order, including the insertion order of whatever
mapping they built them in.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from master_gate.domain.errors.vote_set import (
    DuplicateVoterError,
    VoteSetTooLargeError,
)
from master_gate.domain.models.did import Did
from master_gate.domain.models.public_key import SignatureScheme

# Default upper bound on votes per submission
DEFAULT_MAX_VOTES: int = 256


@dataclass(frozen=True)
class Vote:
    """A single member's signature over a proposal.

    Attributes:
        did: Identity the vote claims to come from.
        scheme: Signature scheme the member signed with. A plain string is
            a tag no SignatureScheme member has; such votes never verify.
        signature: Raw signature bytes.
    """

    did: Did
    scheme: SignatureScheme | str
    signature: bytes

    @property
    def scheme_tag(self) -> str:
        """The declared scheme tag as submitted."""
        if isinstance(self.scheme, SignatureScheme):
            return self.scheme.value
        return self.scheme


@dataclass(frozen=True)
class VoteSet:
    """A duplicate-free, canonically ordered collection of votes.

    Build with ``VoteSet.from_votes``; the constructor does not validate.

    Attributes:
        votes: Votes sorted by DID, each DID at most once.
    """

    votes: tuple[Vote, ...]

    @classmethod
    def from_votes(
        cls,
        votes: Iterable[Vote],
        *,
        max_votes: int = DEFAULT_MAX_VOTES,
    ) -> VoteSet:
        """Validate and canonicalize a sequence of votes.

        Args:
            votes: Votes in submission order.
            max_votes: Largest accepted number of votes.

        Returns:
            A VoteSet sorted by DID.

        Raises:
            VoteSetTooLargeError: If more than max_votes votes are given.
            DuplicateVoterError: If any DID appears more than once.
        """
        collected = list(votes)
        if len(collected) > max_votes:
            raise VoteSetTooLargeError(len(collected), max_votes)

        counts = Counter(vote.did for vote in collected)
        duplicates = tuple(sorted(did for did, n in counts.items() if n > 1))
        if duplicates:
            raise DuplicateVoterError(duplicates)

        return cls(votes=tuple(sorted(collected, key=lambda vote: vote.did)))

    @property
    def voters(self) -> tuple[Did, ...]:
        """Voter identities in canonical order."""
        return tuple(vote.did for vote in self.votes)

    def __iter__(self) -> Iterator[Vote]:
        return iter(self.votes)

    def __len__(self) -> int:
        return len(self.votes)
