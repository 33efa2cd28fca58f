"""Signature Verification Service.

Checks each vote of a set against the canonical proposal message using the
voter's currently active key. Every vote gets a verdict; a vote that fails
for any reason is discarded from the count but never aborts the batch, so
one bad vote cannot poison an otherwise valid authorization.

Verification is side-effect free. Key lookups for all votes of a set are
awaited together, so a remote identity registry is queried concurrently.
The signature checks themselves are synchronous calls into the primitive
and run one after another on the event loop.

Failure modes per vote, checked in this order:
- UNKNOWN_IDENTITY: the registry has no active key for the DID
- SCHEME_UNSUPPORTED: the tag is unrecognized or has no registered primitive
- SCHEME_MISMATCH: the vote's scheme tag differs from the key's scheme
- SIGNATURE_INVALID: the primitive rejected the signature

Registry failures (the registry itself raising) are NOT per-vote
verdicts: they propagate, because the batch cannot be judged.
"""

from __future__ import annotations

import asyncio

from master_gate.application.ports.identity_registry import IdentityRegistryProtocol
from master_gate.application.services.base import LoggingMixin
from master_gate.application.services.signature_scheme_registry import (
    SignatureSchemeRegistry,
)
from master_gate.domain.errors.signature import UnsupportedSignatureSchemeError
from master_gate.domain.models.execution_result import VoteStatus, VoteVerdict
from master_gate.domain.models.proposal import Proposal
from master_gate.domain.models.public_key import SignatureScheme
from master_gate.domain.models.vote import Vote, VoteSet


class SignatureVerificationService(LoggingMixin):
    """Scheme-polymorphic verifier for master votes.

    Attributes:
        _identity_registry: Resolves a DID to its active key.
        _scheme_registry: Dispatches a scheme tag to its primitive.
    """

    def __init__(
        self,
        identity_registry: IdentityRegistryProtocol,
        scheme_registry: SignatureSchemeRegistry,
    ) -> None:
        self._identity_registry = identity_registry
        self._scheme_registry = scheme_registry
        self._init_logger()

    async def verify_vote(self, vote: Vote, message: bytes) -> VoteVerdict:
        """Verify a single vote against the canonical proposal message.

        Args:
            vote: The vote to check.
            message: Canonical proposal encoding the vote must sign.

        Returns:
            VoteVerdict for the vote.
        """
        status = await self._judge(vote, message)
        if status is not VoteStatus.ACCEPTED:
            self._log_operation(
                "verify_vote",
                did=vote.did.qualified(),
                scheme=vote.scheme_tag,
            ).info("vote_discarded", status=status.value)
        return VoteVerdict(did=vote.did, status=status)

    async def verify_vote_set(
        self,
        vote_set: VoteSet,
        proposal: Proposal,
    ) -> tuple[VoteVerdict, ...]:
        """Verify every vote of a set.

        Args:
            vote_set: Canonically ordered, duplicate-free votes.
            proposal: The proposal the votes must sign.

        Returns:
            One verdict per vote, in the vote set's canonical order.
        """
        message = proposal.encode()
        verdicts = await asyncio.gather(
            *(self.verify_vote(vote, message) for vote in vote_set)
        )
        accepted = sum(1 for verdict in verdicts if verdict.accepted)
        self._log_operation(
            "verify_vote_set",
            proposal_digest=proposal.digest(),
            round_no=proposal.round_no,
        ).debug(
            "vote_set_verified",
            total_votes=len(verdicts),
            accepted_votes=accepted,
        )
        return tuple(verdicts)

    async def _judge(self, vote: Vote, message: bytes) -> VoteStatus:
        key = await self._identity_registry.resolve_key(vote.did)
        if key is None:
            return VoteStatus.UNKNOWN_IDENTITY
        if not isinstance(vote.scheme, SignatureScheme):
            return VoteStatus.SCHEME_UNSUPPORTED
        try:
            primitive = self._scheme_registry.get(vote.scheme)
        except UnsupportedSignatureSchemeError:
            return VoteStatus.SCHEME_UNSUPPORTED
        if key.scheme is not vote.scheme:
            return VoteStatus.SCHEME_MISMATCH
        if primitive.verify(key.raw, message, vote.signature):
            return VoteStatus.ACCEPTED
        return VoteStatus.SIGNATURE_INVALID
