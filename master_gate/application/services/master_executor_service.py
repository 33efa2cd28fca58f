"""Master Executor Service.

Orchestrates a master submission end to end:

1. Validate the vote set (duplicate voters and oversize sets are
   malformed input and raise before any verification)
2. Build the canonical proposal for (instruction, round)
3. Verify every vote (key lookups awaited together) and collect the accepted voters
4. Reject as STALE_ROUND if the proposal round is not the current round
5. Reject as INSUFFICIENT_QUORUM if too few votes were accepted
6. Otherwise apply the instruction and advance the round atomically

Every rejection leaves the ledger and the round untouched. There is no
intermediate state between submissions: each one is decided completely
or not at all. Concurrent submissions for the same round race on the
ledger's compare-and-swap; the losers come back as STALE_ROUND.

Developer Golden Rules:
1. STRUCTURAL ERRORS RAISE - malformed batches are exceptions
2. OUTCOMES RETURN - stale rounds and missing quorum are results
3. COMMIT IS ATOMIC - the ledger applies and advances in one step
4. EVENT AFTER COMMIT - emitter failures never undo an execution
"""

from __future__ import annotations

from collections.abc import Iterable

from master_gate.application.ports.master_event_emitter import MasterEventEmitterPort
from master_gate.application.services.base import LoggingMixin
from master_gate.application.services.round_sequencer import RoundSequencer
from master_gate.application.services.signature_verification_service import (
    SignatureVerificationService,
)
from master_gate.domain.errors.ledger import InstructionApplicationError
from master_gate.domain.errors.round import StaleRoundError
from master_gate.domain.errors.vote_set import VoteSetError
from master_gate.domain.events.master_executed import MasterExecutedEvent
from master_gate.domain.models.did import Did
from master_gate.domain.models.execution_result import (
    ExecutionOutcome,
    ExecutionResult,
    RejectionReason,
    VoteVerdict,
)
from master_gate.domain.models.proposal import Proposal
from master_gate.domain.models.quorum_policy import QuorumPolicy
from master_gate.domain.models.vote import DEFAULT_MAX_VOTES, Vote, VoteSet


class MasterExecutorService(LoggingMixin):
    """Threshold multi-signature gate in front of the ledger.

    Attributes:
        _verifier: Per-vote signature verification.
        _sequencer: Handle on the ledger round.
        _policy: Injected quorum threshold.
        _event_emitter: Optional post-commit event sink.
        _max_votes: Upper bound on votes per submission.
    """

    def __init__(
        self,
        verifier: SignatureVerificationService,
        sequencer: RoundSequencer,
        policy: QuorumPolicy,
        *,
        event_emitter: MasterEventEmitterPort | None = None,
        max_votes: int = DEFAULT_MAX_VOTES,
    ) -> None:
        self._verifier = verifier
        self._sequencer = sequencer
        self._policy = policy
        self._event_emitter = event_emitter
        self._max_votes = max_votes
        self._init_logger()

    @property
    def policy(self) -> QuorumPolicy:
        return self._policy

    async def current_round(self) -> int:
        """Return the round new proposals must be bound to."""
        return await self._sequencer.current_round()

    async def submit(
        self,
        instruction: bytes,
        votes: Iterable[Vote],
        round_no: int | None = None,
    ) -> ExecutionResult:
        """Submit an instruction with its votes for authorization.

        Args:
            instruction: Opaque privileged instruction.
            votes: Votes in any order.
            round_no: Round the voters signed for. None binds the proposal
                to the current round.

        Returns:
            ExecutionResult, EXECUTED or REJECTED with a reason.

        Raises:
            DuplicateVoterError: If an identity votes twice.
            VoteSetTooLargeError: If there are more votes than allowed.
            InvalidProposalError: If the instruction or round cannot be encoded.
            InstructionApplicationError: If the ledger refused an authorized
                instruction (nothing was applied).
        """
        log = self._log_operation("submit", threshold=self._policy.threshold)

        try:
            vote_set = VoteSet.from_votes(votes, max_votes=self._max_votes)
        except VoteSetError as e:
            log.warning(
                "submission_rejected_malformed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        if round_no is None:
            round_no = await self._sequencer.current_round()
        proposal = Proposal(instruction=instruction, round_no=round_no)
        log = log.bind(
            proposal_digest=proposal.digest(),
            proposal_round=round_no,
            vote_count=len(vote_set),
        )
        log.info("submission_received")

        verdicts = await self._verifier.verify_vote_set(vote_set, proposal)
        accepted = tuple(verdict.did for verdict in verdicts if verdict.accepted)

        try:
            await self._sequencer.ensure_current(round_no)
        except StaleRoundError as e:
            log.warning(
                "submission_rejected_stale_round",
                current_round=e.actual_round,
                accepted_votes=len(accepted),
            )
            return self._rejected(
                RejectionReason.STALE_ROUND, proposal, e.actual_round, verdicts, accepted
            )

        if not self._policy.is_met(len(accepted)):
            log.info(
                "submission_rejected_insufficient_quorum",
                accepted_votes=len(accepted),
                shortfall=self._policy.shortfall(len(accepted)),
            )
            return self._rejected(
                RejectionReason.INSUFFICIENT_QUORUM, proposal, round_no, verdicts, accepted
            )

        try:
            new_round = await self._sequencer.apply_and_advance(instruction, round_no)
        except StaleRoundError as e:
            log.warning(
                "submission_lost_round_race",
                current_round=e.actual_round,
            )
            return self._rejected(
                RejectionReason.STALE_ROUND, proposal, e.actual_round, verdicts, accepted
            )
        except InstructionApplicationError as e:
            log.error("instruction_application_failed", reason=e.reason)
            raise

        log.info(
            "instruction_executed",
            new_round=new_round,
            voters=[did.qualified() for did in accepted],
        )
        await self._emit_executed(proposal, new_round, accepted)

        return ExecutionResult(
            outcome=ExecutionOutcome.EXECUTED,
            reason=None,
            proposal_round=round_no,
            current_round=new_round,
            threshold=self._policy.threshold,
            accepted_voters=accepted,
            verdicts=verdicts,
            proposal_digest=proposal.digest(),
        )

    def _rejected(
        self,
        reason: RejectionReason,
        proposal: Proposal,
        current_round: int,
        verdicts: tuple[VoteVerdict, ...],
        accepted: tuple[Did, ...],
    ) -> ExecutionResult:
        return ExecutionResult(
            outcome=ExecutionOutcome.REJECTED,
            reason=reason,
            proposal_round=proposal.round_no,
            current_round=current_round,
            threshold=self._policy.threshold,
            accepted_voters=accepted,
            verdicts=verdicts,
            proposal_digest=proposal.digest(),
        )

    async def _emit_executed(
        self,
        proposal: Proposal,
        new_round: int,
        accepted: tuple[Did, ...],
    ) -> None:
        if self._event_emitter is None:
            return
        event = MasterExecutedEvent(
            round_no=proposal.round_no,
            new_round=new_round,
            proposal_digest=proposal.digest(),
            voters=accepted,
        )
        try:
            await self._event_emitter.emit_executed(event)
        except Exception as e:
            # The ledger already committed; the event is best effort
            self._log_operation(
                "emit_executed",
                proposal_digest=event.proposal_digest,
            ).error(
                "executed_event_emission_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
