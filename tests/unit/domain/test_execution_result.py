"""Unit tests for execution results and the master.executed event."""

from master_gate.domain.events.master_executed import (
    MASTER_EXECUTED_EVENT_TYPE,
    MasterExecutedEvent,
)
from master_gate.domain.models.did import Did
from master_gate.domain.models.execution_result import (
    ExecutionOutcome,
    ExecutionResult,
    RejectionReason,
    VoteStatus,
    VoteVerdict,
)


class TestVoteVerdict:
    def test_only_accepted_counts(self) -> None:
        did = Did.from_name("Alice")
        assert VoteVerdict(did, VoteStatus.ACCEPTED).accepted
        for status in VoteStatus:
            if status is not VoteStatus.ACCEPTED:
                assert not VoteVerdict(did, status).accepted


class TestExecutionResult:
    def test_executed_properties(self) -> None:
        alice = Did.from_name("Alice")
        result = ExecutionResult(
            outcome=ExecutionOutcome.EXECUTED,
            reason=None,
            proposal_round=0,
            current_round=1,
            threshold=1,
            accepted_voters=(alice,),
            verdicts=(VoteVerdict(alice, VoteStatus.ACCEPTED),),
            proposal_digest="d" * 64,
        )
        assert result.executed
        assert result.accepted_count == 1

    def test_rejected_is_not_executed(self) -> None:
        result = ExecutionResult(
            outcome=ExecutionOutcome.REJECTED,
            reason=RejectionReason.INSUFFICIENT_QUORUM,
            proposal_round=0,
            current_round=0,
            threshold=2,
            accepted_voters=(),
            verdicts=(),
            proposal_digest="d" * 64,
        )
        assert not result.executed
        assert result.accepted_count == 0


class TestMasterExecutedEvent:
    def test_to_dict(self) -> None:
        event = MasterExecutedEvent(
            round_no=4,
            new_round=5,
            proposal_digest="a" * 64,
            voters=(Did.from_name("Alice"),),
        )
        payload = event.to_dict()
        assert payload["event_type"] == MASTER_EXECUTED_EVENT_TYPE
        assert payload["round_no"] == 4
        assert payload["new_round"] == 5
        assert payload["voters"] == [Did.from_name("Alice").qualified()]
        assert payload["executed_at"].endswith("+00:00")
