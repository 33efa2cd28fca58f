"""Round fencing errors for Master Gate.

The round is an optimistic-concurrency token. A mismatch means the
proposal was signed for a round that is already spent (replay, or a race
lost to a concurrent submission) or that has not started yet.
"""

from master_gate.domain.exceptions import MasterGateError


class StaleRoundError(MasterGateError):
    """Raised when a proposal's round does not equal the current round.

    The executor turns this into a STALE_ROUND rejection. It is only
    raised directly by the round sequencer and by ledger adapters.

    Attributes:
        expected_round: The round the proposal was bound to.
        actual_round: The ledger's current round.
    """

    def __init__(self, expected_round: int, actual_round: int) -> None:
        self.expected_round = expected_round
        self.actual_round = actual_round
        super().__init__(
            f"Stale round: proposal bound to round {expected_round}, "
            f"current round is {actual_round}"
        )
