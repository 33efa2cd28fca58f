"""Round Sequencer - the fencing-token handle over the ledger round.

The round is not a hidden global. The sequencer is an explicit handle
passed to the executor, and the only way it moves the round is the
ledger's atomic apply-and-advance, a compare-and-swap on the round
number. Reading the round never changes it.

Once the round advances, every proposal signed for the old round is
dead: it can only ever be rejected as stale.
"""

from __future__ import annotations

from master_gate.application.ports.ledger import LedgerProtocol
from master_gate.application.services.base import LoggingMixin
from master_gate.domain.errors.round import StaleRoundError


class RoundSequencer(LoggingMixin):
    """Versioned handle on the ledger's round counter.

    Attributes:
        _ledger: The state-transition engine owning the round.
    """

    def __init__(self, ledger: LedgerProtocol) -> None:
        self._ledger = ledger
        self._init_logger()

    async def current_round(self) -> int:
        """Return the ledger's current round."""
        return await self._ledger.current_round()

    async def ensure_current(self, round_no: int) -> int:
        """Check that round_no is the current round.

        Args:
            round_no: Round a proposal is bound to.

        Returns:
            The current round (equal to round_no).

        Raises:
            StaleRoundError: If round_no is stale or in the future.
        """
        current = await self._ledger.current_round()
        if round_no != current:
            raise StaleRoundError(expected_round=round_no, actual_round=current)
        return current

    async def apply_and_advance(self, instruction: bytes, expected_round: int) -> int:
        """Apply an authorized instruction and advance the round atomically.

        Args:
            instruction: The authorized instruction.
            expected_round: Round the authorization was checked against.

        Returns:
            The new round.

        Raises:
            StaleRoundError: If another submission advanced the round first.
            InstructionApplicationError: If the ledger refused the instruction.
        """
        new_round = await self._ledger.apply_at_round(instruction, expected_round)
        self._log_operation(
            "apply_and_advance",
            previous_round=expected_round,
        ).info("round_advanced", new_round=new_round)
        return new_round
