"""Ledger port (underlying state-transition engine).

The ledger owns the round counter and applies instructions the gate has
authorized. The round is a compare-and-swap fencing token: applying an
instruction and advancing the round is a single atomic step guarded by
the round the caller expects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class LedgerProtocol(ABC):
    """Abstract protocol for the state-transition engine behind the gate.

    Atomicity Requirements:
    - apply_at_round applies the instruction AND advances the round, or
      does neither
    - concurrent calls for the same expected round: at most one succeeds
    """

    @abstractmethod
    async def current_round(self) -> int:
        """Return the current round. Read-only."""
        ...

    @abstractmethod
    async def apply_at_round(self, instruction: bytes, expected_round: int) -> int:
        """Atomically apply an instruction and advance the round by one.

        Args:
            instruction: Opaque privileged instruction to apply.
            expected_round: The round the caller authorized against.

        Returns:
            The new current round (expected_round + 1).

        Raises:
            StaleRoundError: If the current round is not expected_round.
                Nothing is applied.
            InstructionApplicationError: If the engine refuses the
                instruction. Nothing is applied and the round is unchanged.
        """
        ...
