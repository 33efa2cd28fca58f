"""Ledger application errors for Master Gate."""

from master_gate.domain.exceptions import MasterGateError


class InstructionApplicationError(MasterGateError):
    """Raised when the ledger refuses to apply an authorized instruction.

    Ledger adapters MUST raise this only after discarding every partial
    effect: neither the instruction's writes nor the round advance are
    visible afterwards.

    Attributes:
        round_no: The round at which application was attempted.
        reason: Why the ledger refused the instruction.
    """

    def __init__(self, round_no: int, reason: str) -> None:
        self.round_no = round_no
        self.reason = reason
        super().__init__(
            f"Instruction could not be applied at round {round_no}: {reason}"
        )
