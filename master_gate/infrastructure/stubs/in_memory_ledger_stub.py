"""In-memory ledger stub for development and testing.

Implements LedgerProtocol over a key/value storage map and a round
counter. An asyncio.Lock plays the part of the database row lock: the
round check, the instruction's writes and the round increment happen as
one critical section, and writes are staged so a refused instruction
leaves nothing behind.

The gate treats instructions as opaque bytes. This stub understands one
instruction shape, ``set_storage``, so tests can observe effects:

    u8 0x01 || u32-be n || n * (u32-be len(key) || key || u32-be len(value) || value)
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from structlog import get_logger

from master_gate.application.ports.ledger import LedgerProtocol
from master_gate.domain.errors.ledger import InstructionApplicationError
from master_gate.domain.errors.round import StaleRoundError

logger = get_logger()

# Opcode of the only instruction this stub applies
SET_STORAGE_OPCODE: int = 0x01


def encode_set_storage(items: Iterable[tuple[bytes, bytes]]) -> bytes:
    """Encode a set_storage instruction writing each (key, value) pair."""
    pairs = list(items)
    parts = [bytes([SET_STORAGE_OPCODE]), len(pairs).to_bytes(4, "big")]
    for key, value in pairs:
        parts.append(len(key).to_bytes(4, "big"))
        parts.append(key)
        parts.append(len(value).to_bytes(4, "big"))
        parts.append(value)
    return b"".join(parts)


def decode_set_storage(instruction: bytes) -> list[tuple[bytes, bytes]]:
    """Decode a set_storage instruction.

    Raises:
        ValueError: If the bytes are not a well-formed set_storage instruction.
    """
    if not instruction or instruction[0] != SET_STORAGE_OPCODE:
        raise ValueError("not a set_storage instruction")
    offset = 1

    def take(length: int) -> bytes:
        nonlocal offset
        if offset + length > len(instruction):
            raise ValueError("truncated set_storage instruction")
        chunk = instruction[offset : offset + length]
        offset += length
        return chunk

    count = int.from_bytes(take(4), "big")
    items: list[tuple[bytes, bytes]] = []
    for _ in range(count):
        key = take(int.from_bytes(take(4), "big"))
        value = take(int.from_bytes(take(4), "big"))
        items.append((key, value))
    if offset != len(instruction):
        raise ValueError("trailing bytes after set_storage instruction")
    return items


class InMemoryLedgerStub(LedgerProtocol):
    """In-memory stub implementation of LedgerProtocol.

    WARNING: Not for production use.
    """

    def __init__(self, initial_round: int = 0) -> None:
        self._round = initial_round
        self._storage: dict[bytes, bytes] = {}
        self._applied: list[tuple[int, bytes]] = []
        self._cas_lock = asyncio.Lock()
        self._forced_failure: str | None = None

    async def current_round(self) -> int:
        return self._round

    async def apply_at_round(self, instruction: bytes, expected_round: int) -> int:
        async with self._cas_lock:
            if self._round != expected_round:
                raise StaleRoundError(
                    expected_round=expected_round, actual_round=self._round
                )

            if self._forced_failure is not None:
                reason, self._forced_failure = self._forced_failure, None
                raise InstructionApplicationError(self._round, reason)

            try:
                writes = decode_set_storage(instruction)
            except ValueError as e:
                raise InstructionApplicationError(self._round, str(e)) from e

            staged = dict(self._storage)
            staged.update(writes)

            # Commit: storage swap and round increment together
            self._storage = staged
            self._applied.append((self._round, instruction))
            self._round += 1

            logger.info(
                "ledger_instruction_applied",
                round_no=expected_round,
                new_round=self._round,
                writes=len(writes),
            )
            return self._round

    # Test helper methods

    def get_storage(self, key: bytes) -> bytes | None:
        return self._storage.get(key)

    @property
    def applied_instructions(self) -> list[tuple[int, bytes]]:
        """(round, instruction) for every committed instruction, in order."""
        return list(self._applied)

    def set_round(self, round_no: int) -> None:
        self._round = round_no

    def fail_next_apply(self, reason: str = "engine refused instruction") -> None:
        """Make the next apply_at_round raise InstructionApplicationError."""
        self._forced_failure = reason
