"""Identity Registry Stub for development and testing.

In-memory implementation of IdentityRegistryProtocol. Each DID maps to at
most one active key; rotation replaces it and keeps the old key in a
history for audit, revocation removes the active key.
"""

from __future__ import annotations

from structlog import get_logger

from master_gate.application.ports.identity_registry import IdentityRegistryProtocol
from master_gate.domain.models.did import Did
from master_gate.domain.models.public_key import PublicKey

logger = get_logger()


class IdentityRegistryStub(IdentityRegistryProtocol):
    """In-memory stub implementation of IdentityRegistryProtocol.

    WARNING: Not for production use. A real registry is an external
    ledger module the gate only reads from.
    """

    def __init__(self) -> None:
        self._active: dict[Did, PublicKey] = {}
        self._history: dict[Did, list[PublicKey]] = {}

    async def resolve_key(self, did: Did) -> PublicKey | None:
        return self._active.get(did)

    async def register(self, did: Did, key: PublicKey) -> None:
        """Register a new identity with its first key.

        Raises:
            ValueError: If the DID already has an active key.
        """
        if did in self._active:
            raise ValueError(f"Identity already registered: {did.qualified()}")
        self.add_identity(did, key)
        logger.info(
            "identity_registered",
            did=did.qualified(),
            scheme=key.scheme.value,
        )

    async def rotate_key(self, did: Did, new_key: PublicKey) -> None:
        """Replace the active key of a registered identity.

        Votes signed with the previous key stop verifying immediately.

        Raises:
            KeyError: If the DID has no active key.
        """
        if did not in self._active:
            raise KeyError(f"Identity not registered: {did.qualified()}")
        self._active[did] = new_key
        self._history[did].append(new_key)
        logger.info(
            "identity_key_rotated",
            did=did.qualified(),
            scheme=new_key.scheme.value,
            key_count=len(self._history[did]),
        )

    async def revoke(self, did: Did) -> None:
        """Remove the active key; the DID resolves to None afterwards.

        Raises:
            KeyError: If the DID has no active key.
        """
        if did not in self._active:
            raise KeyError(f"Identity not registered: {did.qualified()}")
        del self._active[did]
        logger.warning("identity_key_revoked", did=did.qualified())

    # Test helper methods

    def add_identity(self, did: Did, key: PublicKey) -> None:
        """Synchronous helper to add an identity for test setup."""
        self._active[did] = key
        self._history.setdefault(did, []).append(key)

    def get_key_history(self, did: Did) -> list[PublicKey]:
        """Every key the DID has ever had, oldest first."""
        return list(self._history.get(did, []))

    def get_identity_count(self) -> int:
        """Number of identities with an active key."""
        return len(self._active)

    def clear(self) -> None:
        self._active.clear()
        self._history.clear()
