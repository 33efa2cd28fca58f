"""Identity registry port (external DID-to-key mapping).

The gate only reads from the registry. Key registration and rotation
happen elsewhere; a rotated key takes effect for every vote verified
after the rotation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from master_gate.domain.models.did import Did
from master_gate.domain.models.public_key import PublicKey


class IdentityRegistryProtocol(ABC):
    """Abstract protocol for resolving a DID's currently active key.

    Implementations must be safe to call concurrently: the signature
    verifier awaits the lookups for every vote of a set together.
    """

    @abstractmethod
    async def resolve_key(self, did: Did) -> PublicKey | None:
        """Return the active verification key for a DID.

        Args:
            did: The identity to resolve.

        Returns:
            The active PublicKey, or None if the DID has no active key.
        """
        ...
