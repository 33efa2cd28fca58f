"""Signature scheme port (one verification primitive per scheme tag).

Verification is a pure predicate: no side effects, no exceptions for bad
signatures. Malformed keys or signatures verify as False.
"""

from __future__ import annotations

from typing import Protocol

from master_gate.domain.models.public_key import SignatureScheme


class SignatureSchemeProtocol(Protocol):
    """Protocol for a scheme-specific signature verification primitive."""

    @property
    def scheme(self) -> SignatureScheme:
        """The scheme tag this primitive verifies."""
        ...

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        """Verify signature over message with public_key.

        Args:
            public_key: Raw key bytes in the scheme's encoding.
            message: The exact bytes that were signed.
            signature: Raw signature bytes.

        Returns:
            True if the signature is valid, False otherwise.

        Note:
            This method does NOT raise on invalid input.
        """
        ...
