"""Ed25519 signature verification primitive.

Verifies RFC 8032 Ed25519 signatures over the raw canonical proposal
bytes with the ``cryptography`` library. Keys are 32 raw bytes,
signatures 64 raw bytes.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from master_gate.domain.models.public_key import SignatureScheme


class Ed25519SignatureScheme:
    """SignatureSchemeProtocol implementation for Ed25519."""

    scheme: SignatureScheme = SignatureScheme.ED25519

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        """Return True iff signature is a valid Ed25519 signature of message.

        Malformed keys and signatures verify as False.
        """
        try:
            key = Ed25519PublicKey.from_public_bytes(public_key)
            key.verify(signature, message)
        except (InvalidSignature, ValueError):
            return False
        return True
