"""ECDSA secp256k1 signature verification primitive.

Signers hash the canonical proposal bytes with SHA-256 and produce a
DER-encoded ECDSA signature. Public keys are SEC1-encoded points,
compressed (33 bytes) or uncompressed (65 bytes).
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from master_gate.domain.models.public_key import SignatureScheme


class Secp256k1SignatureScheme:
    """SignatureSchemeProtocol implementation for ECDSA over secp256k1."""

    scheme: SignatureScheme = SignatureScheme.SECP256K1

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        """Return True iff signature is a valid ECDSA-SHA256 signature of message.

        Points off the curve, malformed encodings and malformed DER all
        verify as False.
        """
        try:
            key = ec.EllipticCurvePublicKey.from_encoded_point(
                ec.SECP256K1(), public_key
            )
            key.verify(signature, message, ec.ECDSA(hashes.SHA256()))
        except (InvalidSignature, ValueError):
            return False
        return True
