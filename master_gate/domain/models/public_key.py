"""Scheme-tagged public key value objects.

A key is a (scheme, raw bytes) pair. The scheme tag decides which
verification primitive checks signatures made with it; the verifier
dispatches on the tag and never inspects key types at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from master_gate.domain.errors.validation import InvalidPublicKeyError


class SignatureScheme(Enum):
    """Signature schemes a vote may declare.

    New schemes are added here and registered with a verification
    primitive; the verifier itself does not change.
    """

    ED25519 = "Ed25519"
    """EdDSA over Curve25519 (RFC 8032), 32-byte keys."""

    SECP256K1 = "Secp256k1"
    """ECDSA over secp256k1 with SHA-256, SEC1-encoded keys, DER signatures."""

    SR25519 = "Sr25519"
    """Schnorrkel over Ristretto25519, 32-byte keys. Recognized but no
    primitive ships for it, so its votes are discarded as unsupported."""

    @classmethod
    def from_tag(cls, tag: str) -> SignatureScheme:
        """Look up a scheme by its tag, case-insensitively.

        Raises:
            ValueError: If no scheme has this tag.
        """
        for scheme in cls:
            if scheme.value.lower() == tag.lower():
                return scheme
        raise ValueError(f"Unknown signature scheme tag: {tag}")


# Accepted raw key lengths per scheme
_KEY_LENGTHS: dict[SignatureScheme, tuple[int, ...]] = {
    SignatureScheme.ED25519: (32,),
    SignatureScheme.SECP256K1: (33, 65),
    SignatureScheme.SR25519: (32,),
}


@dataclass(frozen=True)
class PublicKey:
    """A verification key bound to a signature scheme.

    Attributes:
        scheme: Scheme the key belongs to.
        raw: Raw key bytes (32 for Ed25519 and Sr25519, 33/65 SEC1 for
            secp256k1).
    """

    scheme: SignatureScheme
    raw: bytes

    def __post_init__(self) -> None:
        """Validate the key length for its scheme.

        Raises:
            InvalidPublicKeyError: If the length does not fit the scheme.
        """
        lengths = _KEY_LENGTHS.get(self.scheme)
        if lengths is not None and len(self.raw) not in lengths:
            raise InvalidPublicKeyError(
                self.scheme.value,
                len(self.raw),
                " or ".join(str(n) for n in lengths),
            )

    def hex(self) -> str:
        """Return the ``0x``-prefixed hex form of the raw key."""
        return "0x" + self.raw.hex()
