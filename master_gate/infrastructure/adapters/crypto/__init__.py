"""Signature scheme primitives backed by the ``cryptography`` library.

Usage:
    registry = build_default_scheme_registry()
    registry.get(SignatureScheme.ED25519).verify(key, message, signature)
"""

from master_gate.application.services.signature_scheme_registry import (
    SignatureSchemeRegistry,
)
from master_gate.infrastructure.adapters.crypto.ed25519_scheme import (
    Ed25519SignatureScheme,
)
from master_gate.infrastructure.adapters.crypto.secp256k1_scheme import (
    Secp256k1SignatureScheme,
)


def build_default_scheme_registry() -> SignatureSchemeRegistry:
    """Return a registry with every built-in scheme registered."""
    return SignatureSchemeRegistry([Ed25519SignatureScheme(), Secp256k1SignatureScheme()])


__all__: list[str] = [
    "Ed25519SignatureScheme",
    "Secp256k1SignatureScheme",
    "build_default_scheme_registry",
]
