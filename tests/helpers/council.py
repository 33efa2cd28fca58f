"""Deterministic council members with real signing keys.

Each member's key is derived from their name, so test runs are
reproducible. Members sign the canonical proposal encoding the gate
verifies against.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from master_gate.domain.models.did import Did
from master_gate.domain.models.proposal import encode_proposal
from master_gate.domain.models.public_key import PublicKey, SignatureScheme
from master_gate.domain.models.vote import Vote
from master_gate.infrastructure.stubs.identity_registry_stub import (
    IdentityRegistryStub,
)

# Order of the secp256k1 group
_SECP256K1_ORDER = int(
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16
)


def _seed(label: str) -> bytes:
    return hashlib.sha256(label.encode("utf-8")).digest()


@dataclass
class CouncilMember:
    """A named identity holding one private key.

    Attributes:
        name: Short name the DID is derived from.
        scheme: Scheme the member signs with.
        key_label: Seed label; changing it yields a different key.
    """

    name: str
    scheme: SignatureScheme = SignatureScheme.ED25519
    key_label: str = ""
    _private_key: object = field(init=False, repr=False)

    def __post_init__(self) -> None:
        label = self.key_label or self.name
        if self.scheme is SignatureScheme.ED25519:
            self._private_key = Ed25519PrivateKey.from_private_bytes(_seed(label))
        else:
            secret = int.from_bytes(_seed(label), "big") % (_SECP256K1_ORDER - 1) + 1
            self._private_key = ec.derive_private_key(secret, ec.SECP256K1())

    @property
    def did(self) -> Did:
        return Did.from_name(self.name)

    @property
    def public_key(self) -> PublicKey:
        public = self._private_key.public_key()
        if self.scheme is SignatureScheme.ED25519:
            raw = public.public_bytes(
                serialization.Encoding.Raw, serialization.PublicFormat.Raw
            )
        else:
            raw = public.public_bytes(
                serialization.Encoding.X962,
                serialization.PublicFormat.CompressedPoint,
            )
        return PublicKey(scheme=self.scheme, raw=raw)

    def sign_message(self, message: bytes) -> bytes:
        if self.scheme is SignatureScheme.ED25519:
            return self._private_key.sign(message)
        return self._private_key.sign(message, ec.ECDSA(hashes.SHA256()))

    def vote(self, instruction: bytes, round_no: int) -> Vote:
        """Sign the proposal (instruction, round_no) and wrap it in a vote."""
        signature = self.sign_message(encode_proposal(instruction, round_no))
        return Vote(did=self.did, scheme=self.scheme, signature=signature)

    def rotated(self, key_label: str) -> CouncilMember:
        """The same identity holding a different key."""
        return CouncilMember(name=self.name, scheme=self.scheme, key_label=key_label)


@dataclass
class Council:
    """The council used across the test suite."""

    alice: CouncilMember
    bob: CouncilMember
    charlie: CouncilMember
    dave: CouncilMember

    @property
    def members(self) -> list[CouncilMember]:
        return [self.alice, self.bob, self.charlie, self.dave]

    def register_all(self, registry: IdentityRegistryStub) -> None:
        for member in self.members:
            registry.add_identity(member.did, member.public_key)


def build_council() -> Council:
    """Alice, Bob and Charlie sign with Ed25519; Dave with secp256k1."""
    return Council(
        alice=CouncilMember("Alice"),
        bob=CouncilMember("Bob"),
        charlie=CouncilMember("Charlie"),
        dave=CouncilMember("Dave", scheme=SignatureScheme.SECP256K1),
    )


def outsider(name: str = "Mallory") -> CouncilMember:
    """A member whose key is never registered."""
    return CouncilMember(name)
