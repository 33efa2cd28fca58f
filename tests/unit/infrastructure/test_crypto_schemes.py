"""Unit tests for the cryptography-backed signature primitives."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import serialization

from master_gate.application.services.signature_scheme_registry import (
    SignatureSchemeRegistry,
)
from master_gate.domain.errors.signature import UnsupportedSignatureSchemeError
from master_gate.domain.models.public_key import SignatureScheme
from master_gate.infrastructure.adapters.crypto import (
    Ed25519SignatureScheme,
    Secp256k1SignatureScheme,
    build_default_scheme_registry,
)
from tests.helpers.council import CouncilMember

MESSAGE = b"canonical proposal bytes"


class TestEd25519SignatureScheme:
    def test_verifies_valid_signature(self) -> None:
        member = CouncilMember("Alice")
        signature = member.sign_message(MESSAGE)
        assert Ed25519SignatureScheme().verify(member.public_key.raw, MESSAGE, signature)

    def test_rejects_tampered_message(self) -> None:
        member = CouncilMember("Alice")
        signature = member.sign_message(MESSAGE)
        assert not Ed25519SignatureScheme().verify(
            member.public_key.raw, MESSAGE + b"!", signature
        )

    def test_rejects_other_key(self) -> None:
        signature = CouncilMember("Alice").sign_message(MESSAGE)
        other = CouncilMember("Bob").public_key.raw
        assert not Ed25519SignatureScheme().verify(other, MESSAGE, signature)

    def test_malformed_inputs_are_false_not_errors(self) -> None:
        member = CouncilMember("Alice")
        scheme = Ed25519SignatureScheme()
        assert not scheme.verify(member.public_key.raw, MESSAGE, b"short")
        assert not scheme.verify(b"\x00" * 5, MESSAGE, b"\x00" * 64)


class TestSecp256k1SignatureScheme:
    def test_verifies_compressed_key(self) -> None:
        member = CouncilMember("Dave", scheme=SignatureScheme.SECP256K1)
        signature = member.sign_message(MESSAGE)
        assert len(member.public_key.raw) == 33
        assert Secp256k1SignatureScheme().verify(member.public_key.raw, MESSAGE, signature)

    def test_verifies_uncompressed_key(self) -> None:
        member = CouncilMember("Dave", scheme=SignatureScheme.SECP256K1)
        uncompressed = member._private_key.public_key().public_bytes(
            serialization.Encoding.X962,
            serialization.PublicFormat.UncompressedPoint,
        )
        signature = member.sign_message(MESSAGE)
        assert len(uncompressed) == 65
        assert Secp256k1SignatureScheme().verify(uncompressed, MESSAGE, signature)

    def test_rejects_tampered_message(self) -> None:
        member = CouncilMember("Dave", scheme=SignatureScheme.SECP256K1)
        signature = member.sign_message(MESSAGE)
        assert not Secp256k1SignatureScheme().verify(
            member.public_key.raw, b"other", signature
        )

    def test_malformed_inputs_are_false_not_errors(self) -> None:
        member = CouncilMember("Dave", scheme=SignatureScheme.SECP256K1)
        scheme = Secp256k1SignatureScheme()
        assert not scheme.verify(member.public_key.raw, MESSAGE, b"\x30\x00")
        assert not scheme.verify(b"\x02" + b"\xff" * 32, MESSAGE, b"\x30\x00")


class TestSignatureSchemeRegistry:
    def test_default_registry_has_all_schemes(self) -> None:
        registry = build_default_scheme_registry()
        assert set(registry.supported_schemes) == {
            SignatureScheme.ED25519,
            SignatureScheme.SECP256K1,
        }
        assert not registry.supports(SignatureScheme.SR25519)

    def test_get_returns_primitive(self) -> None:
        registry = build_default_scheme_registry()
        assert isinstance(registry.get(SignatureScheme.ED25519), Ed25519SignatureScheme)

    def test_get_unknown_raises(self) -> None:
        registry = SignatureSchemeRegistry([Ed25519SignatureScheme()])
        assert not registry.supports(SignatureScheme.SECP256K1)
        with pytest.raises(UnsupportedSignatureSchemeError):
            registry.get(SignatureScheme.SECP256K1)

    def test_duplicate_registration_rejected(self) -> None:
        registry = SignatureSchemeRegistry([Ed25519SignatureScheme()])
        with pytest.raises(ValueError, match="already registered"):
            registry.register(Ed25519SignatureScheme())
