"""Unit tests for SignatureScheme and PublicKey."""

import pytest

from master_gate.domain.errors.validation import InvalidPublicKeyError
from master_gate.domain.models.public_key import PublicKey, SignatureScheme


class TestSignatureScheme:
    def test_from_tag_is_case_insensitive(self) -> None:
        assert SignatureScheme.from_tag("ed25519") is SignatureScheme.ED25519
        assert SignatureScheme.from_tag("SECP256K1") is SignatureScheme.SECP256K1

    def test_from_tag_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown signature scheme"):
            SignatureScheme.from_tag("Bls12381")

    def test_sr25519_is_recognized(self) -> None:
        assert SignatureScheme.from_tag("sr25519") is SignatureScheme.SR25519


class TestPublicKey:
    def test_sr25519_requires_32_bytes(self) -> None:
        PublicKey(SignatureScheme.SR25519, b"\x01" * 32)
        with pytest.raises(InvalidPublicKeyError):
            PublicKey(SignatureScheme.SR25519, b"\x01" * 33)

    def test_ed25519_requires_32_bytes(self) -> None:
        PublicKey(SignatureScheme.ED25519, b"\x01" * 32)
        with pytest.raises(InvalidPublicKeyError):
            PublicKey(SignatureScheme.ED25519, b"\x01" * 33)

    @pytest.mark.parametrize("length", [33, 65])
    def test_secp256k1_accepts_sec1_lengths(self, length: int) -> None:
        key = PublicKey(SignatureScheme.SECP256K1, b"\x02" * length)
        assert len(key.raw) == length

    def test_secp256k1_rejects_other_lengths(self) -> None:
        with pytest.raises(InvalidPublicKeyError) as exc_info:
            PublicKey(SignatureScheme.SECP256K1, b"\x02" * 32)
        assert exc_info.value.length == 32

    def test_hex(self) -> None:
        key = PublicKey(SignatureScheme.ED25519, b"\xab" * 32)
        assert key.hex() == "0x" + "ab" * 32
