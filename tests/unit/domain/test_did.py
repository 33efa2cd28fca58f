"""Unit tests for the Did value object."""

import pytest

from master_gate.domain.errors.validation import InvalidDidError
from master_gate.domain.models.did import DID_BYTE_LENGTH, Did


class TestDidConstruction:
    """Tests for constructing DIDs."""

    def test_accepts_exactly_32_bytes(self) -> None:
        did = Did(b"\x01" * DID_BYTE_LENGTH)
        assert did.value == b"\x01" * 32

    @pytest.mark.parametrize("length", [0, 31, 33])
    def test_rejects_wrong_length(self, length: int) -> None:
        with pytest.raises(InvalidDidError, match="must be 32 bytes"):
            Did(b"\x00" * length)

    def test_rejects_non_bytes(self) -> None:
        with pytest.raises(InvalidDidError):
            Did("a" * 32)  # type: ignore[arg-type]

    def test_from_name_pads_with_nul(self) -> None:
        did = Did.from_name("Alice")
        assert did.value == b"Alice" + b"\x00" * 27

    def test_from_name_rejects_long_names(self) -> None:
        with pytest.raises(InvalidDidError, match="longer than 32 bytes"):
            Did.from_name("x" * 33)


class TestDidParsing:
    """Tests for the textual forms."""

    def test_hex_round_trip(self) -> None:
        did = Did.from_name("Bob")
        assert Did.from_hex(did.hex()) == did
        assert Did.from_hex(did.value.hex()) == did

    def test_parse_qualified_form(self) -> None:
        did = Did.from_name("Charlie")
        assert did.qualified().startswith("did:master:0x")
        assert Did.parse(did.qualified()) == did
        assert str(did) == did.qualified()

    def test_parse_rejects_other_methods(self) -> None:
        with pytest.raises(InvalidDidError, match="unsupported DID method"):
            Did.parse("did:web:example.com")

    def test_parse_rejects_bad_hex(self) -> None:
        with pytest.raises(InvalidDidError, match="not valid hex"):
            Did.parse("0xzz")


class TestDidOrdering:
    """DIDs order byte-wise, unsigned."""

    def test_orders_lexicographically(self) -> None:
        assert Did.from_name("Alice") < Did.from_name("Bob") < Did.from_name("Charlie")

    def test_high_bytes_sort_after_low_bytes(self) -> None:
        low = Did(b"\x7f" + b"\x00" * 31)
        high = Did(b"\x80" + b"\x00" * 31)
        assert low < high

    def test_usable_as_dict_key(self) -> None:
        assert {Did.from_name("Alice"): 1}[Did.from_name("Alice")] == 1
