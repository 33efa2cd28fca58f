"""Decentralized identifier (DID) value object for council members.

A DID is a fixed-length, 32-byte opaque identifier. The gate never looks
inside it; it only compares, hashes and orders DIDs. The key bound to a
DID lives in the external identity registry and may rotate at any time.

Ordering is unsigned byte-wise lexicographic over the 32 bytes, which is
exactly how Python compares ``bytes``. Vote sets rely on this ordering to
canonicalize submissions.
"""

from __future__ import annotations

from dataclasses import dataclass

from master_gate.domain.errors.validation import InvalidDidError

# Length of every DID in bytes
DID_BYTE_LENGTH: int = 32

# Method prefix for the qualified textual form
DID_METHOD_PREFIX: str = "did:master:"


@dataclass(frozen=True, order=True)
class Did:
    """A 32-byte council member identifier - immutable and totally ordered.

    Attributes:
        value: The raw identifier bytes (exactly 32).
    """

    value: bytes

    def __post_init__(self) -> None:
        """Validate the identifier length.

        Raises:
            InvalidDidError: If value is not 32 bytes.
        """
        if not isinstance(self.value, bytes):
            raise InvalidDidError(self.value, "value must be bytes")
        if len(self.value) != DID_BYTE_LENGTH:
            raise InvalidDidError(
                self.value,
                f"must be {DID_BYTE_LENGTH} bytes, got {len(self.value)}",
            )

    @classmethod
    def from_hex(cls, text: str) -> Did:
        """Parse a hex DID, with or without a ``0x`` prefix.

        Raises:
            InvalidDidError: If the text is not 64 hex characters.
        """
        raw = text[2:] if text.startswith(("0x", "0X")) else text
        try:
            value = bytes.fromhex(raw)
        except ValueError as e:
            raise InvalidDidError(text, "not valid hex") from e
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> Did:
        """Parse either the qualified form or bare hex.

        Accepts ``did:master:0x<64 hex>`` and ``0x<64 hex>``.
        """
        if text.startswith(DID_METHOD_PREFIX):
            return cls.from_hex(text[len(DID_METHOD_PREFIX) :])
        if text.startswith("did:"):
            raise InvalidDidError(text, "unsupported DID method")
        return cls.from_hex(text)

    @classmethod
    def from_name(cls, name: str) -> Did:
        """Build a DID from a short UTF-8 name right-padded with NUL bytes.

        ``Did.from_name("Alice")`` is ``b"Alice" + b"\\x00" * 27``.

        Raises:
            InvalidDidError: If the encoded name is longer than 32 bytes.
        """
        encoded = name.encode("utf-8")
        if len(encoded) > DID_BYTE_LENGTH:
            raise InvalidDidError(name, "name longer than 32 bytes")
        return cls(encoded.ljust(DID_BYTE_LENGTH, b"\x00"))

    def hex(self) -> str:
        """Return the ``0x``-prefixed lowercase hex form."""
        return "0x" + self.value.hex()

    def qualified(self) -> str:
        """Return the qualified ``did:master:0x...`` form."""
        return DID_METHOD_PREFIX + self.hex()

    def __str__(self) -> str:
        return self.qualified()
