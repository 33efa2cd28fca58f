"""Dispatch table from signature scheme tag to verification primitive.

The verifier asks the registry for the primitive matching a vote's
declared scheme tag. Supporting another scheme means registering another
primitive; the verifier never inspects key or signature types.
"""

from __future__ import annotations

from collections.abc import Iterable

from master_gate.application.ports.signature_scheme import SignatureSchemeProtocol
from master_gate.domain.errors.signature import UnsupportedSignatureSchemeError
from master_gate.domain.models.public_key import SignatureScheme


class SignatureSchemeRegistry:
    """Maps each SignatureScheme to exactly one verification primitive."""

    def __init__(self, schemes: Iterable[SignatureSchemeProtocol] = ()) -> None:
        self._schemes: dict[SignatureScheme, SignatureSchemeProtocol] = {}
        for scheme in schemes:
            self.register(scheme)

    def register(self, primitive: SignatureSchemeProtocol) -> None:
        """Register a primitive under its scheme tag.

        Raises:
            ValueError: If a primitive is already registered for the tag.
        """
        if primitive.scheme in self._schemes:
            raise ValueError(
                f"Signature scheme already registered: {primitive.scheme.value}"
            )
        self._schemes[primitive.scheme] = primitive

    def get(self, scheme: SignatureScheme) -> SignatureSchemeProtocol:
        """Return the primitive for a scheme tag.

        Raises:
            UnsupportedSignatureSchemeError: If nothing is registered for it.
        """
        try:
            return self._schemes[scheme]
        except KeyError:
            raise UnsupportedSignatureSchemeError(scheme.value) from None

    def supports(self, scheme: SignatureScheme) -> bool:
        return scheme in self._schemes

    @property
    def supported_schemes(self) -> tuple[SignatureScheme, ...]:
        return tuple(self._schemes)
