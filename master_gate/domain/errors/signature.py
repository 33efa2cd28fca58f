"""Signature scheme errors for Master Gate."""

from master_gate.domain.exceptions import MasterGateError


class UnsupportedSignatureSchemeError(MasterGateError):
    """Raised when no verification primitive is registered for a scheme tag.

    The signature verifier maps this to a per-vote SCHEME_UNSUPPORTED
    verdict, so one exotic vote never aborts a batch.

    Attributes:
        scheme: The scheme tag that has no registered primitive.
    """

    def __init__(self, scheme: str) -> None:
        self.scheme = scheme
        super().__init__(f"No signature scheme registered for tag: {scheme}")
