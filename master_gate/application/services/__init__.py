"""Application services for Master Gate."""

from master_gate.application.services.master_executor_service import (
    MasterExecutorService,
)
from master_gate.application.services.round_sequencer import RoundSequencer
from master_gate.application.services.signature_scheme_registry import (
    SignatureSchemeRegistry,
)
from master_gate.application.services.signature_verification_service import (
    SignatureVerificationService,
)

__all__: list[str] = [
    "MasterExecutorService",
    "RoundSequencer",
    "SignatureSchemeRegistry",
    "SignatureVerificationService",
]
