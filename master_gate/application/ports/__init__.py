"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- IdentityRegistryProtocol: DID to active key resolution
- LedgerProtocol: round query and atomic apply-and-advance
- SignatureSchemeProtocol: per-scheme signature verification
- MasterEventEmitterPort: post-commit execution events
"""

from master_gate.application.ports.identity_registry import IdentityRegistryProtocol
from master_gate.application.ports.ledger import LedgerProtocol
from master_gate.application.ports.master_event_emitter import MasterEventEmitterPort
from master_gate.application.ports.signature_scheme import SignatureSchemeProtocol

__all__: list[str] = [
    "IdentityRegistryProtocol",
    "LedgerProtocol",
    "MasterEventEmitterPort",
    "SignatureSchemeProtocol",
]
