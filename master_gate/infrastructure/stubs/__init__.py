"""Infrastructure stubs for development and testing.

Available stubs:
- IdentityRegistryStub: In-memory DID to key mapping with rotation/revocation
- InMemoryLedgerStub: Storage map plus round counter with atomic CAS apply
- MasterEventEmitterStub: Records master.executed events

WARNING: These stubs are NOT for production use.
"""

from master_gate.infrastructure.stubs.identity_registry_stub import (
    IdentityRegistryStub,
)
from master_gate.infrastructure.stubs.in_memory_ledger_stub import (
    InMemoryLedgerStub,
    decode_set_storage,
    encode_set_storage,
)
from master_gate.infrastructure.stubs.master_event_emitter_stub import (
    MasterEventEmitterStub,
)

__all__: list[str] = [
    "IdentityRegistryStub",
    "InMemoryLedgerStub",
    "MasterEventEmitterStub",
    "decode_set_storage",
    "encode_set_storage",
]
