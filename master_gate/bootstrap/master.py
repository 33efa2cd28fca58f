"""Composition root for the master executor.

Builds a MasterExecutorService from a configuration and the external
collaborators. Collaborators left as None get in-memory stubs, which is
what development mode and the test suite run on.
"""

from __future__ import annotations

from dataclasses import dataclass

from master_gate.application.ports.identity_registry import IdentityRegistryProtocol
from master_gate.application.ports.ledger import LedgerProtocol
from master_gate.application.ports.master_event_emitter import MasterEventEmitterPort
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
from master_gate.config.master_config import MasterGateConfig
from master_gate.infrastructure.adapters.crypto import build_default_scheme_registry
from master_gate.infrastructure.stubs.identity_registry_stub import (
    IdentityRegistryStub,
)
from master_gate.infrastructure.stubs.in_memory_ledger_stub import InMemoryLedgerStub
from master_gate.infrastructure.stubs.master_event_emitter_stub import (
    MasterEventEmitterStub,
)


@dataclass(frozen=True)
class MasterGate:
    """A wired executor together with the collaborators it was built on.

    Attributes:
        executor: The submission entry point.
        identity_registry: Registry the verifier resolves keys from.
        ledger: Engine the executor applies instructions to.
        event_emitter: Sink for master.executed events.
        scheme_registry: Signature primitives the verifier dispatches to.
        config: Configuration the gate was built from.
    """

    executor: MasterExecutorService
    identity_registry: IdentityRegistryProtocol
    ledger: LedgerProtocol
    event_emitter: MasterEventEmitterPort
    scheme_registry: SignatureSchemeRegistry
    config: MasterGateConfig


def build_master_gate(
    config: MasterGateConfig,
    *,
    identity_registry: IdentityRegistryProtocol | None = None,
    ledger: LedgerProtocol | None = None,
    event_emitter: MasterEventEmitterPort | None = None,
    scheme_registry: SignatureSchemeRegistry | None = None,
) -> MasterGate:
    """Wire a master gate.

    Args:
        config: Threshold and limits.
        identity_registry: DID key source (default: IdentityRegistryStub).
        ledger: State-transition engine (default: InMemoryLedgerStub).
        event_emitter: Event sink (default: MasterEventEmitterStub).
        scheme_registry: Signature primitives (default: all built-in schemes).

    Returns:
        The wired MasterGate.
    """
    registry = identity_registry if identity_registry is not None else IdentityRegistryStub()
    engine = ledger if ledger is not None else InMemoryLedgerStub()
    emitter = event_emitter if event_emitter is not None else MasterEventEmitterStub()
    schemes = (
        scheme_registry if scheme_registry is not None else build_default_scheme_registry()
    )

    executor = MasterExecutorService(
        verifier=SignatureVerificationService(registry, schemes),
        sequencer=RoundSequencer(engine),
        policy=config.quorum_policy(),
        event_emitter=emitter,
        max_votes=config.max_votes_per_submission,
    )
    return MasterGate(
        executor=executor,
        identity_registry=registry,
        ledger=engine,
        event_emitter=emitter,
        scheme_registry=schemes,
        config=config,
    )
