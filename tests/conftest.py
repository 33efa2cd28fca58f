"""
Pytest configuration and shared fixtures for Master Gate tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for port mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Council members with real keys come from tests/helpers/council.py
"""

import pytest

from master_gate.domain.models.did import Did
from master_gate.infrastructure.stubs.identity_registry_stub import (
    IdentityRegistryStub,
)
from master_gate.infrastructure.stubs.in_memory_ledger_stub import InMemoryLedgerStub
from master_gate.infrastructure.stubs.master_event_emitter_stub import (
    MasterEventEmitterStub,
)
from tests.helpers.council import Council, build_council


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from master_gate import __version__

    return __version__


@pytest.fixture
def council() -> Council:
    """Alice, Bob and Charlie with Ed25519 keys; Dave with secp256k1."""
    return build_council()


@pytest.fixture
def identity_registry(council: Council) -> IdentityRegistryStub:
    """Registry with every council member's key registered."""
    registry = IdentityRegistryStub()
    council.register_all(registry)
    return registry


@pytest.fixture
def ledger() -> InMemoryLedgerStub:
    return InMemoryLedgerStub()


@pytest.fixture
def event_emitter() -> MasterEventEmitterStub:
    return MasterEventEmitterStub()


@pytest.fixture
def alice_did() -> Did:
    return Did.from_name("Alice")
