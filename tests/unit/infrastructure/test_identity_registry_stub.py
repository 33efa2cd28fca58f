"""Unit tests for IdentityRegistryStub."""

from __future__ import annotations

import pytest

from master_gate.domain.models.did import Did
from master_gate.domain.models.public_key import PublicKey, SignatureScheme
from master_gate.infrastructure.stubs.identity_registry_stub import (
    IdentityRegistryStub,
)

KEY_1 = PublicKey(SignatureScheme.ED25519, b"\x01" * 32)
KEY_2 = PublicKey(SignatureScheme.ED25519, b"\x02" * 32)


class TestIdentityRegistryStub:
    @pytest.mark.asyncio
    async def test_unknown_did_resolves_to_none(self, alice_did: Did) -> None:
        assert await IdentityRegistryStub().resolve_key(alice_did) is None

    @pytest.mark.asyncio
    async def test_register_and_resolve(self, alice_did: Did) -> None:
        registry = IdentityRegistryStub()
        await registry.register(alice_did, KEY_1)
        assert await registry.resolve_key(alice_did) == KEY_1
        assert registry.get_identity_count() == 1

    @pytest.mark.asyncio
    async def test_register_twice_rejected(self, alice_did: Did) -> None:
        registry = IdentityRegistryStub()
        await registry.register(alice_did, KEY_1)
        with pytest.raises(ValueError, match="already registered"):
            await registry.register(alice_did, KEY_2)

    @pytest.mark.asyncio
    async def test_rotate_replaces_active_key(self, alice_did: Did) -> None:
        registry = IdentityRegistryStub()
        await registry.register(alice_did, KEY_1)
        await registry.rotate_key(alice_did, KEY_2)
        assert await registry.resolve_key(alice_did) == KEY_2
        assert registry.get_key_history(alice_did) == [KEY_1, KEY_2]

    @pytest.mark.asyncio
    async def test_rotate_unknown_raises(self, alice_did: Did) -> None:
        with pytest.raises(KeyError):
            await IdentityRegistryStub().rotate_key(alice_did, KEY_2)

    @pytest.mark.asyncio
    async def test_revoke(self, alice_did: Did) -> None:
        registry = IdentityRegistryStub()
        await registry.register(alice_did, KEY_1)
        await registry.revoke(alice_did)
        assert await registry.resolve_key(alice_did) is None
        with pytest.raises(KeyError):
            await registry.revoke(alice_did)

    def test_clear(self, alice_did: Did) -> None:
        registry = IdentityRegistryStub()
        registry.add_identity(alice_did, KEY_1)
        registry.clear()
        assert registry.get_identity_count() == 0
        assert registry.get_key_history(alice_did) == []
