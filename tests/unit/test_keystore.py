"""Unit tests for the signing key store."""
from __future__ import annotations

from blockchain_services.keystore import SigningKeyStore


class TestSigningKeyStore:
    def test_starts_empty(self) -> None:
        store = SigningKeyStore()
        assert store.keys == {}
        assert store.available_keys == []
        assert len(store) == 0

    def test_add_registers_key(self) -> None:
        store = SigningKeyStore()
        store.add("EOS_PUB", "priv")
        assert "EOS_PUB" in store
        assert store.get("EOS_PUB") == "priv"
        assert store.available_keys == ["EOS_PUB"]

    def test_add_keeps_insertion_order(self) -> None:
        store = SigningKeyStore()
        store.add("EOS_B", "b")
        store.add("EOS_A", "a")
        assert store.available_keys == ["EOS_B", "EOS_A"]

    def test_same_key_twice_is_listed_twice(self) -> None:
        store = SigningKeyStore()
        store.add("EOS_PUB", "priv")
        store.add("EOS_PUB", "priv")
        assert store.available_keys == ["EOS_PUB", "EOS_PUB"]
        assert len(store.keys) == 1

    def test_unknown_key(self) -> None:
        store = SigningKeyStore()
        assert store.get("missing") is None
        assert "missing" not in store
