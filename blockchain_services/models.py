"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ContractPath:
    """Locations of a compiled contract's ABI and wasm module."""

    abi_path: str
    wasm_path: str


@dataclass(frozen=True)
class BlockchainAccount:
    """Account name plus the WIF private key it signs with."""

    name: str
    private_key: str = field(repr=False)


@dataclass(frozen=True)
class PermissionLevel:
    actor: str
    permission: str = "active"


@dataclass(frozen=True)
class Action:
    """Single named operation on a target contract account."""

    account: str
    name: str
    authorization: tuple[PermissionLevel, ...]
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Transaction:
    actions: tuple[Action, ...] = ()


@dataclass(frozen=True)
class TransactOptions:
    """Reference block offset from head and expiration window."""

    blocks_behind: int = 3
    expire_seconds: int = 30
