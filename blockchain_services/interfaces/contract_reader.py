"""Contract reader protocol — loads deployable contract artifacts."""
from pathlib import Path
from typing import Protocol


class ContractFileReader(Protocol):
    """Abstract interface for reading a contract's ABI and wasm module."""

    def read_abi(self, path: str | Path) -> bytes: ...

    def read_wasm(self, path: str | Path) -> bytes: ...
