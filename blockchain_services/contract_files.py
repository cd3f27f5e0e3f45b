"""Readers for compiled contract artifacts (ABI JSON and wasm module)."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .abi import pack_abi

logger = logging.getLogger(__name__)


def read_wasm_file(path: str | Path) -> bytes:
    """Return the raw bytes of a compiled wasm module."""
    data = Path(path).read_bytes()
    logger.debug("Read %d bytes of wasm from %s", len(data), path)
    return data


def read_abi_file(path: str | Path) -> bytes:
    """Load an ABI JSON file and return it packed as a binary ``abi_def``."""
    with open(path, encoding="utf-8") as f:
        abi = json.load(f)
    packed = pack_abi(abi)
    logger.debug("Packed ABI %s into %d bytes", path, len(packed))
    return packed


class ContractFiles:
    """Filesystem-backed contract reader."""

    def read_abi(self, path: str | Path) -> bytes:
        return read_abi_file(path)

    def read_wasm(self, path: str | Path) -> bytes:
        return read_wasm_file(path)
