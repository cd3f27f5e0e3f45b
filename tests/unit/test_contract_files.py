"""Unit tests for contract artifact readers."""
from __future__ import annotations

from pathlib import Path

import pytest

from blockchain_services.abi import pack_abi
from blockchain_services.contract_files import (
    ContractFiles,
    read_abi_file,
    read_wasm_file,
)
from blockchain_services.models import ContractPath

from conftest import SAMPLE_ABI, SAMPLE_WASM


class TestReadWasmFile:
    def test_returns_raw_bytes(self, contract_files: ContractPath) -> None:
        assert read_wasm_file(contract_files.wasm_path) == SAMPLE_WASM

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_wasm_file(tmp_path / "missing.wasm")


class TestReadAbiFile:
    def test_returns_packed_abi(self, contract_files: ContractPath) -> None:
        assert read_abi_file(contract_files.abi_path) == pack_abi(SAMPLE_ABI)

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        abi_path = tmp_path / "broken.abi"
        abi_path.write_text("{not json")
        with pytest.raises(ValueError):
            read_abi_file(abi_path)


class TestContractFiles:
    def test_reader_delegates(self, contract_files: ContractPath) -> None:
        reader = ContractFiles()
        assert reader.read_wasm(contract_files.wasm_path) == SAMPLE_WASM
        assert reader.read_abi(contract_files.abi_path) == pack_abi(SAMPLE_ABI)
