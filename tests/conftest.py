"""Shared test fixtures and sample data."""
from __future__ import annotations

import json
import textwrap
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from blockchain_services.config import AppConfig, NetworkConfig
from blockchain_services.models import BlockchainAccount, ContractPath


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_network_config() -> NetworkConfig:
    return NetworkConfig(
        name="local",
        type="eos",
        protocol="http",
        host="127.0.0.1",
        port=8888,
        timeout=5,
    )


@pytest.fixture()
def sample_app_config(sample_network_config: NetworkConfig) -> AppConfig:
    return AppConfig(networks={"local": sample_network_config}, default_network="local")


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

SAMPLE_PRIVATE_KEY = "5KQwrPbwdL6PhXujxW37FSSQZ1JiwsST4cqQzDeyXtP79zkvFD3"
SAMPLE_PUBLIC_KEY = "EOS6MRyAjQq8ud7hVNYcfnVPJqcVpscN5So8BhtHuGYqET5GDW5CV"


@pytest.fixture()
def sample_account() -> BlockchainAccount:
    return BlockchainAccount(name="alice", private_key=SAMPLE_PRIVATE_KEY)


SAMPLE_ABI = {
    "version": "eosio::abi/1.1",
    "types": [],
    "structs": [
        {
            "name": "hi",
            "base": "",
            "fields": [{"name": "user", "type": "name"}],
        }
    ],
    "actions": [{"name": "hi", "type": "hi", "ricardian_contract": ""}],
    "tables": [],
    "ricardian_clauses": [],
    "error_messages": [],
    "abi_extensions": [],
}

SAMPLE_WASM = b"\x00asm\x01\x00\x00\x00"


@pytest.fixture()
def contract_files(tmp_path: Path) -> ContractPath:
    abi_path = tmp_path / "hello.abi"
    abi_path.write_text(json.dumps(SAMPLE_ABI))
    wasm_path = tmp_path / "hello.wasm"
    wasm_path.write_bytes(SAMPLE_WASM)
    return ContractPath(abi_path=str(abi_path), wasm_path=str(wasm_path))


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_chain_client() -> MagicMock:
    client = MagicMock()
    client.parse_private_key = MagicMock(side_effect=lambda wif: f"key:{wif}")
    client.derive_public_key = MagicMock(return_value=SAMPLE_PUBLIC_KEY)
    client.submit = AsyncMock(return_value={"transaction_id": "abc123", "processed": {}})
    client.query_balance = AsyncMock(return_value=["10.0000 TOK"])
    return client


@pytest.fixture()
def mock_reader() -> MagicMock:
    reader = MagicMock()
    reader.read_abi = MagicMock(return_value=b"packed-abi")
    reader.read_wasm = MagicMock(return_value=SAMPLE_WASM)
    return reader


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    default_network: local
    networks:
      local:
        type: eos
        protocol: http
        host: 127.0.0.1
        port: 8888
        timeout: 10
      jungle:
        type: EOS
        protocol: https
        host: jungle.example.com
        chain_id: "abc"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
