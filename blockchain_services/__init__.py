"""Uniform blockchain service adapters: deploy contracts, query balances."""
from .config import AppConfig, NetworkConfig, load_config
from .models import BlockchainAccount, ContractPath
from .services import create_blockchain_service

__all__ = [
    "AppConfig",
    "BlockchainAccount",
    "ContractPath",
    "NetworkConfig",
    "create_blockchain_service",
    "load_config",
]
