"""EOSIO chain support."""
from .client import EosChainClient, EosNodeRpc
from .service import EosBlockchainService

__all__ = ["EosBlockchainService", "EosChainClient", "EosNodeRpc"]
