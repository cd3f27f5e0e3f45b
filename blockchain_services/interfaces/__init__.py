"""Protocol interfaces for blockchain services."""
from .blockchain_service import BlockchainService
from .chain import ChainClient
from .contract_reader import ContractFileReader

__all__ = ["BlockchainService", "ChainClient", "ContractFileReader"]
