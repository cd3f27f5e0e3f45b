"""Blockchain service factory — picks the implementation for a network type."""
from __future__ import annotations

import logging
from typing import Any

from ..chains.eos import EosBlockchainService
from ..config import NetworkConfig
from ..interfaces.blockchain_service import BlockchainService

logger = logging.getLogger(__name__)

# Registry of service factories keyed by network type. CAN is EOSIO-based.
_SERVICE_FACTORIES: dict[str, Any] = {
    "eos": EosBlockchainService,
    "can": EosBlockchainService,
}


def supported_network_types() -> list[str]:
    return sorted(_SERVICE_FACTORIES)


def create_blockchain_service(config: NetworkConfig) -> BlockchainService:
    """Build the blockchain service matching ``config.type``."""
    factory = _SERVICE_FACTORIES.get(config.type)
    if factory is None:
        raise ValueError(
            f"Unsupported network type '{config.type}' "
            f"(supported: {', '.join(supported_network_types())})"
        )
    logger.debug("Creating %s service for %s", config.type, config.url)
    return factory(config)


__all__ = ["create_blockchain_service", "supported_network_types"]
