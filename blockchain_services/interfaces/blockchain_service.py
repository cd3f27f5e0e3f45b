"""Blockchain service protocol — the capability every chain adapter exposes."""
from typing import Any, Protocol

from ..models import BlockchainAccount, ContractPath


class BlockchainService(Protocol):
    """Deploy contracts and query token balances on one network."""

    @property
    def url(self) -> str: ...

    async def deploy_contract(
        self, contract_path: ContractPath, account: BlockchainAccount
    ) -> dict[str, Any]: ...

    async def get_balance(self, account: str, code: str, symbol: str) -> Any: ...
