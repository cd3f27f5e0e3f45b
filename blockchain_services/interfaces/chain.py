"""Chain client protocol — signing, submission and read-only queries."""
from typing import Any, Protocol

from ..models import TransactOptions, Transaction


class ChainClient(Protocol):
    """Abstract interface for a chain-specific RPC/signing client."""

    def parse_private_key(self, private_key: str) -> Any: ...

    def derive_public_key(self, private_key: Any) -> str: ...

    async def submit(
        self, transaction: Transaction, options: TransactOptions
    ) -> dict[str, Any]: ...

    async def query_balance(self, code: str, account: str, symbol: str) -> Any: ...
