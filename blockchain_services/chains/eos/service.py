"""EOS implementation of the blockchain service capability."""
from __future__ import annotations

import logging
from typing import Any

from ...config import NetworkConfig
from ...contract_files import ContractFiles
from ...interfaces.chain import ChainClient
from ...interfaces.contract_reader import ContractFileReader
from ...keystore import SigningKeyStore
from ...models import (
    Action,
    BlockchainAccount,
    ContractPath,
    PermissionLevel,
    TransactOptions,
    Transaction,
)
from .client import EosChainClient

logger = logging.getLogger(__name__)

SYSTEM_ACCOUNT = "eosio"
DEPLOY_OPTIONS = TransactOptions(blocks_behind=3, expire_seconds=30)


class EosBlockchainService:
    """Deploys contracts and reads token balances on an EOSIO network.

    Keys registered through :meth:`deploy_contract` accumulate in
    ``key_store`` for the lifetime of the service and are never removed.
    """

    def __init__(
        self,
        config: NetworkConfig,
        client: ChainClient | None = None,
        reader: ContractFileReader | None = None,
        key_store: SigningKeyStore | None = None,
    ) -> None:
        self.config = config
        self.key_store = key_store if key_store is not None else SigningKeyStore()
        self.client: ChainClient = (
            client if client is not None else EosChainClient(config, self.key_store)
        )
        self.reader: ContractFileReader = reader if reader is not None else ContractFiles()

    @property
    def url(self) -> str:
        return self.config.url

    def _register_key(self, private_key: str) -> str:
        key = self.client.parse_private_key(private_key)
        public_key = self.client.derive_public_key(key)
        self.key_store.add(public_key, key)
        return public_key

    @staticmethod
    def build_deploy_transaction(
        account_name: str, wasm: bytes, abi: bytes
    ) -> Transaction:
        """``setcode`` then ``setabi``, both under the account's active permission."""
        authorization = (PermissionLevel(actor=account_name, permission="active"),)
        return Transaction(
            actions=(
                Action(
                    account=SYSTEM_ACCOUNT,
                    name="setcode",
                    authorization=authorization,
                    data={
                        "account": account_name,
                        "vmtype": 0,
                        "vmversion": 0,
                        "code": wasm,
                    },
                ),
                Action(
                    account=SYSTEM_ACCOUNT,
                    name="setabi",
                    authorization=authorization,
                    data={"account": account_name, "abi": abi},
                ),
            )
        )

    async def deploy_contract(
        self, contract_path: ContractPath, account: BlockchainAccount
    ) -> dict[str, Any]:
        public_key = self._register_key(account.private_key)
        logger.info("Deploying contract to %s (key %s)", account.name, public_key)

        abi = self.reader.read_abi(contract_path.abi_path)
        wasm = self.reader.read_wasm(contract_path.wasm_path)

        transaction = self.build_deploy_transaction(account.name, wasm, abi)
        return await self.client.submit(transaction, DEPLOY_OPTIONS)

    async def get_balance(self, account: str, code: str, symbol: str) -> Any:
        if not code or not symbol:
            raise ValueError(
                '"code" and "symbol" are needed when getting balance from EOS network'
            )

        logger.debug("Querying %s balance of %s on %s", symbol, account, code)
        return await self.client.query_balance(code, account, symbol)
