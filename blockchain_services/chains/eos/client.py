"""EOSIO chain client — aioeos RPC, signing and push over a certifi/timeout session."""
from __future__ import annotations

import logging
import ssl
from datetime import datetime, timedelta, timezone
from typing import Any

import aiohttp
import certifi
from aioeos import EosJsonRpc, EosKey, EosTransaction
from aioeos.exceptions import EosRpcException
from aioeos.rpc import ERROR_NAME_MAP
from aioeos.types import EosAction, EosPermissionLevel

from ...config import NetworkConfig
from ...keystore import SigningKeyStore
from ...models import Action, TransactOptions, Transaction

logger = logging.getLogger(__name__)


def _parse_block_time(value: str) -> datetime:
    """Block timestamp (UTC, no offset) rounded to the nearest second."""
    parsed = datetime.fromisoformat(value.rstrip("Z")).replace(tzinfo=timezone.utc)
    return datetime.fromtimestamp(int(parsed.timestamp() + 0.5), timezone.utc)


def _to_wire(data: dict[str, Any]) -> dict[str, Any]:
    """Hex-encode bytes values so action data can travel as JSON."""
    return {k: v.hex() if isinstance(v, (bytes, bytearray)) else v for k, v in data.items()}


class EosNodeRpc(EosJsonRpc):
    """aioeos JSON RPC whose requests use a certifi SSL context and a timeout.

    Node errors raise the aioeos exception matching the error name, falling
    back to ``EosRpcException``.
    """

    def __init__(self, url: str, timeout: int = 30) -> None:
        super().__init__(url)
        self.timeout = timeout

    async def post(self, endpoint: str, json: dict[str, Any] | None = None) -> Any:
        url = f"{self.URL}/v1{endpoint}"
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        logger.debug("RPC call %s", url)
        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.post(
                url,
                json=json or {},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                body = await response.json(content_type=None)
                failed = response.status >= 400 or (
                    isinstance(body, dict) and body.get("code") == 500
                )
                if failed:
                    error = body.get("error", {}) if isinstance(body, dict) else {}
                    raise ERROR_NAME_MAP.get(error.get("name"), EosRpcException)(
                        error or body
                    )
                return body


class EosChainClient:
    """EOSIO client bound to one node endpoint and one signing key store."""

    def __init__(
        self, config: NetworkConfig, key_store: SigningKeyStore | None = None
    ) -> None:
        self.url = config.url
        self.key_store = key_store if key_store is not None else SigningKeyStore()
        self.rpc = EosNodeRpc(self.url, timeout=config.timeout)

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def parse_private_key(self, private_key: str) -> EosKey:
        return EosKey(private_key=private_key)

    def derive_public_key(self, private_key: str | EosKey) -> str:
        if isinstance(private_key, str):
            private_key = self.parse_private_key(private_key)
        return private_key.to_public()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def query_balance(self, code: str, account: str, symbol: str) -> Any:
        return await self.rpc.get_currency_balance(code, account, symbol)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def _pack_action(self, action: Action) -> EosAction:
        packed = await self.rpc.abi_json_to_bin(
            action.account, action.name, _to_wire(action.data)
        )
        return EosAction(
            account=action.account,
            name=action.name,
            authorization=[
                EosPermissionLevel(actor=auth.actor, permission=auth.permission)
                for auth in action.authorization
            ],
            data=bytes.fromhex(packed["binargs"]),
        )

    async def _required_keys(self, header: dict[str, Any], actions: list[EosAction]) -> list[str]:
        transaction = {
            **header,
            "max_net_usage_words": 0,
            "max_cpu_usage_ms": 0,
            "delay_sec": 0,
            "context_free_actions": [],
            "actions": [
                {
                    "account": a.account,
                    "name": a.name,
                    "authorization": [
                        {"actor": p.actor, "permission": p.permission}
                        for p in a.authorization
                    ],
                    "data": a.data.hex(),
                }
                for a in actions
            ],
            "transaction_extensions": [],
        }
        result = await self.rpc.get_required_keys(
            transaction, self.key_store.available_keys
        )
        return result.get("required_keys", [])

    async def submit(
        self, transaction: Transaction, options: TransactOptions
    ) -> dict[str, Any]:
        """Sign and push ``transaction`` referencing a block behind head.

        The reference block is ``options.blocks_behind`` below the current head
        and the transaction expires ``options.expire_seconds`` after that
        block's timestamp.
        """
        info = await self.rpc.get_info()
        ref_block_num = max(int(info["head_block_num"]) - options.blocks_behind, 1)
        ref_block = await self.rpc.get_block(ref_block_num)

        expiration = _parse_block_time(ref_block["timestamp"]) + timedelta(
            seconds=options.expire_seconds
        )
        header = {
            "expiration": expiration.strftime("%Y-%m-%dT%H:%M:%S"),
            "ref_block_num": int(ref_block["block_num"]) & 0xFFFF,
            "ref_block_prefix": int(ref_block["ref_block_prefix"]),
        }

        actions = [await self._pack_action(a) for a in transaction.actions]
        required = await self._required_keys(header, actions)
        keys = [self.key_store.get(k) for k in required if k in self.key_store]
        logger.debug("Signing with %d of %d required keys", len(keys), len(required))

        eos_transaction = EosTransaction(
            expiration=expiration,
            ref_block_num=header["ref_block_num"],
            ref_block_prefix=header["ref_block_prefix"],
            actions=actions,
        )
        result = await self.rpc.sign_and_push_transaction(eos_transaction, keys=keys)
        logger.info("Pushed transaction %s", result.get("transaction_id", "?"))
        return result
