"""Signing key store shared between a service and its chain client."""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class SigningKeyStore:
    """Public key → private key mapping plus the ordered list of available keys.

    Append-only. ``available_keys`` is not de-duplicated: registering the same
    key twice lists it twice, while ``keys`` keeps a single entry.
    """

    def __init__(self) -> None:
        self.keys: dict[str, Any] = {}
        self.available_keys: list[str] = []

    def add(self, public_key: str, private_key: Any) -> None:
        self.keys[public_key] = private_key
        self.available_keys.append(public_key)
        logger.debug("Registered signing key %s", public_key)

    def get(self, public_key: str) -> Any | None:
        return self.keys.get(public_key)

    def __contains__(self, public_key: object) -> bool:
        return public_key in self.keys

    def __len__(self) -> int:
        return len(self.available_keys)
