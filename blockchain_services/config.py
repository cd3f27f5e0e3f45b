"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SUPPORTED_PROTOCOLS = ("http", "https")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NetworkConfig:
    """Connection details for one chain network."""

    name: str = ""
    type: str = "eos"
    protocol: str = "http"
    host: str = ""
    port: int = 0
    chain_id: str = ""
    timeout: int = 30

    @property
    def url(self) -> str:
        if self.port:
            return f"{self.protocol}://{self.host}:{self.port}"
        return f"{self.protocol}://{self.host}"


@dataclass(frozen=True)
class AppConfig:
    networks: dict[str, NetworkConfig] = field(default_factory=dict)
    default_network: str = ""

    def network(self, name: str | None = None) -> NetworkConfig:
        """Return the named network, or the default one when no name is given."""
        key = name or self.default_network
        if key not in self.networks:
            raise ValueError(f"Unknown network '{key}'")
        return self.networks[key]


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_network(name: str, raw: dict[str, Any]) -> NetworkConfig:
    return NetworkConfig(
        name=name,
        type=str(raw.get("type", "eos")).lower(),
        protocol=str(raw.get("protocol", "http")).lower(),
        host=raw.get("host", ""),
        port=int(raw.get("port") or 0),
        chain_id=raw.get("chain_id", ""),
        timeout=int(raw.get("timeout", 30)),
    )


def _build_networks(raw: dict[str, Any]) -> dict[str, NetworkConfig]:
    networks: dict[str, NetworkConfig] = {}
    for name, cfg in raw.items():
        networks[name] = _build_network(name, cfg or {})
    return networks


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    networks = _build_networks(raw.get("networks", {}))
    default_network = raw.get("default_network") or next(iter(networks), "")
    cfg = AppConfig(networks=networks, default_network=default_network)

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.networks:
        raise ValueError("At least one network must be configured")

    if cfg.default_network not in cfg.networks:
        raise ValueError(f"Default network '{cfg.default_network}' is not configured")

    for network in cfg.networks.values():
        if not network.host:
            raise ValueError(f"Network '{network.name}' has no host")
        if network.protocol not in SUPPORTED_PROTOCOLS:
            raise ValueError(
                f"Network '{network.name}' uses unsupported protocol '{network.protocol}'"
            )
