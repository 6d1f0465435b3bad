"""
Protocol constants and client configuration for the Vexidus SDK.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Dict, Optional

# Address formats
ADDRESS_TAG = "Vx0"
LEGACY_ADDRESS_TAG = "Vx1"
HEX_PREFIX = "0x"
ADDRESS_LENGTH = 32
EVM_ADDRESS_LENGTH = 20

# Native token
NATIVE_TOKEN_SYMBOL = "VXS"
NATIVE_DECIMALS = 9

# Bundle defaults
DEFAULT_MAX_GAS = 100_000
DEFAULT_MAX_PRIORITY_FEE = 0
DEFAULT_VALIDITY_SECONDS = 3600
DEFAULT_NONCE = 0

# Minimum gas for operations with known higher execution cost
CREATE_POOL_GAS_FLOOR = 300_000
LIQUIDITY_GAS_FLOOR = 150_000

U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Well-known endpoints
WELL_KNOWN_ENDPOINTS: Dict[str, str] = {
    "local": "http://localhost:9933",
    "testnet": "https://testnet.vexidus.io",
}


@dataclass
class ClientConfig:
    """Configuration for the Vexidus RPC clients."""

    endpoint: str = WELL_KNOWN_ENDPOINTS["local"]
    timeout: float = 30.0
    debug: bool = False
    user_agent: str = "vexidus-sdk-python/0.1.0"

    def __post_init__(self):
        # Resolve well-known endpoint aliases
        alias = self.endpoint.lower()
        if alias in WELL_KNOWN_ENDPOINTS:
            self.endpoint = WELL_KNOWN_ENDPOINTS[alias]
        self.endpoint = self.endpoint.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> ClientConfig:
        """
        Build a config from ``VEXIDUS_RPC_URL`` and ``VEXIDUS_RPC_TIMEOUT``.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            ClientConfig with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        config = cls(endpoint=env.get("VEXIDUS_RPC_URL", cls.endpoint))
        timeout = env.get("VEXIDUS_RPC_TIMEOUT")
        if timeout:
            config.timeout = float(timeout)
        config.debug = env.get("VEXIDUS_DEBUG", "").lower() in ("1", "true", "yes")
        return config
