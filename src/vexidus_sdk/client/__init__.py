"""
Vexidus RPC clients.

A JSON-RPC channel plus wallet, DEX and validator façades built on it.
"""

from .rpc import RpcChannel, HttpRpcChannel
from .base import BaseClient, parse_quantity, resolve_channel
from .wallet import WalletClient
from .dex import DexClient, PoolInfo, SwapQuote, min_amount_out
from .validator import ValidatorClient

__all__ = [
    "RpcChannel",
    "HttpRpcChannel",
    "BaseClient",
    "parse_quantity",
    "resolve_channel",
    "WalletClient",
    "DexClient",
    "PoolInfo",
    "SwapQuote",
    "min_amount_out",
    "ValidatorClient",
]
