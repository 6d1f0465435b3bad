"""
Common plumbing for the Vexidus client façades.
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Union

from ..config import ClientConfig
from ..runtime.errors import RpcError
from .rpc import HttpRpcChannel, RpcChannel

logger = logging.getLogger(__name__)

ChannelLike = Union[RpcChannel, ClientConfig, str, None]


def resolve_channel(target: ChannelLike) -> RpcChannel:
    """
    Turn a channel, config, endpoint URL/alias or None into a channel.

    None means :meth:`ClientConfig.from_env`.
    """
    if isinstance(target, RpcChannel):
        return target
    if isinstance(target, ClientConfig):
        return HttpRpcChannel(target)
    if isinstance(target, str):
        return HttpRpcChannel(ClientConfig(endpoint=target))
    if target is None:
        return HttpRpcChannel(ClientConfig.from_env())
    raise TypeError(f"Cannot build an RPC channel from {type(target).__name__}")


def parse_quantity(value: Any) -> int:
    """
    Parse an Ethereum-style hex quantity (``"0x1a"``).

    Raises:
        RpcError: If the value is not a hex quantity
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise RpcError(f"Expected hex quantity, got {value!r}")
    text = value[2:] if value[:2] in ("0x", "0X") else value
    try:
        return int(text or "0", 16)
    except ValueError as e:
        raise RpcError(f"Malformed hex quantity: {value!r}", cause=e)


class BaseClient:
    """Holds the channel and the calls every façade shares."""

    def __init__(self, channel: ChannelLike = None):
        """
        Initialize the client.

        Args:
            channel: An :class:`RpcChannel`, a :class:`ClientConfig`, an
                endpoint URL or alias, or None to read the environment
        """
        self._channel = resolve_channel(channel)

    @property
    def channel(self) -> RpcChannel:
        return self._channel

    def close(self) -> None:
        self._channel.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        return self._channel.call(method, params if params is not None else [])

    def block_number(self) -> int:
        """Current block height."""
        return parse_quantity(self._call("eth_blockNumber", []))

    def get_nonce(self, address: str) -> int:
        """Next replay-protection nonce for an address."""
        result = self._call("eth_getTransactionCount", [address, "latest"])
        return parse_quantity(result if result is not None else "0x0")

    def is_healthy(self) -> bool:
        """True if the node answers a block-height query."""
        try:
            self.block_number()
        except RpcError as e:
            logger.debug(f"Health check failed: {e}")
            return False
        return True


__all__ = [
    "ChannelLike",
    "resolve_channel",
    "parse_quantity",
    "BaseClient",
]
