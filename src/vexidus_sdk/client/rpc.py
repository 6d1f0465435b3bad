"""
JSON-RPC transport for Vexidus nodes.

:class:`RpcChannel` is the seam the client façades talk to;
:class:`HttpRpcChannel` implements it over HTTP with ``requests``. Tests
substitute an in-memory channel.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import json
import logging
import random
from typing import Any, Dict, List, Optional

import requests

from ..config import ClientConfig
from ..runtime.errors import RpcError, RpcTransportError

logger = logging.getLogger(__name__)


class RpcChannel(ABC):
    """Abstract JSON-RPC channel."""

    @abstractmethod
    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Invoke an RPC method.

        Args:
            method: RPC method name
            params: Positional parameters

        Returns:
            The ``result`` member of the response

        Raises:
            RpcError: If the node returns a structured error
            RpcTransportError: If the node cannot be reached or replies garbage
        """
        pass

    def close(self) -> None:
        """Release any held resources."""
        pass


class HttpRpcChannel(RpcChannel):
    """
    JSON-RPC 2.0 over HTTP POST.

    Example:
        ```python
        channel = HttpRpcChannel(ClientConfig("testnet"))
        height = channel.call("eth_blockNumber", [])
        ```
    """

    def __init__(self, config: Optional[ClientConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the channel.

        Args:
            config: Endpoint and timeout settings (defaults to the local node)
            session: Optional requests.Session for connection pooling
        """
        self._config = config or ClientConfig()
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._session.headers.update({"User-Agent": self._config.user_agent})

    @property
    def endpoint(self) -> str:
        """Get the RPC endpoint."""
        return self._config.endpoint

    def close(self) -> None:
        """Close the HTTP session if owned by this channel."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HttpRpcChannel:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        request_id = random.randint(1, 1_000_000)
        request_data: Dict[str, Any] = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params if params is not None else [],
            "id": request_id,
        }
        logger.debug(f"RPC call {method} (id={request_id})")
        if self._config.debug:
            logger.debug(f"RPC {method} params: {request_data['params']}")

        try:
            response = self._session.post(
                self._config.endpoint,
                json=request_data,
                headers={"Content-Type": "application/json"},
                timeout=self._config.timeout,
            )

            if response.status_code != 200:
                raise RpcTransportError(
                    f"HTTP {response.status_code}: {response.reason}",
                    rpc_code=response.status_code,
                )

            response_data = response.json()

        except json.JSONDecodeError as e:
            raise RpcTransportError(f"Invalid JSON response: {e}", cause=e)
        except requests.exceptions.RequestException as e:
            raise RpcTransportError(f"HTTP request failed: {e}", cause=e)

        if not isinstance(response_data, dict):
            raise RpcTransportError("Invalid JSON-RPC response: not an object")

        if response_data.get("error") is not None:
            error = response_data["error"]
            if not isinstance(error, dict):
                raise RpcError(str(error))
            raise RpcError(
                error.get("message", "Unknown error"),
                rpc_code=error.get("code"),
                data=error.get("data"),
            )

        return response_data.get("result")


__all__ = [
    "RpcChannel",
    "HttpRpcChannel",
]
