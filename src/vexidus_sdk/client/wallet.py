"""
Wallet client for Vexidus.

Balance and nonce queries, bundle submission, and a one-call transfer that
fetches the nonce, builds, signs and submits.

Example:
    ```python
    client = WalletClient("http://localhost:9933")
    balance = client.get_balance("Vx0...", "VXS")
    tx_hash = client.transfer(wallet, "Vx0...", "VXS", 5_000_000_000)
    ```
"""

import logging
from typing import Any

from ..bundle.builder import BundleBuilder
from ..bundle.types import TransactionBundle
from ..config import DEFAULT_VALIDITY_SECONDS, NATIVE_TOKEN_SYMBOL
from ..keys.keypair import WalletKeypair
from .base import BaseClient

logger = logging.getLogger(__name__)


class WalletClient(BaseClient):
    """Wallet operations against a Vexidus node."""

    def get_balance(self, address: str, token: str = NATIVE_TOKEN_SYMBOL) -> str:
        """
        Get a token balance.

        Args:
            address: Account address in any supported format
            token: ``"VXS"`` or a token address

        Returns:
            Balance string as reported by the node, ``"0"`` if absent
        """
        result = self._call("vex_getBalance", [address, token])
        return "0" if result is None else str(result)

    def submit_bundle(self, bundle: TransactionBundle) -> str:
        """
        Submit a signed bundle.

        Returns:
            Transaction hash reported by the node

        Raises:
            RpcError: If the node rejects the bundle (never retried)
        """
        result = self._call("vex_submitBundle", [bundle.to_hex(prefix=True)])
        logger.debug(f"Submitted bundle nonce={bundle.nonce}")
        return "" if result is None else str(result)

    def transfer(self, wallet: WalletKeypair, to: str, token: str, amount: int) -> str:
        """
        Build, sign and submit a transfer.

        Args:
            wallet: Sending wallet
            to: Recipient address in any supported format
            token: ``"VXS"`` or a token address
            amount: Raw units (1 VXS = 1_000_000_000)

        Returns:
            Transaction hash
        """
        sender = wallet.hex_address()
        nonce = self.get_nonce(sender)

        bundle = (BundleBuilder(sender)
                  .transfer(to, token, amount)
                  .nonce(nonce)
                  .valid_for(DEFAULT_VALIDITY_SECONDS)
                  .sign(wallet))

        return self.submit_bundle(bundle)

    def get_token_info(self, address_or_symbol: str) -> Any:
        return self._call("vex_getTokenInfo", [address_or_symbol])

    def list_tokens(self, limit: int = 100) -> Any:
        return self._call("vex_listTokens", [limit])

    def chain_id(self) -> str:
        """Chain id as a hex quantity string."""
        result = self._call("eth_chainId", [])
        return "0x0" if result is None else str(result)


__all__ = [
    "WalletClient",
]
