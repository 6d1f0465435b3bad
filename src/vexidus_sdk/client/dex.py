"""
DEX client for Vexidus liquidity pools.

Pool and quote queries plus build-sign-submit helpers for swaps and
liquidity operations.

Example:
    ```python
    dex = DexClient("http://localhost:9933")
    quote = dex.quote_swap("VXS", "0x...usdc", 1_000_000_000)
    result = dex.swap(wallet, "VXS", "0x...usdc", 1_000_000_000, slippage_bps=50)
    ```
"""

import logging
from typing import Any, List

from pydantic import BaseModel, ValidationError

from ..bundle.builder import BundleBuilder
from ..bundle.types import TransactionBundle
from ..config import DEFAULT_VALIDITY_SECONDS
from ..keys.keypair import WalletKeypair
from ..runtime.errors import RpcError
from .base import BaseClient

logger = logging.getLogger(__name__)

BPS_DENOMINATOR = 10_000


class PoolInfo(BaseModel):
    """Pool state as reported by ``vex_getPool``. Amounts are decimal strings."""

    address: str
    token_a: str
    token_b: str
    reserve_a: str
    reserve_b: str
    lp_total_supply: str
    lp_locked: bool
    creator: str
    created_at: int


class SwapQuote(BaseModel):
    """Read-only swap estimate from ``vex_quoteSwap``."""

    amount_out: str
    price_impact_percent: str
    fee: str
    pool_address: str
    reserve_in: str
    reserve_out: str


def min_amount_out(estimated_out: int, slippage_bps: int) -> int:
    """
    Lowest acceptable output for a slippage tolerance.

    Args:
        estimated_out: Quoted output amount
        slippage_bps: Tolerance in basis points (50 = 0.5%)

    Raises:
        ValueError: If ``slippage_bps`` is outside 0..10000
    """
    if not 0 <= slippage_bps <= BPS_DENOMINATOR:
        raise ValueError(f"slippage_bps must be within 0..{BPS_DENOMINATOR}, got {slippage_bps}")
    return estimated_out * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


class DexClient(BaseClient):
    """VexiDEX pool operations against a Vexidus node."""

    def get_pool(self, token_a: str, token_b: str) -> PoolInfo:
        """Pool for a token pair."""
        result = self._call("vex_getPool", [token_a, token_b])
        try:
            return PoolInfo.model_validate(result)
        except ValidationError as e:
            raise RpcError("Malformed vex_getPool response", cause=e)

    def list_pools(self, limit: int = 100) -> List[PoolInfo]:
        result = self._call("vex_listPools", [limit])
        try:
            return [PoolInfo.model_validate(item) for item in (result or [])]
        except (ValidationError, TypeError) as e:
            raise RpcError("Malformed vex_listPools response", cause=e)

    def quote_swap(self, from_token: str, to_token: str, amount_in: int) -> SwapQuote:
        """
        Quote a swap without submitting anything.

        Args:
            from_token: Input token (``"VXS"`` or address)
            to_token: Output token
            amount_in: Raw input amount
        """
        result = self._call("vex_quoteSwap", [from_token, to_token, str(amount_in)])
        try:
            return SwapQuote.model_validate(result)
        except ValidationError as e:
            raise RpcError("Malformed vex_quoteSwap response", cause=e)

    def get_price(self, token_a: str, token_b: str) -> float:
        """Spot price of ``token_a`` in ``token_b`` (0.0 for an empty pool)."""
        pool = self.get_pool(token_a, token_b)
        try:
            reserve_a = float(pool.reserve_a)
            reserve_b = float(pool.reserve_b)
        except ValueError as e:
            raise RpcError("Pool reserves are not numeric", cause=e)
        if reserve_a == 0.0:
            return 0.0
        return reserve_b / reserve_a

    def swap(self, wallet: WalletKeypair, from_token: str, to_token: str,
             amount_in: int, slippage_bps: int) -> Any:
        """
        Quote, then build, sign and submit a swap.

        The minimum output is the quoted amount reduced by ``slippage_bps``.
        """
        quote = self.quote_swap(from_token, to_token, amount_in)
        try:
            estimated_out = int(quote.amount_out)
        except ValueError as e:
            raise RpcError(f"Quoted amount is not an integer: {quote.amount_out!r}", cause=e)
        min_out = min_amount_out(estimated_out, slippage_bps)
        logger.debug(f"Swap quote {estimated_out}, min_out {min_out} at {slippage_bps} bps")

        bundle = (self._builder(wallet)
                  .swap(from_token, to_token, amount_in, min_out)
                  .sign(wallet))
        return self.submit_bundle(bundle)

    def create_pool(self, wallet: WalletKeypair, token_a: str, token_b: str,
                    amount_a: int, amount_b: int, lp_lock_duration: int) -> Any:
        bundle = (self._builder(wallet)
                  .create_pool(token_a, token_b, amount_a, amount_b, lp_lock_duration)
                  .sign(wallet))
        return self.submit_bundle(bundle)

    def add_liquidity(self, wallet: WalletKeypair, token_a: str, token_b: str,
                      amount_a: int, amount_b: int, min_lp_tokens: int = 0) -> Any:
        bundle = (self._builder(wallet)
                  .add_liquidity(token_a, token_b, amount_a, amount_b, min_lp_tokens)
                  .sign(wallet))
        return self.submit_bundle(bundle)

    def remove_liquidity(self, wallet: WalletKeypair, token_a: str, token_b: str,
                         lp_amount: int, min_amount_a: int = 0, min_amount_b: int = 0) -> Any:
        bundle = (self._builder(wallet)
                  .remove_liquidity(token_a, token_b, lp_amount, min_amount_a, min_amount_b)
                  .sign(wallet))
        return self.submit_bundle(bundle)

    def _builder(self, wallet: WalletKeypair) -> BundleBuilder:
        sender = wallet.hex_address()
        return (BundleBuilder(sender)
                .nonce(self.get_nonce(sender))
                .valid_for(DEFAULT_VALIDITY_SECONDS))

    def submit_bundle(self, bundle: TransactionBundle) -> Any:
        """Submit a signed bundle as unprefixed hex."""
        return self._call("vex_submitBundle", [bundle.to_hex(prefix=False)])


__all__ = [
    "PoolInfo",
    "SwapQuote",
    "min_amount_out",
    "DexClient",
]
