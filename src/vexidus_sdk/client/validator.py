"""
Validator client for Vexidus.

Read-only staking queries. Staking actions are submitted as signed bundles
built with :class:`~vexidus_sdk.bundle.builder.BundleBuilder`.
"""

from typing import Any

from ..config import NATIVE_TOKEN_SYMBOL
from .base import BaseClient


class ValidatorClient(BaseClient):
    """Staking and validator queries against a Vexidus node."""

    def get_delegations(self, address: str) -> Any:
        """Delegations held by ``address`` as delegator."""
        return self._call("vex_getDelegations", [address])

    def get_validator(self, address: str) -> Any:
        return self._call("vex_getValidator", [address])

    def list_validators(self, limit: int = 100) -> Any:
        """Active validators, at most ``limit``."""
        return self._call("vex_listValidators", [limit])

    def staking_info(self) -> Any:
        """Network-wide staking totals."""
        return self._call("vex_stakingInfo", [])

    def get_balance(self, address: str) -> Any:
        """Native token balance of ``address``."""
        return self._call("vex_getBalance", [address, NATIVE_TOKEN_SYMBOL])


__all__ = [
    "ValidatorClient",
]
