"""
Transaction bundle builder for Vexidus.

Accumulates operations and bundle settings, resolving every address and token
argument through the address codec at call time, and produces an unsigned or
signed :class:`~vexidus_sdk.bundle.types.TransactionBundle`.
"""

import logging
import time
from typing import Any, List, Optional

from pydantic import ValidationError

from ..address import parse_any, parse_token
from ..config import (
    DEFAULT_MAX_GAS, DEFAULT_MAX_PRIORITY_FEE, DEFAULT_NONCE, DEFAULT_VALIDITY_SECONDS,
    CREATE_POOL_GAS_FLOOR, LIQUIDITY_GAS_FLOOR, U64_MAX,
)
from ..runtime.errors import (
    AddressError, BundleAddressError, BundleArgumentError, NoOperationsError,
)
from .hashing import sign_bundle
from .types import (
    AddKey, AddLiquidity, ClaimRewards, ClaimUnstake, CreatePool, Delegate, KeyRole,
    KeyType, Operation, RemoveKey, RemoveLiquidity, RotateKey, SetCommission,
    SetValidatorMetadata, Stake, Swap, TransactionBundle, Transfer, Undelegate, Unjail,
    Unstake,
)

logger = logging.getLogger(__name__)


def _resolve_address(value: str, argument: str) -> bytes:
    try:
        return parse_any(value)
    except AddressError as e:
        raise BundleAddressError(f"Invalid {argument} address: {value!r}",
                                 details={"argument": argument}, cause=e)


def _resolve_token(value: str, argument: str) -> bytes:
    try:
        return parse_token(value)
    except AddressError as e:
        raise BundleAddressError(f"Invalid {argument} token: {value!r}",
                                 details={"argument": argument}, cause=e)


def _check_u64(value: Any, argument: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
        raise BundleArgumentError(f"Invalid {argument}: {value!r} is not an unsigned 64-bit integer",
                                  details={"argument": argument})
    return value


def _make(operation_type: type, **fields: Any) -> Operation:
    try:
        return operation_type(**fields)
    except ValidationError as e:
        arguments = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise BundleArgumentError(f"Invalid {operation_type.__name__} arguments: {', '.join(arguments)}",
                                  details={"operation": operation_type.__name__, "arguments": arguments},
                                  cause=e)


class BundleBuilder:
    """
    Fluent builder for transaction bundles.

    Every method returns the builder so calls can be chained::

        bundle = (BundleBuilder(wallet.vx0_address())
                  .transfer(recipient, "VXS", 1_000_000_000)
                  .nonce(5)
                  .sign(wallet))

    A method that fails to resolve an address raises
    :class:`BundleAddressError`, and one given an out-of-range amount or
    setting raises :class:`BundleArgumentError`. Both are raised before any
    state changes, so earlier operations and settings are kept.
    """

    def __init__(self, sender: str):
        """
        Initialize builder for a sender.

        Args:
            sender: Sender address in any supported format

        Raises:
            BundleAddressError: If the sender cannot be parsed
        """
        self._sender = _resolve_address(sender, "sender")
        self._operations: List[Operation] = []
        self._max_gas = DEFAULT_MAX_GAS
        self._max_priority_fee = DEFAULT_MAX_PRIORITY_FEE
        self._valid_until = int(time.time()) + DEFAULT_VALIDITY_SECONDS
        self._nonce = DEFAULT_NONCE
        self._expiry_timestamp: Optional[int] = None
        logger.debug(f"BundleBuilder created for sender 0x{self._sender.hex()}")

    def _push(self, operation: Operation) -> "BundleBuilder":
        self._operations.append(operation)
        logger.debug(f"Added {operation.kind} operation (#{len(self._operations)})")
        return self

    @property
    def sender(self) -> bytes:
        """Resolved 32-byte sender address."""
        return self._sender

    @property
    def operation_count(self) -> int:
        """Number of operations accumulated so far."""
        return len(self._operations)

    # Tokens

    def transfer(self, to: str, token: str, amount: int) -> "BundleBuilder":
        """
        Add a token transfer.

        Args:
            to: Recipient address in any supported format
            token: Token address, or ``"VXS"`` for the native token
            amount: Raw token units
        """
        to_addr = _resolve_address(to, "recipient")
        token_addr = _resolve_token(token, "transfer")
        return self._push(_make(Transfer, to=to_addr, token=token_addr, amount=amount))

    # Smart account keys

    def add_key(self, pubkey: bytes, key_type: KeyType, role: KeyRole) -> "BundleBuilder":
        """Register an additional key on the sender's account."""
        return self._push(_make(AddKey, pubkey=pubkey, key_type=key_type, role=role))

    def remove_key(self, pubkey_hash: bytes) -> "BundleBuilder":
        return self._push(_make(RemoveKey, pubkey_hash=pubkey_hash))

    def rotate_key(self, old_pubkey_hash: bytes, new_pubkey: bytes,
                   new_key_type: KeyType) -> "BundleBuilder":
        """Replace the key identified by ``old_pubkey_hash``."""
        return self._push(_make(RotateKey,
            old_pubkey_hash=old_pubkey_hash,
            new_pubkey=new_pubkey,
            new_key_type=new_key_type,
        ))

    # Staking

    def stake(self, amount: int, validator_pubkey: bytes) -> "BundleBuilder":
        """Bond ``amount`` and register ``validator_pubkey`` as a validator."""
        return self._push(_make(Stake, amount=amount, validator_pubkey=validator_pubkey))

    def unstake(self, amount: int) -> "BundleBuilder":
        return self._push(_make(Unstake, amount=amount))

    def claim_unstake(self) -> "BundleBuilder":
        return self._push(_make(ClaimUnstake))

    def delegate(self, validator: str, amount: int) -> "BundleBuilder":
        """
        Delegate stake to a validator.

        Args:
            validator: Validator address in any supported format
            amount: Raw units to delegate
        """
        validator_addr = _resolve_address(validator, "validator")
        return self._push(_make(Delegate, validator=validator_addr, amount=amount))

    def undelegate(self, validator: str, amount: int) -> "BundleBuilder":
        validator_addr = _resolve_address(validator, "validator")
        return self._push(_make(Undelegate, validator=validator_addr, amount=amount))

    def claim_rewards(self) -> "BundleBuilder":
        return self._push(_make(ClaimRewards))

    def set_commission(self, rate: int) -> "BundleBuilder":
        """Set validator commission in basis points."""
        return self._push(_make(SetCommission, rate=rate))

    def unjail(self) -> "BundleBuilder":
        return self._push(_make(Unjail))

    def set_validator_metadata(self, name: str, description: str, website: str,
                               avatar_url: str) -> "BundleBuilder":
        return self._push(_make(SetValidatorMetadata,
            name=name, description=description, website=website, avatar_url=avatar_url,
        ))

    # DEX

    def create_pool(self, token_a: str, token_b: str, amount_a: int, amount_b: int,
                    lp_lock_duration: int) -> "BundleBuilder":
        """
        Create a liquidity pool with initial reserves.

        Raises ``max_gas`` to at least the pool-creation floor.
        """
        addr_a = _resolve_token(token_a, "token_a")
        addr_b = _resolve_token(token_b, "token_b")
        self._push(_make(CreatePool,
            token_a=addr_a, token_b=addr_b,
            amount_a=amount_a, amount_b=amount_b,
            lp_lock_duration=lp_lock_duration,
        ))
        self._max_gas = max(self._max_gas, CREATE_POOL_GAS_FLOOR)
        return self

    def add_liquidity(self, token_a: str, token_b: str, amount_a: int, amount_b: int,
                      min_lp_tokens: int) -> "BundleBuilder":
        """Add liquidity; raises ``max_gas`` to at least the liquidity floor."""
        addr_a = _resolve_token(token_a, "token_a")
        addr_b = _resolve_token(token_b, "token_b")
        self._push(_make(AddLiquidity,
            token_a=addr_a, token_b=addr_b,
            amount_a=amount_a, amount_b=amount_b,
            min_lp_tokens=min_lp_tokens,
        ))
        self._max_gas = max(self._max_gas, LIQUIDITY_GAS_FLOOR)
        return self

    def remove_liquidity(self, token_a: str, token_b: str, lp_amount: int,
                         min_amount_a: int, min_amount_b: int) -> "BundleBuilder":
        """Remove liquidity; raises ``max_gas`` to at least the liquidity floor."""
        addr_a = _resolve_token(token_a, "token_a")
        addr_b = _resolve_token(token_b, "token_b")
        self._push(_make(RemoveLiquidity,
            token_a=addr_a, token_b=addr_b,
            lp_amount=lp_amount,
            min_amount_a=min_amount_a, min_amount_b=min_amount_b,
        ))
        self._max_gas = max(self._max_gas, LIQUIDITY_GAS_FLOOR)
        return self

    def swap(self, from_token: str, to_token: str, amount_in: int,
             min_amount_out: int) -> "BundleBuilder":
        """
        Swap ``amount_in`` of ``from_token`` for at least ``min_amount_out``
        of ``to_token``.
        """
        from_addr = _resolve_token(from_token, "from_token")
        to_addr = _resolve_token(to_token, "to_token")
        return self._push(_make(Swap,
            from_token=from_addr, to_token=to_addr,
            amount_in=amount_in, min_amount_out=min_amount_out,
        ))

    # Settings

    # Each setter raises BundleArgumentError for a value outside u64 and
    # leaves the previous setting in place.

    def nonce(self, n: int) -> "BundleBuilder":
        """Set the replay-protection nonce."""
        self._nonce = _check_u64(n, "nonce")
        return self

    def max_gas(self, gas: int) -> "BundleBuilder":
        """Set the gas limit. A later pool or liquidity operation may raise it."""
        self._max_gas = _check_u64(gas, "max_gas")
        return self

    def max_priority_fee(self, fee: int) -> "BundleBuilder":
        self._max_priority_fee = _check_u64(fee, "max_priority_fee")
        return self

    def valid_for(self, seconds: int) -> "BundleBuilder":
        """Expire the bundle ``seconds`` from now."""
        _check_u64(seconds, "valid_for")
        self._valid_until = _check_u64(int(time.time()) + seconds, "valid_until")
        return self

    def valid_until(self, timestamp: int) -> "BundleBuilder":
        """Expire the bundle at an absolute unix timestamp."""
        self._valid_until = _check_u64(timestamp, "valid_until")
        return self

    def expiry(self, timestamp: Optional[int]) -> "BundleBuilder":
        """Set the legacy ``expiry_timestamp`` field; ``None`` clears it."""
        self._expiry_timestamp = None if timestamp is None else _check_u64(timestamp, "expiry")
        return self

    # Finalization

    def build(self) -> TransactionBundle:
        """
        Build an unsigned bundle.

        Returns:
            Bundle with an empty signature

        Raises:
            NoOperationsError: If no operation was added
        """
        if not self._operations:
            raise NoOperationsError()

        bundle = TransactionBundle(
            user_account=self._sender,
            operations=list(self._operations),
            max_gas=self._max_gas,
            max_priority_fee=self._max_priority_fee,
            valid_until=self._valid_until,
            nonce=self._nonce,
            expiry_timestamp=self._expiry_timestamp,
        )
        logger.debug(f"Built bundle with {len(bundle.operations)} operations, "
                     f"nonce={bundle.nonce}, max_gas={bundle.max_gas}")
        return bundle

    def sign(self, keypair) -> TransactionBundle:
        """
        Build the bundle and sign it.

        Args:
            keypair: Signing keypair (``WalletKeypair`` or compatible)

        Returns:
            Bundle carrying a signature over its canonical hash

        Raises:
            NoOperationsError: If no operation was added
        """
        bundle = self.build()
        bundle.signature = sign_bundle(bundle, keypair)
        return bundle


__all__ = [
    "BundleBuilder",
]
