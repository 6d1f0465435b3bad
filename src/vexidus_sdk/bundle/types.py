"""
Transaction bundle types for Vexidus.

A :class:`TransactionBundle` is the unit of authorization: a sender, an ordered
list of operations, fee and validity fields, a replay-protection nonce and a
signature slot. Operations form a closed tagged union discriminated by
``kind``; each variant declares its wire layout in ``WIRE_LAYOUT`` so the
binary codec can serialize it without per-type code.
"""

from enum import IntEnum
from typing import Annotated, Any, ClassVar, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field

from ..config import (
    ADDRESS_LENGTH, U16_MAX, U64_MAX, U128_MAX,
    DEFAULT_MAX_GAS, DEFAULT_MAX_PRIORITY_FEE, DEFAULT_NONCE,
)

Address = Annotated[bytes, Field(min_length=ADDRESS_LENGTH, max_length=ADDRESS_LENGTH)]
Hash = Annotated[bytes, Field(min_length=32, max_length=32)]
U8 = Annotated[int, Field(ge=0, le=255)]
U16 = Annotated[int, Field(ge=0, le=U16_MAX)]
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
U128 = Annotated[int, Field(ge=0, le=U128_MAX)]

# Wire layout: sequence of (field name, wire type)
WireLayout = Tuple[Tuple[str, str], ...]


class KeyType(IntEnum):
    """Signature scheme of a key registered on a smart account."""

    ED25519 = 0
    SECP256K1 = 1
    SECP256R1 = 2


class KeyRole(IntEnum):
    """Permission level of a key registered on a smart account."""

    OWNER = 0
    ADMIN = 1
    SESSION = 2
    RECOVERY = 3


class _Operation(BaseModel):
    """Common base for operation variants."""

    WIRE_LAYOUT: ClassVar[WireLayout] = ()

    model_config = {"frozen": True}


# Tokens

class Transfer(_Operation):
    """Move ``amount`` raw units of ``token`` to ``to``."""

    kind: Literal["transfer"] = "transfer"
    to: Address
    token: Address
    amount: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (("to", "address"), ("token", "address"), ("amount", "u128"))


# Smart account keys

class AddKey(_Operation):
    kind: Literal["add_key"] = "add_key"
    pubkey: bytes
    key_type: KeyType
    role: KeyRole

    WIRE_LAYOUT: ClassVar[WireLayout] = (("pubkey", "bytes"), ("key_type", "u8"), ("role", "u8"))


class RemoveKey(_Operation):
    kind: Literal["remove_key"] = "remove_key"
    pubkey_hash: Hash

    WIRE_LAYOUT: ClassVar[WireLayout] = (("pubkey_hash", "hash"),)


class RotateKey(_Operation):
    kind: Literal["rotate_key"] = "rotate_key"
    old_pubkey_hash: Hash
    new_pubkey: bytes
    new_key_type: KeyType

    WIRE_LAYOUT: ClassVar[WireLayout] = (
        ("old_pubkey_hash", "hash"), ("new_pubkey", "bytes"), ("new_key_type", "u8"),
    )


# Staking

class Stake(_Operation):
    """Register as a validator by bonding ``amount``."""

    kind: Literal["stake"] = "stake"
    amount: U128
    validator_pubkey: bytes

    WIRE_LAYOUT: ClassVar[WireLayout] = (("amount", "u128"), ("validator_pubkey", "bytes"))


class Unstake(_Operation):
    """Begin unbonding ``amount``."""

    kind: Literal["unstake"] = "unstake"
    amount: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (("amount", "u128"),)


class ClaimUnstake(_Operation):
    kind: Literal["claim_unstake"] = "claim_unstake"


class Delegate(_Operation):
    kind: Literal["delegate"] = "delegate"
    validator: Address
    amount: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (("validator", "address"), ("amount", "u128"))


class Undelegate(_Operation):
    kind: Literal["undelegate"] = "undelegate"
    validator: Address
    amount: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (("validator", "address"), ("amount", "u128"))


class ClaimRewards(_Operation):
    kind: Literal["claim_rewards"] = "claim_rewards"


class SetCommission(_Operation):
    """Validator commission in basis points."""

    kind: Literal["set_commission"] = "set_commission"
    rate: U16

    WIRE_LAYOUT: ClassVar[WireLayout] = (("rate", "u16"),)


class Unjail(_Operation):
    kind: Literal["unjail"] = "unjail"


class SetValidatorMetadata(_Operation):
    kind: Literal["set_validator_metadata"] = "set_validator_metadata"
    name: str
    description: str
    website: str
    avatar_url: str

    WIRE_LAYOUT: ClassVar[WireLayout] = (
        ("name", "string"), ("description", "string"),
        ("website", "string"), ("avatar_url", "string"),
    )


# DEX

class CreatePool(_Operation):
    kind: Literal["create_pool"] = "create_pool"
    token_a: Address
    token_b: Address
    amount_a: U128
    amount_b: U128
    lp_lock_duration: U64

    WIRE_LAYOUT: ClassVar[WireLayout] = (
        ("token_a", "address"), ("token_b", "address"),
        ("amount_a", "u128"), ("amount_b", "u128"), ("lp_lock_duration", "u64"),
    )


class AddLiquidity(_Operation):
    kind: Literal["add_liquidity"] = "add_liquidity"
    token_a: Address
    token_b: Address
    amount_a: U128
    amount_b: U128
    min_lp_tokens: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (
        ("token_a", "address"), ("token_b", "address"),
        ("amount_a", "u128"), ("amount_b", "u128"), ("min_lp_tokens", "u128"),
    )


class RemoveLiquidity(_Operation):
    kind: Literal["remove_liquidity"] = "remove_liquidity"
    token_a: Address
    token_b: Address
    lp_amount: U128
    min_amount_a: U128
    min_amount_b: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (
        ("token_a", "address"), ("token_b", "address"),
        ("lp_amount", "u128"), ("min_amount_a", "u128"), ("min_amount_b", "u128"),
    )


class Swap(_Operation):
    kind: Literal["swap"] = "swap"
    from_token: Address
    to_token: Address
    amount_in: U128
    min_amount_out: U128

    WIRE_LAYOUT: ClassVar[WireLayout] = (
        ("from_token", "address"), ("to_token", "address"),
        ("amount_in", "u128"), ("min_amount_out", "u128"),
    )


# Variant order is the wire discriminant; append only.
OPERATION_TYPES: Tuple[type, ...] = (
    Transfer,
    AddKey,
    RemoveKey,
    RotateKey,
    Stake,
    Unstake,
    ClaimUnstake,
    Delegate,
    Undelegate,
    ClaimRewards,
    SetCommission,
    Unjail,
    SetValidatorMetadata,
    CreatePool,
    AddLiquidity,
    RemoveLiquidity,
    Swap,
)

Operation = Annotated[
    Union[
        Transfer, AddKey, RemoveKey, RotateKey,
        Stake, Unstake, ClaimUnstake, Delegate, Undelegate, ClaimRewards,
        SetCommission, Unjail, SetValidatorMetadata,
        CreatePool, AddLiquidity, RemoveLiquidity, Swap,
    ],
    Field(discriminator="kind"),
]


class TransactionBundle(BaseModel):
    """
    A multi-operation transaction.

    Fields are validated on assignment, so a bundle can be adjusted after
    building; any such change invalidates an existing signature.
    """

    user_account: Address
    operations: List[Operation] = Field(default_factory=list)
    max_gas: U64 = DEFAULT_MAX_GAS
    max_priority_fee: U64 = DEFAULT_MAX_PRIORITY_FEE
    valid_until: U64
    nonce: U64 = DEFAULT_NONCE
    signature: bytes = b""
    expiry_timestamp: Optional[U64] = None

    model_config = {"validate_assignment": True}

    @property
    def is_signed(self) -> bool:
        """True if a signature is attached."""
        return len(self.signature) > 0

    def hash(self) -> bytes:
        """Canonical 32-byte hash of the unsigned content."""
        # Import here to avoid circular imports
        from .hashing import canonical_hash
        return canonical_hash(self)

    def verify_signature(self, public_key: Any) -> bool:
        """Check the attached signature against the current content."""
        from .hashing import verify_signature
        return verify_signature(self, public_key)

    def to_bytes(self) -> bytes:
        """Wire encoding including the signature."""
        from ..codec.bundle_codec import encode_bundle
        return encode_bundle(self)

    def to_hex(self, prefix: bool = True) -> str:
        """Hex wire encoding, ``0x``-prefixed unless ``prefix`` is False."""
        from ..codec.bundle_codec import bundle_to_hex
        return bundle_to_hex(self, prefix=prefix)

    def __repr__(self) -> str:
        return (
            f"TransactionBundle(user_account=0x{self.user_account.hex()}, "
            f"operations={len(self.operations)}, nonce={self.nonce}, signed={self.is_signed})"
        )


__all__ = [
    "Address",
    "Hash",
    "KeyType",
    "KeyRole",
    "Transfer",
    "AddKey",
    "RemoveKey",
    "RotateKey",
    "Stake",
    "Unstake",
    "ClaimUnstake",
    "Delegate",
    "Undelegate",
    "ClaimRewards",
    "SetCommission",
    "Unjail",
    "SetValidatorMetadata",
    "CreatePool",
    "AddLiquidity",
    "RemoveLiquidity",
    "Swap",
    "OPERATION_TYPES",
    "Operation",
    "TransactionBundle",
]
