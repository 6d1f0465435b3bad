"""
Transaction bundles for Vexidus.

Bundle model, fluent builder and the hash/sign/verify authorization protocol.
"""

from .types import (
    Address,
    Hash,
    KeyType,
    KeyRole,
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
    OPERATION_TYPES,
    Operation,
    TransactionBundle,
)
from .hashing import canonical_hash, sign_bundle, verify_signature
from .builder import BundleBuilder

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
    "canonical_hash",
    "sign_bundle",
    "verify_signature",
    "BundleBuilder",
]
