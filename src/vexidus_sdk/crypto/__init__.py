"""
Cryptographic primitives for Vexidus.

Provides Ed25519 signing and the randomness sources used for key generation.
"""

from .ed25519 import (
    Ed25519Error, Ed25519PrivateKey, Ed25519PublicKey, verify_ed25519,
    KEY_LENGTH, SIGNATURE_LENGTH,
)
from .entropy import EntropySource, SystemEntropy, FixedEntropy

__all__ = [
    "Ed25519Error",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "verify_ed25519",
    "KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "EntropySource",
    "SystemEntropy",
    "FixedEntropy",
]
