"""
Key management for Vexidus.

Wallet and validator keypairs with key-file persistence.
"""

from .keypair import KEY_FILE_MODE, Keypair, WalletKeypair, ValidatorKeypair

__all__ = [
    "KEY_FILE_MODE",
    "Keypair",
    "WalletKeypair",
    "ValidatorKeypair",
]
