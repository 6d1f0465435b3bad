r"""
Ed25519 cryptographic operations for Vexidus.

Thin wrappers over ``cryptography``'s Ed25519 keys that speak raw bytes:
32-byte seeds, 32-byte public keys, 64-byte signatures.
"""

from __future__ import annotations
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey
)
from cryptography.hazmat.primitives import serialization

from .entropy import EntropySource, SystemEntropy

KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


class Ed25519Error(Exception):
    """Base exception for Ed25519 operations."""
    pass


class Ed25519PublicKey:
    """
    Ed25519 public key.

    Provides verification operations and serialization.
    """

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize from 32-byte public key.

        Args:
            public_key_bytes: 32-byte Ed25519 public key

        Raises:
            Ed25519Error: If key is invalid
        """
        if len(public_key_bytes) != KEY_LENGTH:
            raise Ed25519Error(f"Ed25519 public key must be 32 bytes, got {len(public_key_bytes)}")

        self._key_bytes = bytes(public_key_bytes)
        try:
            self._crypto_key = CryptoEd25519PublicKey.from_public_bytes(self._key_bytes)
        except ValueError as e:
            raise Ed25519Error(f"Invalid Ed25519 public key: {e}")

    @classmethod
    def from_hex(cls, hex_string: str) -> Ed25519PublicKey:
        """Create public key from hex string (optional 0x prefix)."""
        if hex_string[:2] in ("0x", "0X"):
            hex_string = hex_string[2:]
        try:
            key_bytes = bytes.fromhex(hex_string)
        except ValueError as e:
            raise Ed25519Error(f"Invalid hex string: {e}")
        return cls(key_bytes)

    def to_bytes(self) -> bytes:
        """Get the 32-byte public key."""
        return self._key_bytes

    def to_hex(self) -> str:
        """Get the public key as hex string."""
        return self._key_bytes.hex()

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a signature against a message.

        Args:
            signature: 64-byte Ed25519 signature
            message: Message that was signed

        Returns:
            True if signature is valid
        """
        if len(signature) != SIGNATURE_LENGTH:
            return False
        try:
            self._crypto_key.verify(bytes(signature), message)
        except InvalidSignature:
            return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ed25519PublicKey):
            return False
        return self._key_bytes == other._key_bytes

    def __hash__(self) -> int:
        return hash(self._key_bytes)

    def __repr__(self) -> str:
        return f"Ed25519PublicKey.from_hex('{self.to_hex()}')"


class Ed25519PrivateKey:
    """
    Ed25519 private key.

    The seed never appears in ``str``/``repr`` output.
    """

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize from 32-byte private key seed.

        Args:
            private_key_bytes: 32-byte Ed25519 private key seed

        Raises:
            Ed25519Error: If key is invalid
        """
        if len(private_key_bytes) != KEY_LENGTH:
            raise Ed25519Error(f"Ed25519 private key must be 32 bytes, got {len(private_key_bytes)}")

        self._crypto_key = CryptoEd25519PrivateKey.from_private_bytes(bytes(private_key_bytes))
        self._public_key = Ed25519PublicKey(
            self._crypto_key.public_key().public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw
            )
        )

    @classmethod
    def generate(cls, entropy: Optional[EntropySource] = None) -> Ed25519PrivateKey:
        """
        Generate a new private key.

        Args:
            entropy: Seed source (defaults to the OS CSPRNG)
        """
        source = entropy or SystemEntropy()
        return cls(source.seed(KEY_LENGTH))

    def to_bytes(self) -> bytes:
        """Get the 32-byte private key seed."""
        return self._crypto_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )

    def public_key(self) -> Ed25519PublicKey:
        """Get the corresponding public key."""
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Args:
            message: Message to sign

        Returns:
            64-byte Ed25519 signature
        """
        return self._crypto_key.sign(message)

    def __repr__(self) -> str:
        return f"Ed25519PrivateKey(public={self._public_key.to_hex()})"


def verify_ed25519(public_key_bytes: bytes, signature: bytes, message: bytes) -> bool:
    """
    Verify an Ed25519 signature. Returns True if valid, False otherwise.

    Malformed public keys are reported as an invalid signature.
    """
    try:
        public_key = Ed25519PublicKey(public_key_bytes)
    except Ed25519Error:
        return False
    return public_key.verify(signature, message)


__all__ = [
    "KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "Ed25519Error",
    "Ed25519PublicKey",
    "Ed25519PrivateKey",
    "verify_ed25519",
]
