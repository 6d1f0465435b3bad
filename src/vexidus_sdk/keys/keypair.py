"""
Keypairs for Vexidus.

A keypair owns one 32-byte Ed25519 secret. Its canonical address is the raw
32-byte public key; the ``Vx0`` and hex forms are derived through the address
codec. Key files hold the secret as 64 lowercase hex characters and are
created readable by the owner only.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..address import encode_from_public_key, to_hex_evm, to_hex_full
from ..config import HEX_PREFIX, U64_MAX
from ..crypto.ed25519 import KEY_LENGTH, Ed25519PrivateKey, Ed25519PublicKey
from ..crypto.entropy import EntropySource
from ..runtime.errors import InvalidVoteError, KeyFormatError, KeyHexDecodeError, KeyIoError

logger = logging.getLogger(__name__)

KEY_FILE_MODE = 0o600


class Keypair:
    """
    Ed25519 keypair with key-file persistence.

    Construct through the class methods; every loader returns a new instance.
    """

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self._public_key = private_key.public_key()

    @classmethod
    def generate(cls, entropy: Optional[EntropySource] = None) -> Keypair:
        """
        Generate a new random keypair.

        Args:
            entropy: Seed source (defaults to the OS CSPRNG)
        """
        return cls(Ed25519PrivateKey.generate(entropy))

    @classmethod
    def from_secret_bytes(cls, secret: bytes) -> Keypair:
        """
        Create a keypair from a 32-byte secret.

        Raises:
            KeyFormatError: If the secret is not exactly 32 bytes
        """
        if len(secret) != KEY_LENGTH:
            raise KeyFormatError(
                f"Secret key must be {KEY_LENGTH} bytes, got {len(secret)}",
                details={"observed_length": len(secret)},
            )
        return cls(Ed25519PrivateKey(bytes(secret)))

    @classmethod
    def from_secret_hex(cls, hex_str: str) -> Keypair:
        """
        Create a keypair from a hex-encoded secret.

        Surrounding whitespace is ignored; whitespace inside the string is not.

        Raises:
            KeyHexDecodeError: If the string is not valid hex
            KeyFormatError: If it does not decode to 32 bytes
        """
        hex_str = hex_str.strip()
        if any(c.isspace() for c in hex_str):
            raise KeyHexDecodeError("Secret key is not valid hex: contains whitespace")
        try:
            secret = bytes.fromhex(hex_str)
        except ValueError as e:
            raise KeyHexDecodeError("Secret key is not valid hex", cause=e)
        return cls.from_secret_bytes(secret)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Keypair:
        """
        Load a keypair from a key file.

        Args:
            path: File containing the hex secret

        Raises:
            KeyIoError: If the file cannot be read
            KeyHexDecodeError: If the contents are not valid hex
            KeyFormatError: If the contents do not decode to 32 bytes
        """
        path = Path(path)
        try:
            contents = path.read_text()
        except OSError as e:
            raise KeyIoError(f"Cannot read key file {path}", cause=e)
        keypair = cls.from_secret_hex(contents)
        logger.debug(f"Loaded key {keypair.public_key_hex()} from {path}")
        return keypair

    def save(self, path: Union[str, Path]) -> None:
        """
        Write the secret to a key file, owner read/write only.

        Raises:
            KeyIoError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.write_text(self._private_key.to_bytes().hex())
            if os.name == "posix":
                os.chmod(path, KEY_FILE_MODE)
        except OSError as e:
            raise KeyIoError(f"Cannot write key file {path}", cause=e)
        logger.debug(f"Saved key {self.public_key_hex()} to {path}")

    def public_key_bytes(self) -> bytes:
        """The 32-byte public key."""
        return self._public_key.to_bytes()

    def public_key(self) -> Ed25519PublicKey:
        return self._public_key

    def public_key_hex(self) -> str:
        """Public key as ``0x`` + 64 hex characters."""
        return f"{HEX_PREFIX}{self._public_key.to_hex()}"

    def address(self) -> bytes:
        """Canonical 32-byte address (the public key itself)."""
        return self.public_key_bytes()

    def sign(self, message: bytes) -> bytes:
        """
        Sign arbitrary bytes.

        Args:
            message: Message to sign

        Returns:
            64-byte Ed25519 signature
        """
        return self._private_key.sign(message)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verify a signature made by this keypair."""
        return self._public_key.verify(signature, message)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Keypair):
            return False
        return self._public_key == other._public_key

    def __hash__(self) -> int:
        return hash(self._public_key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(public_key={self.public_key_hex()})"


class WalletKeypair(Keypair):
    """
    Keypair for a wallet account.

    Adds the human-facing address forms and bundle signing.
    """

    def vx0_address(self) -> str:
        """Checksummed ``Vx0`` address."""
        return encode_from_public_key(self.public_key_bytes())

    def hex_address(self) -> str:
        """``0x`` + 64 hex form of :meth:`vx0_address`."""
        return to_hex_full(self.vx0_address())

    def evm_address(self) -> str:
        """``0x`` + 40 hex form of :meth:`vx0_address`."""
        return to_hex_evm(self.vx0_address())

    def sign_bundle(self, bundle) -> bytes:
        """
        Sign a bundle's canonical hash.

        The bundle is not modified; assign the result to ``bundle.signature``.
        """
        # Import here to avoid circular imports
        from ..bundle.hashing import sign_bundle
        return sign_bundle(bundle, self)

    def __repr__(self) -> str:
        return f"WalletKeypair(address={self.vx0_address()})"


class ValidatorKeypair(Keypair):
    """Keypair for a validator node's consensus identity."""

    def sign_vote(self, block_hash: bytes, vote_type: int, epoch: int) -> bytes:
        """
        Sign a consensus vote.

        The signed message is ``block_hash || vote_type || epoch`` with the
        epoch as 8 little-endian bytes.

        Args:
            block_hash: 32-byte block hash
            vote_type: Vote kind (u8)
            epoch: Epoch number (u64)

        Returns:
            64-byte Ed25519 signature

        Raises:
            InvalidVoteError: If any argument is out of range
        """
        if len(block_hash) != 32:
            raise InvalidVoteError(f"Block hash must be 32 bytes, got {len(block_hash)}",
                                   details={"observed_length": len(block_hash)})
        if isinstance(vote_type, bool) or not isinstance(vote_type, int) or not 0 <= vote_type <= 0xFF:
            raise InvalidVoteError(f"Vote type must be an unsigned 8-bit integer, got {vote_type!r}")
        if isinstance(epoch, bool) or not isinstance(epoch, int) or not 0 <= epoch <= U64_MAX:
            raise InvalidVoteError(f"Epoch must be an unsigned 64-bit integer, got {epoch!r}")
        message = bytes(block_hash) + bytes([vote_type]) + epoch.to_bytes(8, "little")
        return self.sign(message)


__all__ = [
    "KEY_FILE_MODE",
    "Keypair",
    "WalletKeypair",
    "ValidatorKeypair",
]
