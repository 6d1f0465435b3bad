"""
Checksummed address encoding contract.

The human-facing ``Vx0`` format is ``tag + base58(payload || checksum)``. The
codec in :mod:`vexidus_sdk.address.codec` only relies on the three operations
of :class:`ChecksumCodec`, so the checksum algorithm can be swapped (or faked
in tests) without touching the right-alignment and dispatch rules.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import hashlib
from typing import Tuple

import base58

from ..config import ADDRESS_TAG, LEGACY_ADDRESS_TAG, EVM_ADDRESS_LENGTH
from ..runtime.errors import InvalidFormatError, ChecksumFailedError

CHECKSUM_LENGTH = 4

_BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


class ChecksumCodec(ABC):
    """
    Abstract checksum codec for human-facing addresses.

    Implementations must be pure: the same input always gives the same output.
    """

    #: Tags accepted when parsing. The first one is the tag produced on encode.
    tags: Tuple[str, ...] = (ADDRESS_TAG, LEGACY_ADDRESS_TAG)

    @abstractmethod
    def is_valid(self, address: str) -> bool:
        """
        Check the shape of an address string (tag, alphabet, length).

        Args:
            address: Candidate address string

        Returns:
            True if the string is shaped like an address
        """
        pass

    @abstractmethod
    def decode(self, address: str) -> bytes:
        """
        Extract the payload after verifying the embedded checksum.

        Args:
            address: Address string including its tag

        Returns:
            Payload bytes

        Raises:
            InvalidFormatError: If the body cannot be decoded at all
            ChecksumFailedError: If the checksum does not match
        """
        pass

    @abstractmethod
    def encode_public_key(self, public_key: bytes) -> str:
        """
        Derive the tagged, checksummed address string for a public key.

        Args:
            public_key: 32-byte Ed25519 public key

        Returns:
            Address string starting with the current tag
        """
        pass

    def split_tag(self, address: str) -> Tuple[str, str]:
        """Split an address into ``(tag, body)``; raises InvalidFormatError on unknown tag."""
        for tag in self.tags:
            if address.startswith(tag):
                return tag, address[len(tag):]
        raise InvalidFormatError(
            f"Address must start with one of {', '.join(self.tags)}: {address}"
        )


class Base58CheckCodec(ChecksumCodec):
    """
    Base58 with a double SHA-256 checksum.

    payload  = SHA256(public_key)[:20]
    checksum = SHA256(SHA256(payload))[:4]
    address  = "Vx0" + base58(payload || checksum)
    """

    @staticmethod
    def checksum(payload: bytes) -> bytes:
        """First four bytes of the double SHA-256 of the payload."""
        return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:CHECKSUM_LENGTH]

    @staticmethod
    def payload_from_public_key(public_key: bytes) -> bytes:
        """The 20-byte address payload derived from a public key."""
        return hashlib.sha256(public_key).digest()[:EVM_ADDRESS_LENGTH]

    def encode_payload(self, payload: bytes) -> str:
        """Encode a raw payload under the current tag."""
        body = base58.b58encode(payload + self.checksum(payload)).decode("ascii")
        return f"{self.tags[0]}{body}"

    def encode_public_key(self, public_key: bytes) -> str:
        return self.encode_payload(self.payload_from_public_key(public_key))

    def is_valid(self, address: str) -> bool:
        if not isinstance(address, str):
            return False
        try:
            _, body = self.split_tag(address)
        except InvalidFormatError:
            return False
        if not body:
            return False
        return all(c in _BASE58_CHARS for c in body)

    def decode(self, address: str) -> bytes:
        _, body = self.split_tag(address)
        try:
            raw = base58.b58decode(body)
        except ValueError as e:
            raise InvalidFormatError(f"Invalid base58 body: {address}", cause=e)

        if len(raw) <= CHECKSUM_LENGTH:
            raise InvalidFormatError(
                f"Address body too short: {len(raw)} bytes",
                details={"observed_length": len(raw)},
            )

        payload, check = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
        if self.checksum(payload) != check:
            raise ChecksumFailedError(f"Checksum mismatch for address {address}")
        return payload


__all__ = [
    "CHECKSUM_LENGTH",
    "ChecksumCodec",
    "Base58CheckCodec",
]
