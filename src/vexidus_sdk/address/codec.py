"""
Address conversion for Vexidus's dual-format address system.

Vexidus addresses come in three textual forms:

- ``Vx0...`` (native, legacy ``Vx1...``): base58 with checksum, 20-byte payload
- ``0x`` + 40 hex chars: 20-byte EVM-compatible form
- ``0x`` + 64 hex chars: full 32-byte internal form

Internally every address is 32 bytes. A 20-byte payload is right-aligned, so
the leading 12 bytes are zero and the EVM view is simply the last 20 bytes.
"""

from __future__ import annotations
import string
from typing import Optional

from ..config import (
    ADDRESS_LENGTH, EVM_ADDRESS_LENGTH, NATIVE_TOKEN_SYMBOL,
)
from ..runtime.errors import AddressError, InvalidFormatError
from .contract import ChecksumCodec, Base58CheckCodec

ZERO_ADDRESS = bytes(ADDRESS_LENGTH)

_HEX_DIGITS = frozenset(string.hexdigits)


def right_align(payload: bytes) -> bytes:
    """
    Place a payload in the trailing bytes of a zero-filled 32-byte address.

    Raises:
        InvalidFormatError: If the payload is longer than 32 bytes
    """
    if len(payload) > ADDRESS_LENGTH:
        raise InvalidFormatError(
            f"Address payload too long: expected at most {ADDRESS_LENGTH} bytes, got {len(payload)}",
            details={"observed_length": len(payload)},
        )
    return bytes(ADDRESS_LENGTH - len(payload)) + payload


def address_to_hex(address: bytes) -> str:
    """Render a 32-byte address as ``0x`` + 64 lowercase hex chars."""
    _check_address(address)
    return "0x" + address.hex()


def address_to_evm(address: bytes) -> str:
    """Render the EVM-visible tail (last 20 bytes) of a 32-byte address."""
    _check_address(address)
    return "0x" + address[-EVM_ADDRESS_LENGTH:].hex()


def _check_address(address: bytes) -> None:
    if not isinstance(address, (bytes, bytearray)) or len(address) != ADDRESS_LENGTH:
        raise InvalidFormatError(f"Address must be {ADDRESS_LENGTH} bytes")


def _strip_hex_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def _is_hex(value: str) -> bool:
    return len(value) % 2 == 0 and all(c in _HEX_DIGITS for c in value)


class AddressCodec:
    """
    Format detection, decoding and encoding for Vexidus addresses.

    The checksum algorithm of the human-facing form is delegated to a
    :class:`ChecksumCodec`; this class owns tag dispatch and right-alignment.
    """

    def __init__(self, contract: Optional[ChecksumCodec] = None):
        """
        Initialize the codec.

        Args:
            contract: Checksum codec to delegate to (defaults to Base58CheckCodec)
        """
        self.contract = contract or Base58CheckCodec()

    @property
    def tag(self) -> str:
        """The tag produced when encoding."""
        return self.contract.tags[0]

    def has_native_tag(self, value: str) -> bool:
        """True if the string starts with any accepted human-facing tag."""
        return any(value.startswith(tag) for tag in self.contract.tags)

    # Human-facing form

    def encode_from_public_key(self, public_key: bytes) -> str:
        """
        Derive the ``Vx0`` address of a 32-byte public key.

        Raises:
            InvalidFormatError: If the key is not 32 bytes
        """
        if len(public_key) != ADDRESS_LENGTH:
            raise InvalidFormatError(
                f"Public key must be {ADDRESS_LENGTH} bytes, got {len(public_key)}",
                details={"observed_length": len(public_key)},
            )
        return self.contract.encode_public_key(bytes(public_key))

    def decode_human_facing(self, value: str) -> bytes:
        """
        Decode a ``Vx0``/``Vx1`` address to its 32-byte form.

        Raises:
            InvalidFormatError: If the string is not shaped like an address
            ChecksumFailedError: If the checksum does not match
        """
        if not isinstance(value, str) or not self.has_native_tag(value):
            raise InvalidFormatError(
                f"Address must start with one of {', '.join(self.contract.tags)}: {value}"
            )
        if not self.contract.is_valid(value):
            raise InvalidFormatError(f"Malformed address: {value}")
        payload = self.contract.decode(value)
        return right_align(payload)

    def to_hex_full(self, value: str) -> str:
        """Convert a ``Vx0`` address to ``0x`` + 64 hex chars."""
        return address_to_hex(self.decode_human_facing(value))

    def to_hex_evm(self, value: str) -> str:
        """Convert a ``Vx0`` address to its 20-byte EVM form (what EVM wallets display)."""
        return address_to_evm(self.decode_human_facing(value))

    def is_valid_human_facing(self, value: str) -> bool:
        """True only if the string is well-formed and its checksum verifies."""
        if not isinstance(value, str) or not self.contract.is_valid(value):
            return False
        try:
            self.decode_human_facing(value)
        except AddressError:
            return False
        return True

    # Hex forms

    @staticmethod
    def is_valid_hex(value: str) -> bool:
        """True if the string (optional ``0x``) is exactly 40 or 64 hex chars."""
        if not isinstance(value, str):
            return False
        stripped = _strip_hex_prefix(value)
        return len(stripped) in (2 * EVM_ADDRESS_LENGTH, 2 * ADDRESS_LENGTH) and _is_hex(stripped)

    @staticmethod
    def decode_hex(value: str) -> bytes:
        """
        Decode a ``0x`` address; 20 bytes are right-aligned, 32 used verbatim.

        Raises:
            InvalidFormatError: On malformed hex or any other decoded length
        """
        hex_str = _strip_hex_prefix(value)
        if not _is_hex(hex_str):
            raise InvalidFormatError(f"Invalid hex address: {value}")
        raw = bytes.fromhex(hex_str)
        if len(raw) == EVM_ADDRESS_LENGTH:
            return right_align(raw)
        if len(raw) == ADDRESS_LENGTH:
            return raw
        raise InvalidFormatError(
            f"Expected 20 or 32 bytes, got {len(raw)}",
            details={"observed_length": len(raw)},
        )

    # Dispatch

    def parse_any(self, value: str) -> bytes:
        """
        Parse any address format into a 32-byte address.

        - ``Vx0``/``Vx1``: checksum-verified, payload right-aligned
        - ``0x``/``0X`` with 20 bytes: right-aligned
        - ``0x``/``0X`` with 32 bytes: used directly

        Raises:
            InvalidFormatError: Unknown prefix, malformed hex or wrong length
            ChecksumFailedError: Human-facing address with a bad checksum
        """
        if not isinstance(value, str):
            raise InvalidFormatError(f"Address must be a string, got {type(value).__name__}")
        if self.has_native_tag(value):
            return self.decode_human_facing(value)
        if value[:2] in ("0x", "0X"):
            return self.decode_hex(value)
        raise InvalidFormatError(
            f"Address must start with {', '.join(self.contract.tags)}, or 0x: {value}"
        )

    def parse_token(self, token: str) -> bytes:
        """Resolve a token identifier: the native symbol maps to the zero address."""
        if isinstance(token, str) and token.upper() == NATIVE_TOKEN_SYMBOL:
            return ZERO_ADDRESS
        return self.parse_any(token)


_default_codec = AddressCodec()


def default_codec() -> AddressCodec:
    """The process-wide codec used by the module-level helpers."""
    return _default_codec


def encode_from_public_key(public_key: bytes) -> str:
    return _default_codec.encode_from_public_key(public_key)


def decode_human_facing(value: str) -> bytes:
    return _default_codec.decode_human_facing(value)


def to_hex_full(value: str) -> str:
    return _default_codec.to_hex_full(value)


def to_hex_evm(value: str) -> str:
    return _default_codec.to_hex_evm(value)


def is_valid_human_facing(value: str) -> bool:
    return _default_codec.is_valid_human_facing(value)


def is_valid_hex(value: str) -> bool:
    return AddressCodec.is_valid_hex(value)


def parse_any(value: str) -> bytes:
    return _default_codec.parse_any(value)


def parse_token(token: str) -> bytes:
    return _default_codec.parse_token(token)


__all__ = [
    "ZERO_ADDRESS",
    "AddressCodec",
    "default_codec",
    "right_align",
    "address_to_hex",
    "address_to_evm",
    "encode_from_public_key",
    "decode_human_facing",
    "to_hex_full",
    "to_hex_evm",
    "is_valid_human_facing",
    "is_valid_hex",
    "parse_any",
    "parse_token",
]
