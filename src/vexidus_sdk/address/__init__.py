"""
Address utilities for Vexidus.

Conversion between the ``Vx0`` native format, 0x hex and EVM addresses.
"""

from .contract import ChecksumCodec, Base58CheckCodec
from .codec import (
    ZERO_ADDRESS,
    AddressCodec,
    default_codec,
    right_align,
    address_to_hex,
    address_to_evm,
    encode_from_public_key,
    decode_human_facing,
    to_hex_full,
    to_hex_evm,
    is_valid_human_facing,
    is_valid_hex,
    parse_any,
    parse_token,
)

__all__ = [
    "ChecksumCodec",
    "Base58CheckCodec",
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
