"""
Vexidus Binary Codec Module

Canonical binary encoding/decoding of transaction bundles.

Key components:
- writer.py: Little-endian primitive and length-prefixed encoding
- reader.py: Matching decoder
- bundle_codec.py: Bundle and operation layout
- hashes.py: BLAKE3 hashing helper
"""

from .hashes import blake3_bytes
from .reader import BinaryReader
from .writer import BinaryWriter
from .bundle_codec import (
    encode_operation,
    decode_operation,
    encode_bundle,
    encode_unsigned,
    decode_bundle,
    bundle_to_hex,
    bundle_from_hex,
)

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "blake3_bytes",
    "encode_operation",
    "decode_operation",
    "encode_bundle",
    "encode_unsigned",
    "decode_bundle",
    "bundle_to_hex",
    "bundle_from_hex",
]
