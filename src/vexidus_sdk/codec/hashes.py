"""
Hash Functions

BLAKE3 digests for canonical bundle hashing.
"""

import blake3


def blake3_bytes(input_bytes: bytes) -> bytes:
    """
    Compute the 32-byte BLAKE3 digest of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        BLAKE3 hash as bytes (32 bytes)
    """
    return blake3.blake3(input_bytes).digest()


__all__ = [
    "blake3_bytes",
]
