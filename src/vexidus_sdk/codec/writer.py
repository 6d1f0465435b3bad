"""
Binary Writer

Little-endian primitive encoding with u32 length prefixes for variable-size
data (Borsh layout), as used by the Vexidus bundle wire format.
"""

import struct
from typing import List, Optional


class BinaryWriter:
    """
    Append-only binary writer.

    All integers are little-endian. Values are masked to their width, so range
    checks belong to the caller (the bundle model validates bounds).
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """Write unsigned 8-bit integer."""
        self._bb.append(v & 0xFF)

    def u16le(self, v: int) -> None:
        """Write unsigned 16-bit integer in little-endian format."""
        self._bb.extend(struct.pack('<H', v & 0xFFFF))

    def u32le(self, v: int) -> None:
        """Write unsigned 32-bit integer in little-endian format."""
        self._bb.extend(struct.pack('<I', v & 0xFFFFFFFF))

    def u64le(self, v: int) -> None:
        """Write unsigned 64-bit integer in little-endian format."""
        self._bb.extend(struct.pack('<Q', v & 0xFFFFFFFFFFFFFFFF))

    def u128le(self, v: int) -> None:
        """Write unsigned 128-bit integer in little-endian format."""
        self._bb.extend((v & ((1 << 128) - 1)).to_bytes(16, 'little'))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes with a u32 little-endian length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.u32le(len(v))
        self.bytes(v)

    def string(self, s: str) -> None:
        """Write a UTF-8 string with a u32 length prefix."""
        self.len_prefixed_bytes(s.encode('utf-8'))

    def option_u64(self, v: Optional[int]) -> None:
        """Write an optional u64 as a presence flag followed by the value."""
        if v is None:
            self.u8(0)
        else:
            self.u8(1)
            self.u64le(v)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
