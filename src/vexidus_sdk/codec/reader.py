"""
Binary Reader

Counterpart of :class:`~vexidus_sdk.codec.writer.BinaryWriter`.
"""

import builtins
import struct
from typing import Optional

from ..runtime.errors import CodecError


class BinaryReader:
    """
    Sequential binary reader over a byte buffer.

    Reading past the end raises :class:`CodecError`.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if the whole buffer has been consumed."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def _take(self, n: int) -> builtins.bytes:
        if n < 0 or self._off + n > len(self._buf):
            raise CodecError(
                f"Buffer overflow: need {n} bytes at offset {self._off}, have {self.remaining}"
            )
        val = self._buf[self._off:self._off + n]
        self._off += n
        return val

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self._take(1)[0]

    def u16le(self) -> int:
        """Read unsigned 16-bit integer in little-endian format."""
        return struct.unpack('<H', self._take(2))[0]

    def u32le(self) -> int:
        """Read unsigned 32-bit integer in little-endian format."""
        return struct.unpack('<I', self._take(4))[0]

    def u64le(self) -> int:
        """Read unsigned 64-bit integer in little-endian format."""
        return struct.unpack('<Q', self._take(8))[0]

    def u128le(self) -> int:
        """Read unsigned 128-bit integer in little-endian format."""
        return int.from_bytes(self._take(16), 'little')

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read exactly n bytes.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes read from buffer
        """
        return builtins.bytes(self._take(n))

    def len_prefixed_bytes(self) -> builtins.bytes:
        """Read bytes preceded by a u32 little-endian length."""
        return self.bytes(self.u32le())

    def string(self) -> str:
        """Read a u32-length-prefixed UTF-8 string."""
        raw = self.len_prefixed_bytes()
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise CodecError(f"Invalid UTF-8 string at offset {self._off}", cause=e)

    def option_u64(self) -> Optional[int]:
        """Read an optional u64 written by ``BinaryWriter.option_u64``."""
        flag = self.u8()
        if flag == 0:
            return None
        if flag != 1:
            raise CodecError(f"Invalid option flag: {flag}")
        return self.u64le()
