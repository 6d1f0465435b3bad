"""
Randomness sources for key generation.

Key generation draws its seed from an :class:`EntropySource`. Production code
uses :class:`SystemEntropy` (the operating system CSPRNG via ``secrets``);
tests inject :class:`FixedEntropy` to get reproducible keys.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import secrets


class EntropySource(ABC):
    """Abstract source of secret random bytes."""

    @abstractmethod
    def seed(self, length: int) -> bytes:
        """
        Return ``length`` random bytes.

        Args:
            length: Number of bytes required

        Returns:
            Random bytes of exactly ``length``
        """
        pass


class SystemEntropy(EntropySource):
    """Cryptographically strong randomness from the operating system."""

    def seed(self, length: int) -> bytes:
        return secrets.token_bytes(length)


class FixedEntropy(EntropySource):
    """
    Deterministic source returning a preset seed. For tests only.
    """

    def __init__(self, value: bytes):
        self._value = bytes(value)

    def seed(self, length: int) -> bytes:
        if len(self._value) != length:
            raise ValueError(f"Fixed seed is {len(self._value)} bytes, {length} requested")
        return self._value


__all__ = [
    "EntropySource",
    "SystemEntropy",
    "FixedEntropy",
]
