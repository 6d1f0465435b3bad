"""
Vexidus Error Model

This module provides the error handling framework for the Vexidus Python SDK.
Every error carries a stable code so callers can tell a mistyped address
(checksum failure) apart from a string that is not an address at all.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Vexidus SDK error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Address errors (100-199)
    INVALID_FORMAT = 100
    CHECKSUM_FAILED = 101

    # Key errors (200-299)
    KEY_IO = 200
    KEY_FORMAT = 201
    HEX_DECODE = 202
    INVALID_VOTE = 203

    # Bundle errors (300-399)
    ADDRESS = 300
    NO_OPERATIONS = 301
    INVALID_ARGUMENT = 302

    # Encoding errors (400-499)
    ENCODING_ERROR = 400
    DECODE_ERROR = 401

    # Network errors (500-599)
    NETWORK_ERROR = 500
    RPC_ERROR = 501

    # Intent errors (600-699)
    NO_GOAL = 600
    INVALID_SLIPPAGE = 601


class VexidusError(Exception):
    """
    Base class for all Vexidus SDK errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Vexidus error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


# --- Address codec -----------------------------------------------------------

class AddressError(VexidusError):
    """Address parsing and validation errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_FORMAT,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidFormatError(AddressError):
    """The string is not an address: unknown prefix, bad hex, wrong length."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_FORMAT, details, cause)


class ChecksumFailedError(AddressError):
    """The string looks like an address but its checksum does not match."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CHECKSUM_FAILED, details, cause)


# --- Keypair -----------------------------------------------------------------

class KeypairError(VexidusError):
    """Key loading, saving and parsing errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.KEY_FORMAT,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class KeyIoError(KeypairError):
    """Key file could not be read or written."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.KEY_IO, details, cause)


class KeyFormatError(KeypairError):
    """Secret key is not exactly 32 bytes."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.KEY_FORMAT, details, cause)


class KeyHexDecodeError(KeypairError):
    """Secret key is not valid hex."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.HEX_DECODE, details, cause)


class InvalidVoteError(KeypairError):
    """A consensus vote argument is out of range."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_VOTE, details, cause)


# --- Bundle builder ----------------------------------------------------------

class BundleError(VexidusError):
    """Transaction bundle builder errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ADDRESS,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class BundleAddressError(BundleError):
    """An address or token argument passed to the builder could not be resolved."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ADDRESS, details, cause)

    @property
    def address_error(self) -> Optional[AddressError]:
        """The wrapped address codec error."""
        return self.cause if isinstance(self.cause, AddressError) else None


class BundleArgumentError(BundleError):
    """A numeric builder argument is out of range or of the wrong type."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, details, cause)


class NoOperationsError(BundleError):
    """A bundle was finalized without any operation."""

    def __init__(self, message: str = "No operations specified",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NO_OPERATIONS, details, cause)


# --- Wire codec ----------------------------------------------------------------

class CodecError(VexidusError):
    """Binary encoding and decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODE_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


# --- RPC ---------------------------------------------------------------------

class RpcError(VexidusError):
    """A structured error returned by the node's JSON-RPC endpoint."""

    def __init__(self, message: str, rpc_code: Optional[int] = None, data: Any = None,
                 code: ErrorCode = ErrorCode.RPC_ERROR, cause: Optional[Exception] = None):
        details = {}
        if rpc_code is not None:
            details["rpc_code"] = rpc_code
        if data is not None:
            details["data"] = data
        super().__init__(message, code, details, cause)
        self.rpc_code = rpc_code
        self.data = data


class RpcTransportError(RpcError):
    """HTTP failures, timeouts and unparseable responses."""

    def __init__(self, message: str, rpc_code: Optional[int] = None, cause: Optional[Exception] = None):
        super().__init__(message, rpc_code=rpc_code, code=ErrorCode.NETWORK_ERROR, cause=cause)


# --- Intent ------------------------------------------------------------------

class IntentError(VexidusError):
    """Intent builder errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NO_GOAL,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


__all__ = [
    "ErrorCode",
    "VexidusError",
    "AddressError",
    "InvalidFormatError",
    "ChecksumFailedError",
    "KeypairError",
    "KeyIoError",
    "KeyFormatError",
    "KeyHexDecodeError",
    "InvalidVoteError",
    "BundleError",
    "BundleAddressError",
    "BundleArgumentError",
    "NoOperationsError",
    "CodecError",
    "RpcError",
    "RpcTransportError",
    "IntentError",
]
