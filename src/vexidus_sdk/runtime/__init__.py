"""Runtime helpers for the Vexidus Python SDK"""

from .errors import (
    ErrorCode, VexidusError,
    AddressError, InvalidFormatError, ChecksumFailedError,
    KeypairError, KeyIoError, KeyFormatError, KeyHexDecodeError, InvalidVoteError,
    BundleError, BundleAddressError, BundleArgumentError, NoOperationsError,
    CodecError, RpcError, RpcTransportError, IntentError,
)

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
