"""
Vexidus Python SDK

Address conversion, keypairs, transaction bundle building and signing, and
JSON-RPC clients for the Vexidus network.
"""

# Errors and configuration
from .runtime.errors import *
from .config import ClientConfig, NATIVE_TOKEN_SYMBOL, NATIVE_DECIMALS

# Addresses and keys
from .address import (
    ZERO_ADDRESS, AddressCodec, ChecksumCodec, Base58CheckCodec,
    encode_from_public_key, decode_human_facing, to_hex_full, to_hex_evm,
    is_valid_human_facing, is_valid_hex, parse_any, parse_token,
)
from .crypto import Ed25519PrivateKey, Ed25519PublicKey, EntropySource, SystemEntropy, FixedEntropy
from .keys import Keypair, WalletKeypair, ValidatorKeypair

# Bundles
from .bundle import (
    KeyType, KeyRole, Operation, TransactionBundle, BundleBuilder,
    canonical_hash, sign_bundle, verify_signature,
)
from .codec import encode_bundle, decode_bundle, bundle_to_hex, bundle_from_hex

# Clients and intents
from .client import RpcChannel, HttpRpcChannel, WalletClient, DexClient, ValidatorClient
from .intent import IntentBuilder, Constraints

__version__ = "0.1.0"
__all__ = [
    # Errors
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
    # Configuration
    "ClientConfig",
    "NATIVE_TOKEN_SYMBOL",
    "NATIVE_DECIMALS",
    # Addresses
    "ZERO_ADDRESS",
    "AddressCodec",
    "ChecksumCodec",
    "Base58CheckCodec",
    "encode_from_public_key",
    "decode_human_facing",
    "to_hex_full",
    "to_hex_evm",
    "is_valid_human_facing",
    "is_valid_hex",
    "parse_any",
    "parse_token",
    # Keys
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "EntropySource",
    "SystemEntropy",
    "FixedEntropy",
    "Keypair",
    "WalletKeypair",
    "ValidatorKeypair",
    # Bundles
    "KeyType",
    "KeyRole",
    "Operation",
    "TransactionBundle",
    "BundleBuilder",
    "canonical_hash",
    "sign_bundle",
    "verify_signature",
    "encode_bundle",
    "decode_bundle",
    "bundle_to_hex",
    "bundle_from_hex",
    # Clients
    "RpcChannel",
    "HttpRpcChannel",
    "WalletClient",
    "DexClient",
    "ValidatorClient",
    # Intents
    "IntentBuilder",
    "Constraints",
]
