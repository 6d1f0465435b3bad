"""
Bundle Codec

Binary encoding of :class:`~vexidus_sdk.bundle.types.TransactionBundle`.

Layout (all integers little-endian)::

    user_account      [32]
    operations        u32 count, then per operation: u8 variant index + fields
    max_gas           u64
    max_priority_fee  u64
    valid_until       u64
    nonce             u64
    signature         u32 length + bytes     (omitted from the unsigned form)
    expiry_timestamp  u8 flag [+ u64]

Operation fields follow each variant's ``WIRE_LAYOUT``; the variant index is
the position of its class in ``OPERATION_TYPES``.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from ..bundle.types import OPERATION_TYPES, TransactionBundle
from ..config import ADDRESS_LENGTH, HEX_PREFIX
from ..runtime.errors import CodecError, ErrorCode
from .reader import BinaryReader
from .writer import BinaryWriter

logger = logging.getLogger(__name__)

_VARIANT_INDEX = {cls: i for i, cls in enumerate(OPERATION_TYPES)}


def _write_field(writer: BinaryWriter, wire_type: str, value: Any) -> None:
    if wire_type in ("address", "hash"):
        writer.bytes(value)
    elif wire_type == "bytes":
        writer.len_prefixed_bytes(value)
    elif wire_type == "string":
        writer.string(value)
    elif wire_type == "u8":
        writer.u8(int(value))
    elif wire_type == "u16":
        writer.u16le(value)
    elif wire_type == "u64":
        writer.u64le(value)
    elif wire_type == "u128":
        writer.u128le(value)
    else:
        raise CodecError(f"Unknown wire type: {wire_type}", code=ErrorCode.ENCODING_ERROR)


def _read_field(reader: BinaryReader, wire_type: str) -> Any:
    if wire_type in ("address", "hash"):
        return reader.bytes(ADDRESS_LENGTH)
    if wire_type == "bytes":
        return reader.len_prefixed_bytes()
    if wire_type == "string":
        return reader.string()
    if wire_type == "u8":
        return reader.u8()
    if wire_type == "u16":
        return reader.u16le()
    if wire_type == "u64":
        return reader.u64le()
    if wire_type == "u128":
        return reader.u128le()
    raise CodecError(f"Unknown wire type: {wire_type}")


def encode_operation(writer: BinaryWriter, operation: Any) -> None:
    """
    Append one operation (variant index followed by its fields).

    Args:
        writer: Destination writer
        operation: Any member of the operation union

    Raises:
        CodecError: If the operation type is not part of the union
    """
    index = _VARIANT_INDEX.get(type(operation))
    if index is None:
        raise CodecError(
            f"Unsupported operation type: {type(operation).__name__}",
            code=ErrorCode.ENCODING_ERROR,
        )
    writer.u8(index)
    for name, wire_type in operation.WIRE_LAYOUT:
        _write_field(writer, wire_type, getattr(operation, name))


def decode_operation(reader: BinaryReader) -> Any:
    """
    Read one operation written by :func:`encode_operation`.

    Raises:
        CodecError: On an unknown variant index or out-of-range field
    """
    index = reader.u8()
    if index >= len(OPERATION_TYPES):
        raise CodecError(f"Unknown operation variant: {index}")
    cls = OPERATION_TYPES[index]
    fields: Dict[str, Any] = {}
    for name, wire_type in cls.WIRE_LAYOUT:
        fields[name] = _read_field(reader, wire_type)
    try:
        return cls(**fields)
    except ValidationError as e:
        raise CodecError(f"Invalid {cls.__name__} operation", cause=e)


def _encode(bundle: TransactionBundle, include_signature: bool) -> bytes:
    writer = BinaryWriter()
    writer.bytes(bundle.user_account)
    writer.u32le(len(bundle.operations))
    for operation in bundle.operations:
        encode_operation(writer, operation)
    writer.u64le(bundle.max_gas)
    writer.u64le(bundle.max_priority_fee)
    writer.u64le(bundle.valid_until)
    writer.u64le(bundle.nonce)
    if include_signature:
        writer.len_prefixed_bytes(bundle.signature)
    writer.option_u64(bundle.expiry_timestamp)
    return writer.to_bytes()


def encode_bundle(bundle: TransactionBundle) -> bytes:
    """
    Full wire encoding of a bundle, signature included.

    Args:
        bundle: Bundle to encode

    Returns:
        Encoded bytes suitable for submission
    """
    return _encode(bundle, include_signature=True)


def encode_unsigned(bundle: TransactionBundle) -> bytes:
    """
    Wire encoding of every field except the signature.

    This is the canonical hash preimage, so it is identical for a bundle
    before and after signing.
    """
    return _encode(bundle, include_signature=False)


def decode_bundle(data: bytes) -> TransactionBundle:
    """
    Decode a bundle produced by :func:`encode_bundle`.

    Args:
        data: Encoded bundle

    Returns:
        The decoded bundle

    Raises:
        CodecError: If the data is truncated, has trailing bytes, or holds
            out-of-range values
    """
    reader = BinaryReader(bytes(data))
    user_account = reader.bytes(ADDRESS_LENGTH)
    count = reader.u32le()
    operations = [decode_operation(reader) for _ in range(count)]
    max_gas = reader.u64le()
    max_priority_fee = reader.u64le()
    valid_until = reader.u64le()
    nonce = reader.u64le()
    signature = reader.len_prefixed_bytes()
    expiry_timestamp = reader.option_u64()
    if not reader.eof:
        raise CodecError(f"Trailing data after bundle: {reader.remaining} bytes")

    try:
        return TransactionBundle(
            user_account=user_account,
            operations=operations,
            max_gas=max_gas,
            max_priority_fee=max_priority_fee,
            valid_until=valid_until,
            nonce=nonce,
            signature=signature,
            expiry_timestamp=expiry_timestamp,
        )
    except ValidationError as e:
        raise CodecError("Invalid bundle", cause=e)


def bundle_to_hex(bundle: TransactionBundle, prefix: bool = True) -> str:
    """
    Hex form of :func:`encode_bundle`.

    Args:
        bundle: Bundle to encode
        prefix: Prepend ``0x`` (the wallet RPC expects it, the DEX RPC does not)
    """
    encoded = encode_bundle(bundle).hex()
    return f"{HEX_PREFIX}{encoded}" if prefix else encoded


def bundle_from_hex(value: str) -> TransactionBundle:
    """Decode a hex-encoded bundle, with or without ``0x`` prefix."""
    value = value.strip()
    if value[:2] in ("0x", "0X"):
        value = value[2:]
    try:
        data = bytes.fromhex(value)
    except ValueError as e:
        raise CodecError("Bundle hex is malformed", cause=e)
    logger.debug(f"Decoding bundle from {len(data)} bytes")
    return decode_bundle(data)


__all__ = [
    "encode_operation",
    "decode_operation",
    "encode_bundle",
    "encode_unsigned",
    "decode_bundle",
    "bundle_to_hex",
    "bundle_from_hex",
]
