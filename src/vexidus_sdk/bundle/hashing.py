"""
Bundle authorization.

The canonical hash of a bundle is the BLAKE3 digest of its unsigned wire
encoding: every field except ``signature``, operations in order. A signature is
an Ed25519 signature over that 32-byte hash, so any change to a signed field
invalidates it while attaching the signature itself does not change the hash.
"""

import logging
from typing import Union

from ..crypto.ed25519 import Ed25519Error, Ed25519PublicKey
from ..runtime.errors import VexidusError

logger = logging.getLogger(__name__)


def canonical_hash(bundle) -> bytes:
    """
    Compute the canonical 32-byte hash of a bundle.

    Args:
        bundle: TransactionBundle to hash

    Returns:
        BLAKE3 digest of the unsigned encoding
    """
    # Import here to avoid circular imports
    from ..codec.bundle_codec import encode_unsigned
    from ..codec.hashes import blake3_bytes

    return blake3_bytes(encode_unsigned(bundle))


def sign_bundle(bundle, keypair) -> bytes:
    """
    Sign a bundle's canonical hash.

    The bundle is not modified; callers attach the result to ``signature``.

    Args:
        bundle: TransactionBundle to sign
        keypair: Anything with ``sign(message) -> bytes``

    Returns:
        64-byte Ed25519 signature
    """
    digest = canonical_hash(bundle)
    logger.debug(f"Signing bundle hash {digest.hex()}")
    return keypair.sign(digest)


def verify_signature(bundle, public_key: Union[bytes, Ed25519PublicKey]) -> bool:
    """
    Check a bundle's attached signature against its current content.

    Never raises: malformed keys, missing or malformed signatures, and a
    bundle whose content no longer encodes are reported as False.

    Args:
        bundle: TransactionBundle carrying a signature
        public_key: 32-byte public key or :class:`Ed25519PublicKey`

    Returns:
        True if the signature verifies over the recomputed hash
    """
    if not bundle.signature:
        return False
    if not isinstance(public_key, Ed25519PublicKey):
        try:
            public_key = Ed25519PublicKey(bytes(public_key))
        except (Ed25519Error, TypeError, ValueError):
            return False
    try:
        digest = canonical_hash(bundle)
    except VexidusError as e:
        logger.debug(f"Bundle content cannot be hashed: {e}")
        return False
    return public_key.verify(bundle.signature, digest)


__all__ = [
    "canonical_hash",
    "sign_bundle",
    "verify_signature",
]
