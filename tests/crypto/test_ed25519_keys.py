"""
Ed25519 and entropy source tests.
"""

import pytest

from vexidus_sdk.crypto import (
    Ed25519Error, Ed25519PrivateKey, Ed25519PublicKey, FixedEntropy, SystemEntropy,
    verify_ed25519,
)

SEED = bytes(range(32))


class TestEd25519Keys:
    """Key generation, serialization and signing."""

    def test_fixed_entropy_is_deterministic(self):
        key1 = Ed25519PrivateKey.generate(FixedEntropy(SEED))
        key2 = Ed25519PrivateKey.generate(FixedEntropy(SEED))

        assert key1.to_bytes() == SEED
        assert key1.public_key() == key2.public_key()

    def test_system_entropy_gives_distinct_keys(self):
        key1 = Ed25519PrivateKey.generate()
        key2 = Ed25519PrivateKey.generate()

        assert key1.to_bytes() != key2.to_bytes()
        assert len(key1.to_bytes()) == 32

    def test_sign_and_verify(self):
        key = Ed25519PrivateKey(SEED)
        signature = key.sign(b"message")

        assert len(signature) == 64
        assert key.public_key().verify(signature, b"message")
        assert not key.public_key().verify(signature, b"other message")

    def test_signatures_are_deterministic(self):
        key = Ed25519PrivateKey(SEED)
        assert key.sign(b"abc") == key.sign(b"abc")

    def test_wrong_length_signature_is_invalid(self):
        key = Ed25519PrivateKey(SEED)
        assert not key.public_key().verify(b"\x00" * 63, b"message")

    def test_public_key_hex_round_trip(self):
        public_key = Ed25519PrivateKey(SEED).public_key()

        assert Ed25519PublicKey.from_hex(public_key.to_hex()) == public_key
        assert Ed25519PublicKey.from_hex("0x" + public_key.to_hex()) == public_key

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_private_key_length_enforced(self, length):
        with pytest.raises(Ed25519Error):
            Ed25519PrivateKey(b"\x01" * length)

    def test_public_key_length_enforced(self):
        with pytest.raises(Ed25519Error):
            Ed25519PublicKey(b"\x01" * 31)

    def test_repr_hides_secret(self):
        key = Ed25519PrivateKey(SEED)
        assert SEED.hex() not in repr(key)

    def test_verify_helper_tolerates_bad_key(self):
        key = Ed25519PrivateKey(SEED)
        signature = key.sign(b"m")

        assert verify_ed25519(key.public_key().to_bytes(), signature, b"m")
        assert not verify_ed25519(b"\x01" * 5, signature, b"m")


class TestEntropySources:

    def test_system_entropy_length(self):
        assert len(SystemEntropy().seed(32)) == 32

    def test_fixed_entropy_rejects_length_mismatch(self):
        with pytest.raises(ValueError):
            FixedEntropy(b"\x00" * 16).seed(32)
