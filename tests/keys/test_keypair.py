"""
Wallet and validator keypair tests.
"""

import os
import stat

import pytest

from vexidus_sdk.address import decode_human_facing, is_valid_human_facing, parse_any
from vexidus_sdk.bundle import BundleBuilder, canonical_hash
from vexidus_sdk.crypto import FixedEntropy
from vexidus_sdk.keys import KEY_FILE_MODE, ValidatorKeypair, WalletKeypair
from vexidus_sdk.runtime.errors import (
    ErrorCode, InvalidVoteError, KeyFormatError, KeyHexDecodeError, KeyIoError, KeypairError,
)

SEED = bytes(range(32))


class TestConstruction:

    def test_from_secret_hex_matches_bytes(self):
        from_hex = WalletKeypair.from_secret_hex(SEED.hex())
        from_bytes = WalletKeypair.from_secret_bytes(SEED)

        assert from_hex.public_key_bytes() == from_bytes.public_key_bytes()

    def test_from_secret_hex_trims_whitespace(self):
        keypair = WalletKeypair.from_secret_hex(f"  {SEED.hex()}\n")
        assert keypair == WalletKeypair.from_secret_bytes(SEED)

    def test_generate_with_fixed_entropy(self):
        keypair = WalletKeypair.generate(FixedEntropy(SEED))
        assert keypair == WalletKeypair.from_secret_bytes(SEED)

    def test_generate_returns_wallet_type(self):
        assert isinstance(WalletKeypair.generate(), WalletKeypair)
        assert isinstance(ValidatorKeypair.generate(), ValidatorKeypair)

    def test_malformed_hex(self):
        with pytest.raises(KeyHexDecodeError) as exc_info:
            WalletKeypair.from_secret_hex("zz" * 32)
        assert exc_info.value.code == ErrorCode.HEX_DECODE

    @pytest.mark.parametrize("secret_hex", [
        " ".join(["11"] * 32),
        "11" * 16 + "\n" + "11" * 16,
        "11" * 16 + "\t" + "11" * 16,
    ])
    def test_inner_whitespace_rejected(self, secret_hex):
        with pytest.raises(KeyHexDecodeError):
            WalletKeypair.from_secret_hex(secret_hex)

    @pytest.mark.parametrize("secret_hex", ["00" * 31, "00" * 33, ""])
    def test_wrong_length_hex(self, secret_hex):
        with pytest.raises(KeyFormatError):
            WalletKeypair.from_secret_hex(secret_hex)

    def test_wrong_length_bytes(self):
        with pytest.raises(KeyFormatError) as exc_info:
            WalletKeypair.from_secret_bytes(b"\x01" * 16)
        assert exc_info.value.details["observed_length"] == 16


class TestIdentity:
    """Address forms derived from the public key."""

    def test_address_is_public_key(self, alice):
        assert alice.address() == alice.public_key_bytes()
        assert len(alice.address()) == 32

    def test_vx0_address_is_valid(self, alice):
        address = alice.vx0_address()
        assert address.startswith("Vx0")
        assert is_valid_human_facing(address)

    def test_hex_address_is_full_form_of_vx0(self, alice):
        hex_address = alice.hex_address()

        assert hex_address.startswith("0x") and len(hex_address) == 66
        assert parse_any(hex_address) == decode_human_facing(alice.vx0_address())

    def test_evm_address_is_tail_of_hex_address(self, alice):
        assert alice.evm_address()[2:] == alice.hex_address()[-40:]

    def test_public_key_hex(self, validator_keypair):
        assert validator_keypair.public_key_hex() == "0x" + validator_keypair.public_key().to_hex()

    def test_distinct_keys_distinct_addresses(self, alice, bob):
        assert alice.vx0_address() != bob.vx0_address()

    def test_repr_hides_secret(self, alice):
        text = repr(alice)
        assert alice.vx0_address() in text
        assert bytes(range(32)).hex() not in text


class TestPersistence:

    def test_save_and_load(self, alice, tmp_path):
        path = tmp_path / "wallet.key"
        alice.save(path)

        loaded = WalletKeypair.load(path)
        assert loaded == alice
        assert loaded is not alice

    def test_file_contents(self, tmp_path):
        keypair = WalletKeypair.from_secret_bytes(SEED)
        path = tmp_path / "wallet.key"
        keypair.save(str(path))

        assert path.read_text() == SEED.hex()

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
    def test_saved_file_is_owner_only(self, alice, tmp_path):
        path = tmp_path / "wallet.key"
        alice.save(path)

        assert stat.S_IMODE(path.stat().st_mode) == KEY_FILE_MODE

    def test_load_trims_trailing_newline(self, tmp_path):
        path = tmp_path / "wallet.key"
        path.write_text(SEED.hex() + "\n")

        assert WalletKeypair.load(path) == WalletKeypair.from_secret_bytes(SEED)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(KeyIoError) as exc_info:
            WalletKeypair.load(tmp_path / "missing.key")
        assert isinstance(exc_info.value.cause, OSError)

    def test_save_into_missing_directory(self, alice, tmp_path):
        with pytest.raises(KeyIoError):
            alice.save(tmp_path / "no" / "such" / "dir" / "wallet.key")

    def test_load_garbage(self, tmp_path):
        path = tmp_path / "wallet.key"
        path.write_text("not a key")

        with pytest.raises(KeypairError):
            WalletKeypair.load(path)

    def test_validator_keypair_round_trip(self, validator_keypair, tmp_path):
        path = tmp_path / "validator.key"
        validator_keypair.save(path)

        loaded = ValidatorKeypair.load(path)
        assert isinstance(loaded, ValidatorKeypair)
        assert loaded.public_key_hex() == validator_keypair.public_key_hex()


class TestSigning:

    def test_sign_and_verify(self, alice):
        signature = alice.sign(b"payload")

        assert len(signature) == 64
        assert alice.verify(b"payload", signature)
        assert not alice.verify(b"tampered", signature)

    def test_sign_bundle_signs_canonical_hash(self, alice):
        bundle = BundleBuilder(alice.hex_address()).transfer(
            "0x" + "02" * 32, "VXS", 10).build()

        signature = alice.sign_bundle(bundle)

        assert alice.public_key().verify(signature, canonical_hash(bundle))
        assert bundle.signature == b""

    def test_sign_vote_message_layout(self, validator_keypair):
        block_hash = b"\x11" * 32
        signature = validator_keypair.sign_vote(block_hash, 2, 7)

        expected_message = block_hash + b"\x02" + (7).to_bytes(8, "little")
        assert validator_keypair.verify(expected_message, signature)

    def test_sign_vote_binds_epoch(self, validator_keypair):
        block_hash = b"\x11" * 32
        assert validator_keypair.sign_vote(block_hash, 1, 1) != validator_keypair.sign_vote(block_hash, 1, 2)

    def test_sign_vote_rejects_short_hash(self, validator_keypair):
        with pytest.raises(InvalidVoteError) as exc_info:
            validator_keypair.sign_vote(b"\x11" * 31, 1, 1)
        assert exc_info.value.code == ErrorCode.INVALID_VOTE
        assert exc_info.value.details["observed_length"] == 31

    @pytest.mark.parametrize("vote_type, epoch", [
        (256, 1),
        (-1, 1),
        (1, -1),
        (1, 2**64),
        (1, "7"),
    ])
    def test_sign_vote_rejects_out_of_range(self, validator_keypair, vote_type, epoch):
        with pytest.raises(InvalidVoteError):
            validator_keypair.sign_vote(b"\x11" * 32, vote_type, epoch)

    def test_sign_vote_accepts_bounds(self, validator_keypair):
        block_hash = b"\x11" * 32
        signature = validator_keypair.sign_vote(block_hash, 255, 2**64 - 1)

        expected_message = block_hash + b"\xff" + b"\xff" * 8
        assert validator_keypair.verify(expected_message, signature)
