"""
Wallet client tests against an in-memory RPC channel.
"""

import pytest

from vexidus_sdk.bundle import Transfer, TransactionBundle
from vexidus_sdk.client import WalletClient
from vexidus_sdk.codec import bundle_from_hex
from vexidus_sdk.runtime.errors import RpcError, RpcTransportError

RECIPIENT = "0x" + "02" * 32


@pytest.fixture
def client(fake_channel):
    return WalletClient(fake_channel)


class TestQueries:

    def test_get_balance(self, client, fake_channel):
        fake_channel.responses["vex_getBalance"] = "12.5"

        assert client.get_balance("Vx0abc") == "12.5"
        assert fake_channel.params_for("vex_getBalance") == ["Vx0abc", "VXS"]

    def test_get_balance_missing_result(self, client, fake_channel):
        fake_channel.responses["vex_getBalance"] = None
        assert client.get_balance("Vx0abc", "0x" + "ab" * 20) == "0"

    def test_get_nonce_parses_hex(self, client, fake_channel):
        fake_channel.responses["eth_getTransactionCount"] = "0x1f"

        assert client.get_nonce("0x" + "01" * 32) == 31
        assert fake_channel.params_for("eth_getTransactionCount")[1] == "latest"

    def test_get_nonce_malformed(self, client, fake_channel):
        fake_channel.responses["eth_getTransactionCount"] = "0xnope"
        with pytest.raises(RpcError):
            client.get_nonce("0x" + "01" * 32)

    def test_chain_info(self, client, fake_channel):
        fake_channel.responses.update({
            "eth_chainId": "0x18b470",
            "eth_blockNumber": "0x2a",
            "vex_getTokenInfo": {"symbol": "VXS", "decimals": 9},
            "vex_listTokens": [],
        })

        assert client.chain_id() == "0x18b470"
        assert client.block_number() == 42
        assert client.get_token_info("VXS") == {"symbol": "VXS", "decimals": 9}
        assert client.list_tokens(5) == []
        assert fake_channel.params_for("vex_listTokens") == [5]

    def test_is_healthy(self, client, fake_channel):
        fake_channel.responses["eth_blockNumber"] = "0x1"
        assert client.is_healthy()

        fake_channel.responses["eth_blockNumber"] = RpcTransportError("down")
        assert not client.is_healthy()


class TestSubmission:

    def test_transfer_builds_signs_and_submits(self, client, fake_channel, alice):
        fake_channel.responses["eth_getTransactionCount"] = "0x5"
        fake_channel.responses["vex_submitBundle"] = "0xtxhash"

        assert client.transfer(alice, RECIPIENT, "VXS", 1_000_000_000) == "0xtxhash"

        method_order = [name for name, _ in fake_channel.calls]
        assert method_order == ["eth_getTransactionCount", "vex_submitBundle"]
        assert fake_channel.params_for("eth_getTransactionCount")[0] == alice.hex_address()

        submitted = fake_channel.params_for("vex_submitBundle")[0]
        assert submitted.startswith("0x")

        bundle = bundle_from_hex(submitted)
        assert bundle.nonce == 5
        assert bundle.operations == [Transfer(to=b"\x02" * 32, token=bytes(32), amount=1_000_000_000)]
        assert bundle.verify_signature(alice.public_key())

    def test_submit_error_is_not_retried(self, client, fake_channel, alice):
        fake_channel.responses["vex_submitBundle"] = RpcError("rejected", rpc_code=-32000)
        bundle = TransactionBundle(user_account=alice.address(), valid_until=1,
                                   operations=[Transfer(to=bytes(32), token=bytes(32), amount=1)])

        with pytest.raises(RpcError):
            client.submit_bundle(bundle)
        assert len(fake_channel.calls) == 1

    def test_close_closes_channel(self, fake_channel):
        with WalletClient(fake_channel):
            pass
        assert fake_channel.closed
