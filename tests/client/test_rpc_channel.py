"""Unit tests for HttpRpcChannel with mocked HTTP calls"""

import json
from unittest.mock import patch

import pytest
import requests

from vexidus_sdk.client import HttpRpcChannel, WalletClient, resolve_channel
from vexidus_sdk.config import ClientConfig
from vexidus_sdk.runtime.errors import ErrorCode, RpcError, RpcTransportError


class MockResponse:
    """Mock response for testing"""

    def __init__(self, status_code=200, json_data=None, reason="OK", raise_for_json=False):
        self.status_code = status_code
        self.reason = reason
        self._json_data = json_data if json_data is not None else {}
        self._raise_for_json = raise_for_json

    def json(self):
        if self._raise_for_json:
            raise json.JSONDecodeError("Invalid JSON", "", 0)
        return self._json_data


class TestHttpRpcChannel:
    """Test cases for HttpRpcChannel"""

    def test_defaults(self):
        channel = HttpRpcChannel()
        assert channel.endpoint == "http://localhost:9933"

    def test_alias_endpoint(self):
        channel = HttpRpcChannel(ClientConfig(endpoint="testnet"))
        assert channel.endpoint == "https://testnet.vexidus.io"

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_call_success(self, mock_post):
        mock_post.return_value = MockResponse(json_data={"jsonrpc": "2.0", "result": "0x10", "id": 1})
        channel = HttpRpcChannel(ClientConfig(endpoint="http://node.example:9933", timeout=5.0))

        assert channel.call("eth_blockNumber", []) == "0x10"

        args, kwargs = mock_post.call_args
        assert args[0] == "http://node.example:9933"
        assert kwargs["timeout"] == 5.0
        body = kwargs["json"]
        assert body["jsonrpc"] == "2.0"
        assert body["method"] == "eth_blockNumber"
        assert body["params"] == []
        assert isinstance(body["id"], int)

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_params_default_to_empty_list(self, mock_post):
        mock_post.return_value = MockResponse(json_data={"result": None})
        HttpRpcChannel().call("vex_stakingInfo")

        assert mock_post.call_args[1]["json"]["params"] == []

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_structured_error(self, mock_post):
        mock_post.return_value = MockResponse(json_data={
            "jsonrpc": "2.0",
            "error": {"code": -32000, "message": "nonce too low", "data": {"expected": 4}},
            "id": 1,
        })

        with pytest.raises(RpcError) as exc_info:
            HttpRpcChannel().call("vex_submitBundle", ["0x00"])

        error = exc_info.value
        assert not isinstance(error, RpcTransportError)
        assert error.rpc_code == -32000
        assert error.message == "nonce too low"
        assert error.data == {"expected": 4}
        assert error.code == ErrorCode.RPC_ERROR

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_http_error_status(self, mock_post):
        mock_post.return_value = MockResponse(status_code=503, reason="Service Unavailable")

        with pytest.raises(RpcTransportError) as exc_info:
            HttpRpcChannel().call("eth_chainId", [])
        assert exc_info.value.rpc_code == 503
        assert exc_info.value.code == ErrorCode.NETWORK_ERROR

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_connection_error(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(RpcTransportError) as exc_info:
            HttpRpcChannel().call("eth_chainId", [])
        assert isinstance(exc_info.value.cause, requests.exceptions.ConnectionError)

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_invalid_json(self, mock_post):
        mock_post.return_value = MockResponse(raise_for_json=True)

        with pytest.raises(RpcTransportError, match="Invalid JSON"):
            HttpRpcChannel().call("eth_chainId", [])

    @patch('vexidus_sdk.client.rpc.requests.Session.post')
    def test_non_object_response(self, mock_post):
        mock_post.return_value = MockResponse(json_data=[1, 2])

        with pytest.raises(RpcTransportError):
            HttpRpcChannel().call("eth_chainId", [])

    def test_context_manager_closes_owned_session(self):
        with patch('vexidus_sdk.client.rpc.requests.Session.close') as mock_close:
            with HttpRpcChannel():
                pass
        mock_close.assert_called_once()


class TestResolveChannel:

    def test_channel_passthrough(self, fake_channel):
        assert resolve_channel(fake_channel) is fake_channel

    def test_endpoint_string(self):
        channel = resolve_channel("http://other:1234/")
        assert channel.endpoint == "http://other:1234"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("VEXIDUS_RPC_URL", "testnet")
        channel = resolve_channel(None)
        assert channel.endpoint == "https://testnet.vexidus.io"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            WalletClient(42)
