"""
Error model and client configuration tests.
"""

import pytest

from vexidus_sdk.config import ClientConfig, WELL_KNOWN_ENDPOINTS
from vexidus_sdk.runtime.errors import (
    AddressError, BundleAddressError, ChecksumFailedError, ErrorCode, InvalidFormatError,
    NoOperationsError, RpcError, RpcTransportError, VexidusError,
)


class TestErrorModel:
    """Structured error information."""

    def test_str_includes_code_details_and_cause(self):
        cause = ValueError("bad hex")
        error = InvalidFormatError("Invalid hex address", details={"observed_length": 25}, cause=cause)

        text = str(error)
        assert text.startswith("[INVALID_FORMAT] Invalid hex address")
        assert "observed_length" in text
        assert "bad hex" in text

    def test_to_dict(self):
        error = ChecksumFailedError("Checksum mismatch")
        assert error.to_dict() == {"code": ErrorCode.CHECKSUM_FAILED.value, "message": "Checksum mismatch"}

    def test_hierarchy(self):
        assert issubclass(InvalidFormatError, AddressError)
        assert issubclass(ChecksumFailedError, AddressError)
        assert issubclass(RpcTransportError, RpcError)
        assert issubclass(NoOperationsError, VexidusError)

    def test_no_operations_default_message(self):
        assert NoOperationsError().message == "No operations specified"

    def test_bundle_address_error_exposes_cause(self):
        inner = ChecksumFailedError("mismatch")
        error = BundleAddressError("Invalid recipient", cause=inner)

        assert error.address_error is inner
        assert BundleAddressError("plain").address_error is None

    def test_rpc_error_details(self):
        error = RpcError("nonce too low", rpc_code=-32000, data={"expected": 3})

        assert error.details == {"rpc_code": -32000, "data": {"expected": 3}}
        assert error.code == ErrorCode.RPC_ERROR


class TestClientConfig:

    def test_defaults(self):
        config = ClientConfig()

        assert config.endpoint == WELL_KNOWN_ENDPOINTS["local"]
        assert config.timeout == 30.0
        assert not config.debug

    @pytest.mark.parametrize("alias", ["testnet", "TESTNET"])
    def test_alias_resolution(self, alias):
        assert ClientConfig(endpoint=alias).endpoint == "https://testnet.vexidus.io"

    def test_trailing_slash_stripped(self):
        assert ClientConfig(endpoint="http://node:9933/").endpoint == "http://node:9933"

    def test_from_env(self):
        config = ClientConfig.from_env({
            "VEXIDUS_RPC_URL": "http://rpc.example:8545",
            "VEXIDUS_RPC_TIMEOUT": "2.5",
            "VEXIDUS_DEBUG": "true",
        })

        assert config.endpoint == "http://rpc.example:8545"
        assert config.timeout == 2.5
        assert config.debug

    def test_from_env_empty(self):
        config = ClientConfig.from_env({})

        assert config.endpoint == WELL_KNOWN_ENDPOINTS["local"]
        assert config.timeout == 30.0
        assert not config.debug
