"""
Shared fixtures for the Vexidus SDK test suite.

Keys are derived from fixed seeds so addresses and signatures are
reproducible; client tests talk to an in-memory RPC channel instead of HTTP.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pytest

from vexidus_sdk.client.rpc import RpcChannel
from vexidus_sdk.crypto.entropy import FixedEntropy
from vexidus_sdk.keys.keypair import ValidatorKeypair, WalletKeypair

SENDER_HEX = "0x" + "01" * 32
RECIPIENT_HEX = "0x" + "02" * 32
TOKEN_HEX = "0x" + "ab" * 20

ALICE_SEED = bytes(range(32))
BOB_SEED = bytes(range(32, 64))


class FakeChannel(RpcChannel):
    """
    In-memory JSON-RPC channel.

    Responses are registered per method, either as a plain value or as a
    callable receiving the params. Every call is recorded in ``calls``.
    """

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses: Dict[str, Union[Any, Callable[[List[Any]], Any]]] = dict(responses or {})
        self.calls: List[Tuple[str, List[Any]]] = []
        self.closed = False

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        params = list(params or [])
        self.calls.append((method, params))
        if method not in self.responses:
            raise AssertionError(f"Unexpected RPC call: {method}")
        response = self.responses[method]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(params)
        return response

    def close(self) -> None:
        self.closed = True

    def params_for(self, method: str) -> List[Any]:
        """Params of the last call to ``method``."""
        for name, params in reversed(self.calls):
            if name == method:
                return params
        raise AssertionError(f"{method} was never called")


@pytest.fixture
def alice() -> WalletKeypair:
    """Deterministic wallet keypair."""
    return WalletKeypair.generate(FixedEntropy(ALICE_SEED))


@pytest.fixture
def bob() -> WalletKeypair:
    """Second deterministic wallet keypair."""
    return WalletKeypair.generate(FixedEntropy(BOB_SEED))


@pytest.fixture
def validator_keypair() -> ValidatorKeypair:
    return ValidatorKeypair.from_secret_bytes(ALICE_SEED)


@pytest.fixture
def fake_channel() -> FakeChannel:
    return FakeChannel()
