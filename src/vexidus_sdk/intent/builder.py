"""
Intent builder for Vexidus.

An intent states a goal (swap, stake, provide liquidity, ...) together with
execution constraints and leaves routing to the network. Addresses and
tokens are accepted in any supported format and stored as ``0x`` + 64 hex.
"""

import json
import logging
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field

from ..address import ZERO_ADDRESS, address_to_hex, parse_any, parse_token
from ..runtime.errors import ErrorCode, IntentError

logger = logging.getLogger(__name__)

MAX_SLIPPAGE_PERCENT = 100


class SwapGoal(BaseModel):
    kind: Literal["swap"] = "swap"
    from_token: str
    to_token: str
    amount: int = Field(ge=0)


class StakeGoal(BaseModel):
    kind: Literal["stake"] = "stake"
    token: str
    amount: int = Field(ge=0)
    validator: Optional[str] = None


class ProvideLiquidityGoal(BaseModel):
    kind: Literal["provide_liquidity"] = "provide_liquidity"
    token_a: str
    token_b: str
    amount_a: int = Field(ge=0)
    amount_b: int = Field(ge=0)


class CustomGoal(BaseModel):
    """Free-form goal description."""

    kind: Literal["custom"] = "custom"
    description: str


class CompositeGoal(BaseModel):
    """Several goals executed atomically, in order."""

    kind: Literal["composite"] = "composite"
    goals: List["Goal"]


Goal = Annotated[
    Union[SwapGoal, StakeGoal, ProvideLiquidityGoal, CustomGoal, CompositeGoal],
    Field(discriminator="kind"),
]

CompositeGoal.model_rebuild()


class Constraints(BaseModel):
    """Execution constraints attached to an intent."""

    max_slippage: Optional[int] = Field(default=None, ge=0)
    deadline: Optional[int] = Field(default=None, ge=0)
    min_output: Optional[int] = Field(default=None, ge=0)
    preferred_dex: Optional[str] = None
    sponsored_gas: bool = False


def _token(value: str) -> str:
    return address_to_hex(parse_token(value))


def _account(value: str) -> str:
    return address_to_hex(parse_any(value))


class IntentBuilder:
    """
    Fluent builder for intents.

    Setting a goal replaces the previous one; use :meth:`composite` to combine
    several. Address arguments that cannot be parsed raise
    :class:`~vexidus_sdk.runtime.errors.AddressError` immediately.

    Example:
        ```python
        goal, constraints = (IntentBuilder()
                             .swap("VXS", "0x...usdc", 100_000_000_000)
                             .with_slippage(1)
                             .build())
        ```
    """

    def __init__(self):
        self._goal: Optional[Goal] = None
        self._constraints = Constraints()
        self._sender: Optional[str] = None

    @property
    def sender(self) -> Optional[str]:
        """Sender as ``0x`` + 64 hex, if set."""
        return self._sender

    def from_account(self, address: str) -> "IntentBuilder":
        self._sender = _account(address)
        return self

    # Goals

    def swap(self, from_token: str, to_token: str, amount: int) -> "IntentBuilder":
        self._goal = SwapGoal(from_token=_token(from_token), to_token=_token(to_token), amount=amount)
        return self

    def stake(self, amount: int, validator: Optional[str] = None) -> "IntentBuilder":
        """Stake native tokens, optionally with a specific validator."""
        self._goal = StakeGoal(
            token=address_to_hex(ZERO_ADDRESS),
            amount=amount,
            validator=_account(validator) if validator is not None else None,
        )
        return self

    def provide_liquidity(self, token_a: str, token_b: str, amount_a: int,
                          amount_b: int) -> "IntentBuilder":
        self._goal = ProvideLiquidityGoal(
            token_a=_token(token_a), token_b=_token(token_b),
            amount_a=amount_a, amount_b=amount_b,
        )
        return self

    def custom(self, description: str) -> "IntentBuilder":
        self._goal = CustomGoal(description=description)
        return self

    def composite(self, goals: List[Goal]) -> "IntentBuilder":
        self._goal = CompositeGoal(goals=list(goals))
        return self

    # Constraints

    def with_slippage(self, percent: int) -> "IntentBuilder":
        """Maximum slippage in percent (0-100, checked by :meth:`build`)."""
        self._constraints.max_slippage = percent
        return self

    def with_deadline(self, timestamp: int) -> "IntentBuilder":
        self._constraints.deadline = timestamp
        return self

    def with_min_output(self, amount: int) -> "IntentBuilder":
        self._constraints.min_output = amount
        return self

    def prefer_dex(self, dex: str) -> "IntentBuilder":
        """Route through the DEX at ``dex`` when possible."""
        self._constraints.preferred_dex = _account(dex)
        return self

    def sponsored(self) -> "IntentBuilder":
        """Request gas sponsorship."""
        self._constraints.sponsored_gas = True
        return self

    # Finalization

    def build(self) -> Tuple[Goal, Constraints]:
        """
        Return the goal and a copy of the constraints.

        Raises:
            IntentError: ``NO_GOAL`` if no goal was set, ``INVALID_SLIPPAGE``
                if slippage exceeds 100 percent
        """
        if self._goal is None:
            raise IntentError("No goal specified: call swap(), stake() or another goal method first")
        slippage = self._constraints.max_slippage
        if slippage is not None and slippage > MAX_SLIPPAGE_PERCENT:
            raise IntentError(
                f"Invalid slippage: {slippage}% (max {MAX_SLIPPAGE_PERCENT})",
                code=ErrorCode.INVALID_SLIPPAGE,
                details={"max_slippage": slippage},
            )
        logger.debug(f"Built {self._goal.kind} intent")
        return self._goal, self._constraints.model_copy()

    def to_json(self) -> str:
        """
        Serialize goal and constraints for RPC submission.

        Raises:
            IntentError: If no goal was set
        """
        if self._goal is None:
            raise IntentError("No goal specified: call swap(), stake() or another goal method first")
        payload = {
            "goal": self._goal.model_dump(mode="json"),
            "constraints": self._constraints.model_dump(mode="json"),
        }
        if self._sender is not None:
            payload["from"] = self._sender
        return json.dumps(payload, separators=(",", ":"))


__all__ = [
    "SwapGoal",
    "StakeGoal",
    "ProvideLiquidityGoal",
    "CustomGoal",
    "CompositeGoal",
    "Goal",
    "Constraints",
    "IntentBuilder",
]
