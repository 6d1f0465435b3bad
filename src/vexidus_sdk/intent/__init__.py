"""
Intent construction for Vexidus.
"""

from .builder import (
    SwapGoal,
    StakeGoal,
    ProvideLiquidityGoal,
    CustomGoal,
    CompositeGoal,
    Goal,
    Constraints,
    IntentBuilder,
)

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
