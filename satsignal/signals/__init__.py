"""Market signal derivation and multiplier tiers"""

from .multipliers import (
    FAIR_VALUE,
    calculate_deviation,
    calculate_drawdown,
    cooldown_multiplier,
    dip_multiplier,
    fear_multiplier,
    goal_multiplier,
    trend_multiplier,
)

__all__ = [
    "FAIR_VALUE",
    "calculate_deviation",
    "calculate_drawdown",
    "fear_multiplier",
    "trend_multiplier",
    "dip_multiplier",
    "goal_multiplier",
    "cooldown_multiplier",
]
