"""
Multiplier tiers and the market signals they read.

Each multiplier is a step function over exactly one input signal. Thresholds
and tier values are fixed policy.
"""

# Reference fair value the trend signal is measured against
FAIR_VALUE = 85000.0


def calculate_deviation(price: float, fair_value: float = FAIR_VALUE) -> float:
    """
    Percent distance of price from fair value.

    deviation = (price - fair_value) / fair_value * 100
    """
    return (price - fair_value) / fair_value * 100


def calculate_drawdown(price: float, high_24h: float) -> float:
    """
    Percent decline of price from the recent high.

    Returns 0 when the high is not positive.
    """
    if high_24h <= 0:
        return 0.0
    return (price - high_24h) / high_24h * 100


def fear_multiplier(fear_index: float) -> float:
    """Extreme fear buys more, greed buys less."""
    if fear_index <= 20:
        return 1.5
    if fear_index <= 40:
        return 1.2
    if fear_index >= 75:
        return 0.8
    return 1.0


def trend_multiplier(deviation: float) -> float:
    """Below fair value buys more, far above buys less."""
    if deviation < -20:
        return 1.3
    if deviation < 0:
        return 1.1
    if deviation > 20:
        return 0.9
    return 1.0


def dip_multiplier(drawdown: float) -> float:
    if drawdown < -10:
        return 1.25
    if drawdown < -5:
        return 1.1
    return 1.0


def goal_multiplier(holdings: float, target: float) -> float:
    """
    Boost while less than half of the goal is held.

    A non-positive target has no meaningful progress and is treated as
    progress >= 0.5.
    """
    if target <= 0:
        return 1.0
    progress = holdings / target
    return 1.1 if progress < 0.5 else 1.0


def cooldown_multiplier(change_7d: float) -> float:
    """Dampen buying into a sharp rally, boost after a sharp drop."""
    if change_7d > 20:
        return 0.6
    if change_7d > 10:
        return 0.8
    if change_7d < -10:
        return 1.1
    return 1.0
