"""
Recommendation engine.

Turns a market snapshot and a budget profile into a bounded daily buy amount:

    Market signals -> Multiplier tiers -> Budget -> Reserve policy -> Clamp

The computation is pure: it reads only its arguments, never raises on bad
input and returns identical output for identical input.
"""

from collections.abc import Mapping
from typing import Any, Union

from .models.market import MarketState
from .models.profile import FIELD_KEYS, Profile
from .models.recommendation import BudgetSnapshot, MarketStats, Multipliers, Recommendation
from .signals.multipliers import (
    calculate_deviation,
    calculate_drawdown,
    cooldown_multiplier,
    dip_multiplier,
    fear_multiplier,
    goal_multiplier,
    trend_multiplier,
)
from .utils.numbers import coerce_number

# Amount that must stay available for every future day of the period
MIN_DAILY_RESERVE = 10.0

# Substituted when a market field is missing or invalid
DEFAULT_FEAR_INDEX = 50.0
DEFAULT_PRICE = 90000.0
DEFAULT_HIGH_24H = 95000.0
DEFAULT_CHANGE_7D = 0.0

# Substituted when the profile target is missing or invalid
DEFAULT_TARGET = 1.0

_MARKET_KEYS = {
    "price": "price",
    "fear_index": "fearIndex",
    "high_24h": "high24h",
    "change_7d": "change7d",
}

MarketInput = Union[MarketState, Mapping, None]
ProfileInput = Union[Profile, Mapping, None]


def _read(source: Any, attr: str, camel_key: str) -> Any:
    """Read a field from a model instance or a snake/camel keyed mapping."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        if camel_key in source:
            return source[camel_key]
        return source.get(attr)
    return getattr(source, attr, None)


def _market_value(market: MarketInput, attr: str, default: float) -> float:
    return coerce_number(_read(market, attr, _MARKET_KEYS[attr]), default)


def _profile_value(profile: ProfileInput, attr: str, default: float = 0.0) -> float:
    return coerce_number(_read(profile, attr, FIELD_KEYS[attr]), default)


def compute_recommendation(
    market: MarketInput,
    profile: ProfileInput,
    days_remaining: Any
) -> Recommendation:
    """
    Compute today's recommended buy.

    Args:
        market: MarketState or mapping with price, fear index, 24h high, 7d change
        profile: Profile or mapping with income, expenses, allocation, holdings,
            target and amount spent so far
        days_remaining: Days left in the budgeting period, today included

    Returns:
        Recommendation carrying the clamped amount and every intermediate value
    """
    income = _profile_value(profile, "income")
    expenses = _profile_value(profile, "expenses")
    allocation = _profile_value(profile, "allocation")
    holdings = _profile_value(profile, "holdings")
    spent_so_far = _profile_value(profile, "spent_so_far")
    target = _profile_value(profile, "target", DEFAULT_TARGET)

    fear = _market_value(market, "fear_index", DEFAULT_FEAR_INDEX)
    price = _market_value(market, "price", DEFAULT_PRICE)
    high_24h = _market_value(market, "high_24h", DEFAULT_HIGH_24H)
    change_7d = _market_value(market, "change_7d", DEFAULT_CHANGE_7D)

    days = coerce_number(days_remaining)

    # 1) Market signals
    deviation = calculate_deviation(price)
    drawdown = calculate_drawdown(price, high_24h)

    # 2) Multiplier tiers
    multipliers = Multipliers(
        fear=fear_multiplier(fear),
        trend=trend_multiplier(deviation),
        dip=dip_multiplier(drawdown),
        goal=goal_multiplier(holdings, target),
        cooldown=cooldown_multiplier(change_7d),
    )
    total_mult = multipliers.total

    # 3) Budget
    monthly_surplus = max(0.0, income - expenses)
    monthly_budget = monthly_surplus * allocation
    remaining_budget = max(0.0, monthly_budget - spent_so_far)

    # 4) Reserve policy
    base_today = remaining_budget / days if days > 0 else 0.0
    raw_suggested = base_today * total_mult

    future_days = max(0.0, days - 1)
    max_today_by_reserve = remaining_budget - MIN_DAILY_RESERVE * future_days

    # 5) Clamp
    final_buy = max(0.0, min(raw_suggested, max_today_by_reserve, remaining_budget))
    is_capped_by_reserve = raw_suggested > max_today_by_reserve

    return Recommendation(
        final_buy=final_buy,
        raw_suggested=raw_suggested,
        max_today_by_reserve=max_today_by_reserve,
        is_capped_by_reserve=is_capped_by_reserve,
        total_mult=total_mult,
        multipliers=multipliers,
        stats=MarketStats(
            fear=fear,
            deviation=deviation,
            drawdown=drawdown,
            change_7d=change_7d,
            price=price,
        ),
        budget=BudgetSnapshot(
            monthly_budget=monthly_budget,
            remaining_budget=remaining_budget,
            days_remaining=days,
            min_daily_reserve=MIN_DAILY_RESERVE,
        ),
    )
