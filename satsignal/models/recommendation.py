"""Recommendation output models"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Multipliers:
    """The five tiered scaling factors"""
    fear: float
    trend: float
    dip: float
    goal: float
    cooldown: float

    @property
    def total(self) -> float:
        """Product of all factors"""
        return self.fear * self.trend * self.dip * self.goal * self.cooldown


@dataclass(frozen=True)
class MarketStats:
    """Market signals the multipliers were derived from"""
    fear: float
    deviation: float     # % from fair value
    drawdown: float      # % below 24h high
    change_7d: float
    price: float


@dataclass(frozen=True)
class BudgetSnapshot:
    """Budget figures behind the daily amount"""
    monthly_budget: float
    remaining_budget: float
    days_remaining: float
    min_daily_reserve: float


@dataclass(frozen=True)
class Recommendation:
    """Explainable daily buy recommendation"""
    final_buy: float
    raw_suggested: float
    max_today_by_reserve: float
    is_capped_by_reserve: bool
    total_mult: float
    multipliers: Multipliers
    stats: MarketStats
    budget: BudgetSnapshot

    def to_dict(self) -> dict[str, Any]:
        """Record shape with camelCase keys"""
        return {
            "finalBuy": self.final_buy,
            "rawSuggested": self.raw_suggested,
            "maxTodayByReserve": self.max_today_by_reserve,
            "isCappedByReserve": self.is_capped_by_reserve,
            "totalMult": self.total_mult,
            "multipliers": {
                "fear": self.multipliers.fear,
                "trend": self.multipliers.trend,
                "dip": self.multipliers.dip,
                "goal": self.multipliers.goal,
                "cooldown": self.multipliers.cooldown,
            },
            "stats": {
                "fear": self.stats.fear,
                "deviation": self.stats.deviation,
                "drawdown": self.stats.drawdown,
                "change7d": self.stats.change_7d,
                "price": self.stats.price,
            },
            "budget": {
                "monthlyBudget": self.budget.monthly_budget,
                "remainingBudget": self.budget.remaining_budget,
                "daysRemaining": self.budget.days_remaining,
                "minDailyReserve": self.budget.min_daily_reserve,
            },
        }
