"""
Simulation lab.

Runs the engine against a synthetic market built from a few sliders and
projects how fast the profile would reach its goal at that pace.
"""

from dataclasses import dataclass
from typing import Optional

from ..engine import compute_recommendation
from ..models.market import MarketState
from ..models.profile import Profile
from ..models.recommendation import Recommendation

# Reference price of the synthetic market
SIMULATION_PRICE = 92000.0
SIMULATION_DAYS = 30
UNITS_PER_ASSET = 100_000_000  # sats per coin


@dataclass(frozen=True)
class SimulationResult:
    """Projection for one slider setting."""
    recommendation: Recommendation
    simulated_buy: float
    monthly_accumulation: float
    asset_per_month: float
    sats_per_month: float
    months_to_goal: Optional[float]    # None when nothing is accumulated
    years_to_goal: Optional[float]


def simulated_market(fear_index: float, drawdown: float, recent_pump: float) -> MarketState:
    """Synthetic snapshot: fixed price, 24h high placed ``|drawdown|`` % above it."""
    return MarketState(
        price=SIMULATION_PRICE,
        fear_index=fear_index,
        high_24h=SIMULATION_PRICE * (1 + abs(drawdown / 100)),
        change_7d=recent_pump,
    )


def simulate(
    profile: Profile,
    fear_index: float = 25,
    drawdown: float = -15,
    recent_pump: float = 5
) -> SimulationResult:
    """
    Project accumulation for a 30-day period under synthetic conditions.

    Args:
        profile: Budget profile to simulate
        fear_index: Sentiment score 0-100
        drawdown: Percent below the 24h high (sign ignored)
        recent_pump: 7-day percent change

    Returns:
        SimulationResult with the daily buy and goal projections
    """
    recommendation = compute_recommendation(
        simulated_market(fear_index, drawdown, recent_pump),
        profile,
        SIMULATION_DAYS
    )

    simulated_buy = recommendation.final_buy
    monthly_accumulation = simulated_buy * SIMULATION_DAYS
    asset_per_month = monthly_accumulation / SIMULATION_PRICE
    sats_per_month = asset_per_month * UNITS_PER_ASSET

    months_to_goal: Optional[float] = None
    years_to_goal: Optional[float] = None
    if asset_per_month > 0:
        months_to_goal = (profile.target - profile.holdings) / asset_per_month
        years_to_goal = months_to_goal / 12

    return SimulationResult(
        recommendation=recommendation,
        simulated_buy=simulated_buy,
        monthly_accumulation=monthly_accumulation,
        asset_per_month=asset_per_month,
        sats_per_month=sats_per_month,
        months_to_goal=months_to_goal,
        years_to_goal=years_to_goal,
    )
