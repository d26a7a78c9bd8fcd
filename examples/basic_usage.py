#!/usr/bin/env python3
"""
Basic Usage Example - SatSignal Daily Accumulation Engine

This script walks one budget profile through a day of accumulation using the
offline mock market, so it runs without network access. It shows how to:
- Compute a recommendation from a market snapshot and a profile
- Onboard a profile and persist it with the runtime
- Record an executed buy
- Run a what-if projection in the simulation lab

Run: python examples/basic_usage.py
"""

import tempfile
from pathlib import Path

from satsignal.engine import compute_recommendation
from satsignal.logging.config import configure_logging
from satsignal.models.market import MarketState, mock_market_state
from satsignal.persistence.profile_store import ProfileStore
from satsignal.simulation.lab import simulate
from satsignal.state.runtime import AppRuntime
from satsignal.utils.calendar import days_remaining_in_month


def print_recommendation(title: str, rec) -> None:
    print(f"\n📊 {title}")
    print(f"  Buy today:        ${rec.final_buy:,.2f}")
    print(f"  Total multiplier: {rec.total_mult:.3f}x")
    m = rec.multipliers
    print(f"    fear={m.fear} trend={m.trend} dip={m.dip} goal={m.goal} cooldown={m.cooldown}")
    print(f"  Remaining budget: ${rec.budget.remaining_budget:,.2f} over {rec.budget.days_remaining:g} days")
    print(f"  Capped by reserve: {'yes' if rec.is_capped_by_reserve else 'no'}")


def main():
    configure_logging(level="WARNING")

    # Pure engine call with plain mappings
    rec = compute_recommendation(
        {"price": 90000, "fearIndex": 15, "high24h": 95000, "change7d": 0},
        {"income": 5000, "expenses": 3000, "allocation": 0.2, "holdings": 0, "target": 1.0, "spentSoFar": 0},
        30,
    )
    print_recommendation("Extreme fear, 30 days left", rec)

    with tempfile.TemporaryDirectory() as tmp:
        runtime = AppRuntime(ProfileStore(str(Path(tmp) / "profiles.json")))
        runtime.load()
        runtime.start()
        state = runtime.complete_onboarding({"name": "Demo", "income": "6000", "expenses": "3500"})
        print(f"\n👤 Onboarded profile '{state.active_profile.name}' ({state.view.value})")

        market = mock_market_state()
        rec = runtime.recommend(market)
        print_recommendation(f"Mock market at ${market.price:,.0f}", rec)

        state = runtime.execute_buy(rec.final_buy, market.price)
        profile = state.active_profile
        print(f"\n✅ Bought ${rec.final_buy:,.2f}: holdings {profile.holdings:.8f}, spent ${profile.spent_so_far:,.2f}")

        euphoric = MarketState(price=120000, fear_index=85, high_24h=121000, change_7d=25)
        print_recommendation(
            "Euphoric market, same day",
            compute_recommendation(euphoric, profile, days_remaining_in_month())
        )

        result = simulate(profile, fear_index=10, drawdown=-20, recent_pump=-12)
        print("\n🧪 Simulation lab (fear 10, 20% drawdown, -12% week)")
        print(f"  Daily buy:  ${result.simulated_buy:,.2f}")
        print(f"  Sats/month: {result.sats_per_month:,.0f}")
        if result.years_to_goal is not None:
            print(f"  Goal in:    {result.years_to_goal:.1f} years")


if __name__ == "__main__":
    main()
