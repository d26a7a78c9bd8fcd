"""Tests for the simulation lab projections."""

import pytest

from satsignal.models.profile import Profile
from satsignal.simulation.lab import SIMULATION_PRICE, simulate, simulated_market


class TestSimulatedMarket:

    def test_high_sits_above_price_by_drawdown(self):
        market = simulated_market(fear_index=25, drawdown=-15, recent_pump=5)

        assert market.price == SIMULATION_PRICE
        assert market.high_24h == pytest.approx(105800.0)
        assert market.change_7d == 5
        assert market.fear_index == 25

    def test_drawdown_sign_ignored(self):
        assert simulated_market(25, 15, 0).high_24h == simulated_market(25, -15, 0).high_24h


class TestSimulate:

    def test_default_sliders(self, sample_profile):
        result = simulate(sample_profile)

        assert result.recommendation.multipliers.fear == 1.2
        assert result.recommendation.multipliers.trend == 1.0
        assert result.recommendation.multipliers.dip == 1.25
        assert result.recommendation.multipliers.goal == 1.1
        assert result.recommendation.multipliers.cooldown == 1.0
        assert result.simulated_buy == pytest.approx(22.0)
        assert result.monthly_accumulation == pytest.approx(660.0)
        assert result.asset_per_month == pytest.approx(660.0 / 92000)
        assert result.sats_per_month == pytest.approx(717391.3, rel=1e-6)
        assert result.months_to_goal == pytest.approx(92000 / 660.0)
        assert result.years_to_goal == pytest.approx(92000 / 660.0 / 12)

    def test_greedy_pumping_market_buys_less(self, sample_profile):
        calm = simulate(sample_profile, fear_index=50, drawdown=0, recent_pump=0)
        hot = simulate(sample_profile, fear_index=80, drawdown=0, recent_pump=25)

        assert hot.simulated_buy < calm.simulated_buy
        assert hot.recommendation.multipliers.cooldown == 0.6

    def test_no_budget_has_no_goal_projection(self):
        profile = Profile(id="p", name="Broke", income=1000, expenses=1000, allocation=0.5)

        result = simulate(profile)

        assert result.simulated_buy == 0
        assert result.months_to_goal is None
        assert result.years_to_goal is None

    def test_goal_already_reached(self, sample_profile):
        profile = sample_profile.updated(holdings=2.0)

        assert simulate(profile).months_to_goal < 0
