"""Pytest configuration and shared fixtures."""

from typing import Any, Dict

import pytest

from satsignal.models.market import MarketState
from satsignal.models.profile import Profile
from satsignal.persistence.profile_store import ProfileStore
from satsignal.state.models import AppState, ViewState


@pytest.fixture
def sample_profile() -> Profile:
    """Profile from the worked example: 400/month to invest, nothing held."""
    return Profile(
        id="profile-001",
        name="My Portfolio",
        income=5000.0,
        expenses=3000.0,
        allocation=0.2,
        holdings=0.0,
        target=1.0,
        spent_so_far=0.0,
    )


@pytest.fixture
def second_profile() -> Profile:
    return Profile(
        id="profile-002",
        name="Side Stack",
        income=8000.0,
        expenses=6000.0,
        allocation=0.5,
        holdings=0.3,
        target=0.5,
        spent_so_far=100.0,
    )


@pytest.fixture
def sample_market() -> MarketState:
    """Extreme-fear market from the worked example."""
    return MarketState(price=90000.0, fear_index=15.0, high_24h=95000.0, change_7d=0.0)


@pytest.fixture
def sample_market_payloads() -> Dict[str, Any]:
    """Raw upstream bodies as returned by the sentiment and quote sources."""
    return {
        "fear_greed": {
            "name": "Fear and Greed Index",
            "data": [{"value": "23", "value_classification": "Extreme Fear", "timestamp": "1700000000"}],
        },
        "markets": [
            {
                "id": "bitcoin",
                "current_price": 91234.5,
                "high_24h": 93000.0,
                "price_change_percentage_7d_in_currency": -4.2,
            }
        ],
    }


@pytest.fixture
def dashboard_state(sample_profile: Profile, second_profile: Profile) -> AppState:
    return AppState(
        profiles=(sample_profile, second_profile),
        active_profile_id=sample_profile.id,
        view=ViewState.DASHBOARD,
    )


@pytest.fixture
def profile_store(tmp_path) -> ProfileStore:
    return ProfileStore(str(tmp_path / "profiles.json"))
