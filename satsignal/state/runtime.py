"""
Runtime state management.

AppRuntime owns the current AppState. Each command is computed against the
published state, written to the profile store, and only then published, so a
failed write leaves the previous state in effect.
"""

import threading
from collections.abc import Callable
from datetime import date
from typing import Any, Optional

import structlog

from ..advisor.narrative import AdvisoryResult, NarrativeAdvisor
from ..engine import compute_recommendation
from ..errors import PersistenceError
from ..logging.config import get_engine_logger, log_recommendation
from ..models.market import MarketState
from ..models.recommendation import Recommendation
from ..persistence.profile_store import ProfileStore
from ..utils.calendar import days_remaining_in_month
from . import commands
from .models import AppState, ViewAction, ViewState

logger = structlog.get_logger(__name__)
engine_logger = get_engine_logger(__name__)

Command = Callable[..., AppState]


class AppRuntime:
    """Applies commands to the application state and persists the results."""

    def __init__(self, store: ProfileStore, advisor: Optional[NarrativeAdvisor] = None):
        self.store = store
        self.advisor = advisor
        self.logger = logger

        self._lock = threading.Lock()
        self._state = AppState()
        self._advisory: Optional[AdvisoryResult] = None

    @property
    def state(self) -> AppState:
        """Published state."""
        return self._state

    @property
    def advisory(self) -> Optional[AdvisoryResult]:
        """Most recently completed advisory text."""
        return self._advisory

    def load(self) -> AppState:
        """Load stored profiles; the first screen is always the landing page."""
        stored = self.store.load()
        with self._lock:
            self._state = AppState(
                profiles=tuple(stored.profiles),
                active_profile_id=stored.active_profile_id,
                view=ViewState.LANDING,
            )
        return self._state

    def dispatch(self, command: Command, *args: Any) -> AppState:
        """
        Apply a command and persist the resulting profile collection.

        Args:
            command: Function taking the current AppState first
            *args: Remaining command arguments

        Returns:
            The newly published state

        Raises:
            PersistenceError: If the write fails; the published state is unchanged
        """
        with self._lock:
            current = self._state
            new_state = command(current, *args)

            if self._profiles_changed(current, new_state):
                try:
                    self.store.save(new_state.profiles, new_state.active_profile_id)
                except PersistenceError:
                    self.logger.error(
                        "Command not applied, profile save failed",
                        command=getattr(command, "__name__", repr(command))
                    )
                    raise

            self._state = new_state
            return new_state

    # Command shortcuts

    def start(self) -> AppState:
        return self.dispatch(commands.navigate, ViewAction.START)

    def complete_onboarding(self, form: dict[str, Any]) -> AppState:
        profile = commands.profile_from_onboarding(form)
        return self.dispatch(commands.create_profile, profile)

    def add_profile(self, name: str) -> AppState:
        return self.dispatch(commands.add_profile, name)

    def select_profile(self, profile_id: str) -> AppState:
        return self.dispatch(commands.select_profile, profile_id)

    def update_profile(self, field: str, value: Any) -> AppState:
        return self.dispatch(commands.update_profile_field, field, value)

    def execute_buy(self, amount: float, current_price: float) -> AppState:
        return self.dispatch(commands.execute_buy, amount, current_price)

    def delete_profile(self, profile_id: str) -> AppState:
        return self.dispatch(commands.delete_profile, profile_id)

    def navigate(self, action: ViewAction) -> AppState:
        return self.dispatch(commands.navigate, action)

    def recommend(
        self,
        market: Optional[MarketState],
        today: Optional[date] = None
    ) -> Optional[Recommendation]:
        """
        Recommendation for the active profile over the rest of the month.

        Returns:
            None when there is no market snapshot or no profile yet
        """
        profile = self._state.active_profile
        if market is None or profile is None:
            return None

        days_remaining = days_remaining_in_month(today)
        recommendation = compute_recommendation(market, profile, days_remaining)

        log_recommendation(
            engine_logger,
            profile_id=profile.id,
            final_buy=recommendation.final_buy,
            total_mult=recommendation.total_mult,
            capped=recommendation.is_capped_by_reserve,
            context={"days_remaining": days_remaining, "market_is_mock": market.is_mock}
        )
        return recommendation

    def request_advice(self, recommendation: Recommendation) -> Optional[threading.Thread]:
        """
        Request advisory text in the background.

        The result is stored on ``advisory``; the last request to finish wins.

        Returns:
            The worker thread, or None when no advisor is configured
        """
        if self.advisor is None:
            self.logger.warning("No narrative advisor configured")
            return None
        return self.advisor.advise_async(recommendation, self._set_advisory)

    def _set_advisory(self, result: AdvisoryResult) -> None:
        self._advisory = result

    @staticmethod
    def _profiles_changed(before: AppState, after: AppState) -> bool:
        return (
            before.profiles is not after.profiles
            or before.active_profile_id != after.active_profile_id
        )
