"""Tests for the screen state machine."""

import pytest

from satsignal.errors import StateTransitionError
from satsignal.state.machine import transition_view
from satsignal.state.models import ViewAction, ViewState


class TestStart:

    def test_start_with_profiles_opens_dashboard(self):
        assert transition_view(ViewState.LANDING, ViewAction.START, True) == ViewState.DASHBOARD

    def test_start_without_profiles_opens_onboarding(self):
        assert transition_view(ViewState.LANDING, ViewAction.START, False) == ViewState.ONBOARDING

    def test_start_only_from_landing(self):
        with pytest.raises(StateTransitionError) as exc_info:
            transition_view(ViewState.DASHBOARD, ViewAction.START, True)

        assert exc_info.value.current_state == "dashboard"
        assert exc_info.value.attempted_transition == "start"
        assert exc_info.value.recoverable is False


class TestOnboarding:

    def test_complete_onboarding(self):
        result = transition_view(ViewState.ONBOARDING, ViewAction.COMPLETE_ONBOARDING, True)
        assert result == ViewState.DASHBOARD

    def test_complete_onboarding_requires_profile(self):
        with pytest.raises(StateTransitionError):
            transition_view(ViewState.ONBOARDING, ViewAction.COMPLETE_ONBOARDING, False)

    def test_complete_onboarding_outside_onboarding(self):
        with pytest.raises(StateTransitionError):
            transition_view(ViewState.PROFILES, ViewAction.COMPLETE_ONBOARDING, True)


class TestTabs:

    @pytest.mark.parametrize("current", [
        ViewState.DASHBOARD, ViewState.SIMULATION, ViewState.PROFILES, ViewState.ONBOARDING,
    ])
    @pytest.mark.parametrize("action, target", [
        (ViewAction.OPEN_DASHBOARD, ViewState.DASHBOARD),
        (ViewAction.OPEN_SIMULATION, ViewState.SIMULATION),
        (ViewAction.OPEN_PROFILES, ViewState.PROFILES),
    ])
    def test_tabs_reachable_past_landing(self, current, action, target):
        assert transition_view(current, action, True) == target

    def test_tabs_hidden_on_landing(self):
        with pytest.raises(StateTransitionError):
            transition_view(ViewState.LANDING, ViewAction.OPEN_SIMULATION, True)

    def test_tabs_need_profiles(self):
        with pytest.raises(StateTransitionError):
            transition_view(ViewState.ONBOARDING, ViewAction.OPEN_DASHBOARD, False)

    def test_save_profiles_returns_to_dashboard(self):
        assert transition_view(ViewState.PROFILES, ViewAction.SAVE_PROFILES, True) == ViewState.DASHBOARD

    def test_save_profiles_only_from_manager(self):
        with pytest.raises(StateTransitionError):
            transition_view(ViewState.DASHBOARD, ViewAction.SAVE_PROFILES, True)


class TestGlobalActions:

    @pytest.mark.parametrize("current", list(ViewState))
    def test_go_home_always_allowed(self, current):
        assert transition_view(current, ViewAction.GO_HOME, False) == ViewState.LANDING

    @pytest.mark.parametrize("current", list(ViewState))
    def test_profiles_exhausted_returns_to_onboarding(self, current):
        assert transition_view(current, ViewAction.PROFILES_EXHAUSTED, False) == ViewState.ONBOARDING
