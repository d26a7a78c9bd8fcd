"""Tests for profile and view commands."""

import pytest

from satsignal.errors import MissingDataError, ProfileValidationError, StateTransitionError
from satsignal.models.profile import Profile
from satsignal.state import commands
from satsignal.state.models import AppState, ViewAction, ViewState


class TestOnboarding:

    def test_profile_from_onboarding_form(self):
        profile = commands.profile_from_onboarding({
            "name": "", "income": "5000", "expenses": "3000",
            "allocation": "0.2", "holdings": "0", "target": "",
        })

        assert profile.name == "My Portfolio"
        assert profile.income == 5000
        assert profile.expenses == 3000
        assert profile.allocation == 0.2
        assert profile.target == 1.0
        assert profile.spent_so_far == 0
        assert profile.id

    def test_zero_income_is_allowed(self):
        profile = commands.profile_from_onboarding({"income": "0", "expenses": "0"})
        assert profile.income == 0

    def test_income_and_expenses_required(self):
        with pytest.raises(ProfileValidationError):
            commands.profile_from_onboarding({"income": "", "expenses": "100"})

    def test_invalid_allocation_rejected(self):
        with pytest.raises(ProfileValidationError) as exc_info:
            commands.profile_from_onboarding({"income": "100", "expenses": "50", "allocation": "1.5"})
        assert exc_info.value.errors[0].field == "allocation"

    def test_create_profile_activates_and_opens_dashboard(self, sample_profile):
        state = AppState(view=ViewState.ONBOARDING)

        new_state = commands.create_profile(state, sample_profile)

        assert new_state.profiles == (sample_profile,)
        assert new_state.active_profile_id == sample_profile.id
        assert new_state.view == ViewState.DASHBOARD
        assert state.profiles == ()

    def test_create_profile_outside_onboarding(self, sample_profile):
        with pytest.raises(StateTransitionError):
            commands.create_profile(AppState(view=ViewState.LANDING), sample_profile)


class TestAddAndSelect:

    def test_add_profile_uses_starter_figures(self, dashboard_state):
        new_state = commands.add_profile(dashboard_state, "  Kids Fund ")

        added = new_state.profiles[-1]
        assert added.name == "Kids Fund"
        assert (added.income, added.expenses, added.allocation) == (5000, 3000, 0.2)
        assert (added.holdings, added.target, added.spent_so_far) == (0, 1.0, 0)
        assert new_state.active_profile_id == dashboard_state.active_profile_id

    def test_add_profile_blank_name_ignored(self, dashboard_state):
        assert commands.add_profile(dashboard_state, "   ") is dashboard_state

    def test_select_profile(self, dashboard_state, second_profile):
        new_state = commands.select_profile(dashboard_state, second_profile.id)
        assert new_state.active_profile == second_profile

    def test_select_unknown_profile(self, dashboard_state):
        with pytest.raises(MissingDataError):
            commands.select_profile(dashboard_state, "missing")


class TestUpdateField:

    def test_numeric_field_edit(self, dashboard_state):
        new_state = commands.update_profile_field(dashboard_state, "income", "6500")

        assert new_state.active_profile.income == 6500
        assert new_state.profiles[1] == dashboard_state.profiles[1]

    def test_camel_case_field_name(self, dashboard_state):
        new_state = commands.update_profile_field(dashboard_state, "spentSoFar", 12.5)
        assert new_state.active_profile.spent_so_far == 12.5

    def test_rename(self, dashboard_state):
        new_state = commands.update_profile_field(dashboard_state, "name", " Main ")
        assert new_state.active_profile.name == "Main"

    @pytest.mark.parametrize("field, value", [
        ("income", -1), ("allocation", 0), ("target", 0), ("holdings", "abc"), ("name", ""),
    ])
    def test_invalid_values_rejected(self, dashboard_state, field, value):
        with pytest.raises(ProfileValidationError):
            commands.update_profile_field(dashboard_state, field, value)

    def test_id_not_editable(self, dashboard_state):
        with pytest.raises(ProfileValidationError):
            commands.update_profile_field(dashboard_state, "id", "other")

    def test_unknown_field(self, dashboard_state):
        with pytest.raises(ProfileValidationError):
            commands.update_profile_field(dashboard_state, "salary", 1)

    def test_no_active_profile(self):
        with pytest.raises(MissingDataError):
            commands.update_profile_field(AppState(), "income", 1)


class TestExecuteBuy:

    def test_buy_updates_spent_and_holdings(self, dashboard_state, second_profile):
        new_state = commands.execute_buy(dashboard_state, 100, 100000)

        active = new_state.active_profile
        assert active.spent_so_far == pytest.approx(100)
        assert active.holdings == pytest.approx(0.001)
        assert new_state.find(second_profile.id) == second_profile

    def test_buys_accumulate(self, dashboard_state):
        state = commands.execute_buy(dashboard_state, 50, 100000)
        state = commands.execute_buy(state, 50, 50000)

        assert state.active_profile.spent_so_far == pytest.approx(100)
        assert state.active_profile.holdings == pytest.approx(0.0015)

    @pytest.mark.parametrize("amount, price", [(0, 100000), (-5, 100000), (10, 0), ("x", 100000)])
    def test_rejected_buys_are_no_ops(self, dashboard_state, amount, price):
        assert commands.execute_buy(dashboard_state, amount, price) is dashboard_state

    def test_no_active_profile(self):
        state = AppState()
        assert commands.execute_buy(state, 100, 100000) is state


class TestDeleteProfile:

    def test_delete_inactive_profile(self, dashboard_state, sample_profile, second_profile):
        new_state = commands.delete_profile(dashboard_state, second_profile.id)

        assert new_state.profiles == (sample_profile,)
        assert new_state.active_profile_id == sample_profile.id
        assert new_state.view == ViewState.DASHBOARD

    def test_delete_active_profile_reassigns(self, dashboard_state, sample_profile, second_profile):
        new_state = commands.delete_profile(dashboard_state, sample_profile.id)

        assert new_state.profiles == (second_profile,)
        assert new_state.active_profile_id == second_profile.id

    def test_delete_last_profile_returns_to_onboarding(self, sample_profile):
        state = AppState(profiles=(sample_profile,), active_profile_id=sample_profile.id,
                         view=ViewState.PROFILES)

        new_state = commands.delete_profile(state, sample_profile.id)

        assert new_state.profiles == ()
        assert new_state.active_profile_id is None
        assert new_state.view == ViewState.ONBOARDING

    def test_delete_unknown_profile(self, dashboard_state):
        assert commands.delete_profile(dashboard_state, "missing") is dashboard_state


class TestNavigate:

    def test_navigate(self, dashboard_state):
        new_state = commands.navigate(dashboard_state, ViewAction.OPEN_SIMULATION)

        assert new_state.view == ViewState.SIMULATION
        assert new_state.profiles is dashboard_state.profiles


class TestAppState:

    def test_active_profile_falls_back_to_first(self, sample_profile, second_profile):
        state = AppState(profiles=(sample_profile, second_profile), active_profile_id="gone")
        assert state.active_profile == sample_profile

    def test_empty_state(self):
        state = AppState()
        assert state.active_profile is None
        assert state.has_profiles is False
        assert state.view == ViewState.LANDING

    def test_profile_round_trip_keys(self):
        profile = Profile(id="1", name="a", spent_so_far=3)
        assert profile.to_dict()["spentSoFar"] == 3
        assert Profile.from_dict(profile.to_dict()) == profile
