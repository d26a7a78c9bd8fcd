"""
Application state data models.

This module defines the immutable state object threaded through the command
functions, and the screen/action enums of the view state machine.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..models.profile import Profile


class ViewState(str, Enum):
    """Named screens."""
    LANDING = "landing"
    ONBOARDING = "onboarding"
    DASHBOARD = "dashboard"
    SIMULATION = "simulation"
    PROFILES = "profiles"


class ViewAction(str, Enum):
    """Actions that move between screens."""
    START = "start"
    COMPLETE_ONBOARDING = "complete_onboarding"
    OPEN_DASHBOARD = "open_dashboard"
    OPEN_SIMULATION = "open_simulation"
    OPEN_PROFILES = "open_profiles"
    SAVE_PROFILES = "save_profiles"
    GO_HOME = "go_home"
    PROFILES_EXHAUSTED = "profiles_exhausted"


# Tab screens reachable from any screen past the landing page
TAB_TARGETS = {
    ViewAction.OPEN_DASHBOARD: ViewState.DASHBOARD,
    ViewAction.OPEN_SIMULATION: ViewState.SIMULATION,
    ViewAction.OPEN_PROFILES: ViewState.PROFILES,
}


@dataclass(frozen=True)
class AppState:
    """Profile collection, active selection and current screen."""

    profiles: tuple[Profile, ...] = ()
    active_profile_id: Optional[str] = None
    view: ViewState = ViewState.LANDING

    @property
    def has_profiles(self) -> bool:
        return bool(self.profiles)

    @property
    def active_profile(self) -> Optional[Profile]:
        """Active profile, falling back to the first one."""
        for profile in self.profiles:
            if profile.id == self.active_profile_id:
                return profile
        return self.profiles[0] if self.profiles else None

    def find(self, profile_id: str) -> Optional[Profile]:
        for profile in self.profiles:
            if profile.id == profile_id:
                return profile
        return None

    def with_changes(self, **changes) -> 'AppState':
        """Create new state with the given fields replaced."""
        return replace(self, **changes)
