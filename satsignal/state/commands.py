"""
Profile and view commands.

Every command takes the current AppState and returns a new one; none of them
touch storage. Rejected buys and unknown deletes return the state unchanged.
"""

from typing import Any, Optional

from ..errors import MissingDataError, ProfileValidationError
from ..logging.config import get_state_logger
from ..models.profile import EDITABLE_FIELDS, NUMERIC_FIELDS, Profile, resolve_field_name
from ..utils.numbers import coerce_number
from ..validation.profile_rules import ProfileValidator
from .machine import transition_view
from .models import AppState, ViewAction

state_logger = get_state_logger(__name__)

DEFAULT_PROFILE_NAME = "My Portfolio"


def _raise_if_invalid(values: dict[str, Any]) -> None:
    errors = ProfileValidator.validate_profile(values)
    if errors:
        messages = [f"{err.field}: {err.message} (got: {err.value!r})" for err in errors]
        raise ProfileValidationError(
            "Invalid profile values: " + "; ".join(messages),
            errors=errors
        )


def profile_from_onboarding(form: dict[str, Any]) -> Profile:
    """
    Build a profile from the onboarding form.

    Income and expenses must be filled in (zero is allowed). Blank optional
    fields take the onboarding defaults.

    Raises:
        ProfileValidationError: If required fields are blank or values break
            an invariant
    """
    missing = [key for key in ("income", "expenses") if form.get(key) in (None, "")]
    if missing:
        raise ProfileValidationError(
            "Income and expenses are required",
            errors=missing
        )

    values = {
        "name": str(form.get("name") or DEFAULT_PROFILE_NAME),
        "income": coerce_number(form.get("income")),
        "expenses": coerce_number(form.get("expenses")),
        "allocation": coerce_number(form.get("allocation"), default=0.2),
        "holdings": coerce_number(form.get("holdings")),
        "target": coerce_number(form.get("target"), default=1.0),
        "spent_so_far": 0.0,
    }
    _raise_if_invalid(values)
    return Profile.new(**values)


def create_profile(state: AppState, profile: Profile) -> AppState:
    """Finish onboarding: append the profile, make it active, open the dashboard."""
    _raise_if_invalid({f: getattr(profile, f) for f in EDITABLE_FIELDS})

    profiles = state.profiles + (profile,)
    view = transition_view(state.view, ViewAction.COMPLETE_ONBOARDING, has_profiles=True)

    state_logger.info("Profile created", profile_id=profile.id, name=profile.name)
    return state.with_changes(profiles=profiles, active_profile_id=profile.id, view=view)


def add_profile(state: AppState, name: str) -> AppState:
    """Add a profile with starter figures; a blank name is ignored."""
    if not name or not name.strip():
        return state

    profile = Profile.with_defaults(name.strip())
    active_id = state.active_profile_id or profile.id

    state_logger.info("Profile added", profile_id=profile.id, name=profile.name)
    return state.with_changes(profiles=state.profiles + (profile,), active_profile_id=active_id)


def select_profile(state: AppState, profile_id: str) -> AppState:
    """
    Make another profile active.

    Raises:
        MissingDataError: If no profile has ``profile_id``
    """
    if state.find(profile_id) is None:
        raise MissingDataError(f"Unknown profile: {profile_id}", data_type="profile")
    return state.with_changes(active_profile_id=profile_id)


def update_profile_field(state: AppState, field: str, value: Any) -> AppState:
    """
    Edit one field of the active profile.

    Args:
        state: Current state
        field: Attribute name, snake_case or camelCase
        value: New value; numeric fields accept numbers or numeric strings

    Raises:
        MissingDataError: If there is no active profile
        ProfileValidationError: If the field is unknown or the value invalid
    """
    active = state.find(state.active_profile_id) if state.active_profile_id else None
    if active is None:
        raise MissingDataError("No active profile to edit", data_type="profile")

    attr = resolve_field_name(field)
    if attr is None or attr not in EDITABLE_FIELDS:
        raise ProfileValidationError(f"Field cannot be edited: {field}", errors=[field])

    _raise_if_invalid({attr: value})

    new_value = coerce_number(value) if attr in NUMERIC_FIELDS else value.strip()
    updated = active.updated(**{attr: new_value})

    return state.with_changes(
        profiles=tuple(updated if p.id == active.id else p for p in state.profiles)
    )


def execute_buy(state: AppState, amount: Any, current_price: Any) -> AppState:
    """
    Record a buy against the active profile.

    Adds ``amount`` to the amount spent this period and ``amount / current_price``
    to holdings. Ignored when the amount is not positive, the price is not
    positive or no profile is active.
    """
    spend = coerce_number(amount)
    price = coerce_number(current_price)
    active: Optional[Profile] = (
        state.find(state.active_profile_id) if state.active_profile_id else None
    )

    if spend <= 0 or price <= 0 or active is None:
        state_logger.warning(
            "Buy rejected",
            amount=amount,
            current_price=current_price,
            has_active_profile=active is not None
        )
        return state

    bought = spend / price
    updated = active.updated(
        spent_so_far=active.spent_so_far + spend,
        holdings=active.holdings + bought
    )

    state_logger.info(
        "Buy executed",
        profile_id=active.id,
        amount=spend,
        price=price,
        quantity=bought
    )
    return state.with_changes(
        profiles=tuple(updated if p.id == active.id else p for p in state.profiles)
    )


def delete_profile(state: AppState, profile_id: str) -> AppState:
    """
    Delete a profile.

    The first remaining profile becomes active if the active one was removed;
    deleting the last profile returns to onboarding.
    """
    if state.find(profile_id) is None:
        state_logger.warning("Delete ignored, unknown profile", profile_id=profile_id)
        return state

    remaining = tuple(p for p in state.profiles if p.id != profile_id)
    state_logger.info("Profile deleted", profile_id=profile_id, remaining=len(remaining))

    if not remaining:
        view = transition_view(state.view, ViewAction.PROFILES_EXHAUSTED, has_profiles=False)
        return state.with_changes(profiles=remaining, active_profile_id=None, view=view)

    active_id = state.active_profile_id
    if active_id == profile_id or active_id is None:
        active_id = remaining[0].id

    return state.with_changes(profiles=remaining, active_profile_id=active_id)


def navigate(state: AppState, action: ViewAction) -> AppState:
    """Apply a screen transition."""
    view = transition_view(state.view, action, has_profiles=state.has_profiles)
    return state.with_changes(view=view)
