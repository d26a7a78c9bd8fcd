"""
Screen state machine.

Transitions are explicit: each action is legal only from certain screens, and
illegal requests raise StateTransitionError instead of silently switching.
"""

from ..errors import StateTransitionError
from ..logging.config import get_state_logger, log_state_transition
from .models import TAB_TARGETS, ViewAction, ViewState

state_logger = get_state_logger(__name__)


def transition_view(current: ViewState, action: ViewAction, has_profiles: bool) -> ViewState:
    """
    Resolve the screen reached by ``action``.

    Args:
        current: Screen currently shown
        action: Requested action
        has_profiles: Whether at least one profile exists

    Returns:
        Target screen

    Raises:
        StateTransitionError: If the action is not legal from ``current``
    """
    target = _resolve(current, action, has_profiles)

    log_state_transition(
        state_logger,
        from_state=current.value,
        to_state=target.value,
        trigger=action.value,
        context={"has_profiles": has_profiles}
    )
    return target


def _resolve(current: ViewState, action: ViewAction, has_profiles: bool) -> ViewState:
    if action == ViewAction.GO_HOME:
        return ViewState.LANDING

    if action == ViewAction.PROFILES_EXHAUSTED:
        return ViewState.ONBOARDING

    if action == ViewAction.START:
        _require(current == ViewState.LANDING, current, action, "start is only available on the landing screen")
        return ViewState.DASHBOARD if has_profiles else ViewState.ONBOARDING

    if action == ViewAction.COMPLETE_ONBOARDING:
        _require(current == ViewState.ONBOARDING, current, action, "onboarding is not in progress")
        _require(has_profiles, current, action, "onboarding produced no profile")
        return ViewState.DASHBOARD

    if action == ViewAction.SAVE_PROFILES:
        _require(current == ViewState.PROFILES, current, action, "profile manager is not open")
        return ViewState.DASHBOARD

    if action in TAB_TARGETS:
        _require(current != ViewState.LANDING, current, action, "tabs are not shown on the landing screen")
        _require(has_profiles, current, action, "tabs need an active profile")
        return TAB_TARGETS[action]

    raise StateTransitionError(
        f"Unknown view action: {action}",
        current_state=current.value,
        attempted_transition=str(action)
    )


def _require(condition: bool, current: ViewState, action: ViewAction, reason: str) -> None:
    if not condition:
        raise StateTransitionError(
            f"Cannot {action.value} from {current.value}: {reason}",
            current_state=current.value,
            attempted_transition=action.value
        )
