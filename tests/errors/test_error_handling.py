"""
Error handling tests.

Covers the error classification hierarchy and how request, payload and
storage failures surface through the components that raise them.
"""

import pytest

from satsignal.errors import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    PersistenceError,
    ProfileValidationError,
    RecoverableError,
    StateTransitionError,
    SystemFailureError,
    UnrecoverableError,
)
from satsignal.state.machine import transition_view
from satsignal.state.models import ViewAction, ViewState
from satsignal.utils.retry import PermanentRequestError, RetryableRequestError


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingDataError("missing data", data_type="fear_greed")
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.data_type == "fear_greed"

        malformed_error = MalformedDataError("bad json", raw_data="{", expected_format="json")
        assert isinstance(malformed_error, DataQualityError)
        assert malformed_error.raw_data == "{"
        assert malformed_error.expected_format == "json"

        profile_error = ProfileValidationError("bad profile", errors=["allocation"])
        assert profile_error.recoverable is True
        assert profile_error.errors == ["allocation"]

    def test_system_failure_error_hierarchy(self):
        state_error = StateTransitionError(
            "invalid transition", current_state="landing", attempted_transition="open_profiles"
        )
        assert isinstance(state_error, SystemFailureError)
        assert state_error.recoverable is False
        assert state_error.current_state == "landing"

        storage_error = PersistenceError("disk full", operation="save", target="profiles.json")
        assert isinstance(storage_error, SystemFailureError)
        assert storage_error.operation == "save"
        assert storage_error.target == "profiles.json"

    def test_request_error_classification(self):
        transient = RetryableRequestError("HTTP 503")
        permanent = PermanentRequestError("HTTP 404")

        assert isinstance(transient, RecoverableError)
        assert transient.recoverable is True
        assert transient.max_retries == 3
        assert isinstance(permanent, UnrecoverableError)
        assert permanent.recoverable is False

    def test_context_is_kept(self):
        error = MissingDataError("missing", data_type="markets", context={"url": "x"})
        assert error.context == {"url": "x"}


class TestStateTransitionErrors:

    def test_illegal_transition_carries_states(self):
        with pytest.raises(StateTransitionError) as exc_info:
            transition_view(ViewState.LANDING, ViewAction.OPEN_PROFILES, has_profiles=True)

        assert exc_info.value.current_state == "landing"
        assert exc_info.value.attempted_transition == ViewAction.OPEN_PROFILES.value
