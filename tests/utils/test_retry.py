"""Tests for the retry-with-backoff decorator."""

from unittest.mock import Mock

import pytest

from satsignal.utils.retry import (
    PermanentRequestError,
    RetryableRequestError,
    exponential_backoff,
    retry,
)


class TestExponentialBackoff:

    def test_schedule_doubles(self):
        schedule = exponential_backoff(1.0)
        assert [schedule(i) for i in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_custom_base(self):
        assert exponential_backoff(0.5)(2) == 2.0


class TestRetry:

    def test_success_first_try(self):
        sleep = Mock()
        operation = Mock(return_value="ok")

        wrapped = retry(max_attempts=3, sleep=sleep)(operation)

        assert wrapped() == "ok"
        assert operation.call_count == 1
        sleep.assert_not_called()

    def test_recovers_after_transient_failures(self):
        sleep = Mock()
        operation = Mock(side_effect=[RetryableRequestError("boom"), OSError("reset"), "ok"])
        operation.__name__ = "operation"

        wrapped = retry(max_attempts=3, sleep=sleep)(operation)

        assert wrapped() == "ok"
        assert operation.call_count == 3
        assert [c.args[0] for c in sleep.call_args_list] == [1.0, 2.0]

    def test_exhausted_attempts_reraise_last_error(self):
        sleep = Mock()
        operation = Mock(side_effect=RetryableRequestError("still down"))
        operation.__name__ = "operation"

        wrapped = retry(max_attempts=3, backoff=exponential_backoff(0.1), sleep=sleep)(operation)

        with pytest.raises(RetryableRequestError, match="still down") as exc_info:
            wrapped()
        assert operation.call_count == 3
        assert exc_info.value.retry_count == 3
        assert exc_info.value.exhausted
        assert sleep.call_count == 2

    def test_permanent_error_not_retried(self):
        sleep = Mock()
        operation = Mock(side_effect=PermanentRequestError("HTTP 404"))
        operation.__name__ = "operation"

        wrapped = retry(max_attempts=5, sleep=sleep)(operation)

        with pytest.raises(PermanentRequestError):
            wrapped()
        assert operation.call_count == 1
        sleep.assert_not_called()

    def test_unlisted_errors_propagate_immediately(self):
        operation = Mock(side_effect=KeyError("bug"))
        operation.__name__ = "operation"

        wrapped = retry(max_attempts=3, sleep=Mock())(operation)

        with pytest.raises(KeyError):
            wrapped()
        assert operation.call_count == 1

    def test_invalid_attempt_count(self):
        with pytest.raises(ValueError):
            retry(max_attempts=0)
