"""
Retry-with-backoff policy for upstream requests.

Wrap a request operation with ``retry`` to get a bounded number of attempts
with a configurable delay schedule between them. The policy is applied by the
caller, never inlined at each request site.
"""

import functools
import time
from collections.abc import Callable
from typing import Any, Optional, TypeVar

import structlog

from ..errors import RecoverableError, UnrecoverableError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class RetryableRequestError(RecoverableError):
    """Transient request failure worth another attempt."""
    pass


class PermanentRequestError(UnrecoverableError):
    """Request failure that must not be retried."""
    pass


def exponential_backoff(base_seconds: float = 1.0) -> Callable[[int], float]:
    """
    Delay schedule doubling after each failed attempt.

    The returned function maps the zero-based index of the failed attempt to
    the delay before the next one: base, 2*base, 4*base, ...
    """
    def schedule(attempt_index: int) -> float:
        return base_seconds * (2 ** attempt_index)
    return schedule


def retry(
    max_attempts: int = 3,
    backoff: Optional[Callable[[int], float]] = None,
    retry_on: tuple[type[BaseException], ...] = (RetryableRequestError, OSError),
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[F], F]:
    """
    Decorate a request operation with retry-with-backoff.

    Args:
        max_attempts: Total attempts including the first one
        backoff: Delay schedule, defaults to exponential_backoff(1.0)
        retry_on: Exception types considered transient
        sleep: Sleep function, replaceable in tests

    Returns:
        Decorator re-raising the last error once attempts are exhausted
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    schedule = backoff or exponential_backoff()

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            name = getattr(func, "__name__", repr(func))
            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except PermanentRequestError:
                    raise
                except retry_on as e:
                    if isinstance(e, RecoverableError):
                        e.retry_count = attempt + 1
                        e.max_retries = max_attempts

                    if attempt + 1 >= max_attempts:
                        logger.warning(
                            "Request failed, retries exhausted",
                            operation=name,
                            attempts=attempt + 1,
                            error=str(e)
                        )
                        raise

                    delay = schedule(attempt)
                    logger.info(
                        "Request failed, retrying",
                        operation=name,
                        attempt=attempt + 1,
                        retry_in_seconds=delay,
                        error=str(e)
                    )
                    sleep(delay)
            raise AssertionError("unreachable")  # pragma: no cover

        return wrapper  # type: ignore[return-value]

    return decorator
