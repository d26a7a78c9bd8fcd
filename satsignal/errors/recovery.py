"""
Recovery classifications for upstream request failures.

The retry policy attempts a RecoverableError again until its attempts run
out; an UnrecoverableError surfaces on the first occurrence.
"""


class RecoverableError(Exception):
    """Failure that a later attempt may not repeat."""

    def __init__(self, message: str, retry_count: int = 0,
                 max_retries: int = 3, **kwargs):
        super().__init__(message)
        self.retry_count = retry_count
        self.max_retries = max_retries
        self.recoverable = True

    @property
    def exhausted(self) -> bool:
        """True once every allowed attempt has been made."""
        return self.retry_count >= self.max_retries


class UnrecoverableError(Exception):
    """Failure that no further attempt can fix."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.recoverable = False
