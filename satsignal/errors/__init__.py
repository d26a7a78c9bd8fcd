"""
Error classification system for the recommendation service.

This module provides a structured exception hierarchy for data quality issues,
system failures and recovery categories encountered around the engine.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
    ProfileValidationError,
)
from .system_failures import (
    SystemFailureError,
    StateTransitionError,
    PersistenceError,
)
from .recovery import (
    RecoverableError,
    UnrecoverableError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    "ProfileValidationError",
    # System Failures
    "SystemFailureError",
    "StateTransitionError",
    "PersistenceError",
    # Recovery Categories
    "RecoverableError",
    "UnrecoverableError",
]
