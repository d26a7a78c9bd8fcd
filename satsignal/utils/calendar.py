"""
Budgeting period helpers.

The budgeting period is the calendar month; today always counts as one of
the remaining days.
"""

import calendar
from datetime import date
from typing import Optional


def local_today() -> date:
    """Current calendar date in the local time zone."""
    return date.today()


def days_in_month(day: date) -> int:
    """Number of days in the month containing ``day``."""
    return calendar.monthrange(day.year, day.month)[1]


def days_remaining_in_month(today: Optional[date] = None) -> int:
    """
    Days left in the current month, today included.

    Args:
        today: Reference date, defaults to the local calendar date

    Returns:
        1 on the last day of the month, days_in_month on the first
    """
    if today is None:
        today = local_today()
    return days_in_month(today) - today.day + 1
