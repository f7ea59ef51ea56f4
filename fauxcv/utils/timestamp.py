"""Timestamp formatting utilities."""

from datetime import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]


def now(clock: Optional[Clock] = None) -> str:
    """Compact timestamp for directory names, e.g. 20251114_123456."""
    return (clock or datetime.now)().strftime("%Y%m%d_%H%M%S")


def month_year(dt: datetime) -> str:
    """Format a date as '<Month name> <Year>', e.g. 'March 2024'."""
    return f"{MONTH_NAMES[dt.month - 1]} {dt.year}"


def shift_months(dt: datetime, months: int) -> datetime:
    """
    Move a datetime back by a number of months, clamping the day to the target month.

    Args:
        dt: Starting point
        months: Number of months to subtract (negative values move forward)

    Returns:
        Shifted datetime
    """
    total = dt.year * 12 + (dt.month - 1) - months
    year, month_index = divmod(total, 12)
    day = min(dt.day, _days_in_month(year, month_index + 1))
    return dt.replace(year=year, month=month_index + 1, day=day)


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (datetime(year, month + 1, 1) - datetime(year, month, 1)).days


# English names regardless of process locale
MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
