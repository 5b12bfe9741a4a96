"""Calendar arithmetic shared by recognition and defaulting.

Pure integer rules only: the recognizer uses them to validate parsed
fields and the constructor uses them to find the last day of a period.
"""

from __future__ import annotations

MIN_YEAR = 1
MAX_YEAR = 9999

QUARTER_MONTHS: dict[int, tuple[int, int]] = {
    1: (1, 3),
    2: (4, 6),
    3: (7, 9),
    4: (10, 12),
}

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, and not by 100 unless also by 400.

    Examples:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year* (28-31)."""
    if not 1 <= month <= 12:
        msg = f"month must be in 1..12, got {month}"
        raise ValueError(msg)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def quarter_months(quarter: int) -> tuple[int, int]:
    """Return ``(first_month, last_month)`` of *quarter*."""
    try:
        return QUARTER_MONTHS[quarter]
    except KeyError:
        msg = f"quarter must be in 1..4, got {quarter}"
        raise ValueError(msg) from None
