"""Age from a date of birth."""

from __future__ import annotations

import datetime as _dt

from ossim.textnum import atoi

INVALID_DATE = "Invalid date entered!"

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_valid_birth_date(day: int, month: int, year: int) -> bool:
    """Check the date loosely: February may have 29 days in any year."""
    if day <= 0 or month <= 0 or year <= 0 or month > 12 or day > 31:
        return False
    if month == 2 and day > 29:
        return False
    if month in _THIRTY_DAY_MONTHS and day > 30:
        return False
    return True


def calculate_age(
    day: int, month: int, year: int, today: _dt.date | None = None
) -> int:
    """Return completed years since the birth date; raise ValueError if it is invalid."""
    if not is_valid_birth_date(day, month, year):
        raise ValueError(INVALID_DATE)
    today = today or _dt.date.today()
    age = today.year - year
    if (today.month, today.day) < (month, day):
        age -= 1
    return age


def age_message(
    day_text: str, month_text: str, year_text: str, today: _dt.date | None = None
) -> str:
    """Return the text shown for a date of birth typed as day, month and year."""
    try:
        age = calculate_age(atoi(day_text), atoi(month_text), atoi(year_text), today)
    except ValueError:
        return INVALID_DATE
    return f"You are {age} years old."