"""Clock and calendar texts for the desktop."""

from __future__ import annotations

import calendar as _calendar
import datetime as _dt

CLOCK_PLACEHOLDER = "Time: --:--:--"

_SHOWN_YEAR = 2025
_SHOWN_MONTH = 5
_MONTH_NAMES = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAY_HEADER = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def _month_grid(year: int, month: int) -> str:
    weeks = _calendar.Calendar(firstweekday=_calendar.SUNDAY).monthdayscalendar(
        year, month
    )
    lines = [f"    {_MONTH_NAMES[month]} {year}", " ".join(_WEEKDAY_HEADER)]
    lines.extend(
        " ".join(f"{day:2d}" if day else "  " for day in week).rstrip()
        for week in weeks
    )
    return "\n".join(lines) + "\n"


def clock_text(now: _dt.datetime | None = None) -> str:
    """Return the clock line for ``now``, the local time by default."""
    return (now or _dt.datetime.now()).strftime("Time: %H:%M:%S")


def calendar_text() -> str:
    """Return the fixed month calendar shown on the desktop."""
    return _month_grid(_SHOWN_YEAR, _SHOWN_MONTH)