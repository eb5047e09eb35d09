"""Calendar-day arithmetic for schedule dates.

No time zones and no business-day calendars: every date is a plain
calendar date and every offset is a whole number of days. A missing
start date stays missing.
"""

from __future__ import annotations

from datetime import date, timedelta


def add_days(start: date | None, days: int) -> date | None:
    """Shift ``start`` by ``days`` calendar days (negative moves back)."""
    if start is None:
        return None
    return start + timedelta(days=days)


def add_weeks(start: date | None, weeks: int) -> date | None:
    """Shift ``start`` by ``weeks`` * 7 calendar days."""
    return add_days(start, weeks * 7)
