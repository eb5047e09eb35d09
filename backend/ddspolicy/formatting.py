"""Formatting helpers for schedule output.

Dates are shown the way site and design teams write them in DDS trackers
(e.g. '01 Jan 2026'); day offsets carry an explicit sign.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

MISSING_DATE = "n/a"


def format_date(value: date | None) -> str:
    """Format a date as 'DD Mon YYYY', or 'n/a' when it is missing."""
    if value is None:
        return MISSING_DATE
    return value.strftime("%d %b %Y")


def format_day_offset(days: int) -> str:
    """Format a day offset with an explicit sign ('+30 days', '-7 days').

    Zero is shown unsigned and a single day is singular.
    """
    unit = "day" if abs(days) == 1 else "days"
    if days == 0:
        return f"0 {unit}"
    return f"{days:+d} {unit}"


def format_weeks(days: int) -> str:
    """Format a duration in days as whole weeks plus remaining days."""
    weeks, rest = divmod(abs(days), 7)
    sign = "-" if days < 0 else ""
    if rest == 0:
        return f"{sign}{weeks} wk"
    if weeks == 0:
        return f"{sign}{rest} d"
    return f"{sign}{weeks} wk {rest} d"
