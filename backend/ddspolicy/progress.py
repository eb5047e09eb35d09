"""Progress views over a generated schedule.

These helpers read generated items and drawing entries; they never change
them. They back the dashboard views: due-date colouring, the planned
S-curve and per-phase / per-register summaries.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel

from ddspolicy.models.enums import DueStatus, ListType  # noqa: TCH001

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ddspolicy.models.schedule import DrawingListEntry, GeneratedDeliverableItem

DUE_SOON_DAYS = 7
PROJECT_LEVEL_GROUP = "All"


class PhaseSummary(BaseModel):
    """Item count and date span of one phase."""

    phase: str
    count: int
    first_start: date | None = None
    last_completion: date | None = None


class DrawingGroupSummary(BaseModel):
    """Drawing count for one register / tower / category / trade group."""

    list_type: ListType
    tower: str
    category: str
    trade: str
    count: int


class ProgressPoint(BaseModel):
    """Cumulative planned completion for one group at one month end."""

    group: str
    month: str
    completed_items: int
    total_items: int
    planned_percent: float


def due_status(
    completion_date: date | None,
    today: date,
    *,
    completed: bool = False,
    revised: bool = False,
) -> DueStatus:
    """Classify an item for display relative to ``today``.

    Completed items are always ``completed``. An open item past its date is
    ``overdue``; one due within seven days is ``due_soon``. Revised items
    that are neither overdue nor due soon show as ``revised``.
    """
    if completed:
        return DueStatus.COMPLETED
    if completion_date is not None:
        days_left = (completion_date - today).days
        if days_left < 0:
            return DueStatus.OVERDUE
        if days_left <= DUE_SOON_DAYS:
            return DueStatus.DUE_SOON
    if revised:
        return DueStatus.REVISED
    return DueStatus.PENDING


def summarize_phases(items: Iterable[GeneratedDeliverableItem]) -> list[PhaseSummary]:
    """Per-phase counts and date spans, in the order phases first appear."""
    summaries: dict[str, PhaseSummary] = {}
    for item in items:
        summary = summaries.get(item.phase)
        if summary is None:
            summary = PhaseSummary(phase=item.phase, count=0)
            summaries[item.phase] = summary
        summary.count += 1

        start = item.expected_start_date
        if start is not None and (
            summary.first_start is None or start < summary.first_start
        ):
            summary.first_start = start
        end = item.expected_completion_date
        if end is not None and (
            summary.last_completion is None or end > summary.last_completion
        ):
            summary.last_completion = end
    return list(summaries.values())


def summarize_drawings(
    entries: Iterable[DrawingListEntry],
) -> list[DrawingGroupSummary]:
    """Drawing counts grouped by register, tower, category and trade."""
    counts: dict[tuple[ListType, str, str, str], int] = {}
    for entry in entries:
        key = (entry.list_type, entry.tower, entry.category, entry.trade)
        counts[key] = counts.get(key, 0) + 1
    return [
        DrawingGroupSummary(
            list_type=list_type,
            tower=tower,
            category=category,
            trade=trade,
            count=count,
        )
        for (list_type, tower, category, trade), count in counts.items()
    ]


def _month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _month_ends(first: date, last: date) -> list[date]:
    ends: list[date] = []
    year, month = first.year, first.month
    while (year, month) <= (last.year, last.month):
        ends.append(_month_end(year, month))
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return ends


def planned_progress_curve(
    items: Iterable[GeneratedDeliverableItem],
) -> list[ProgressPoint]:
    """Monthly cumulative planned-completion percentage per building.

    Project-level items are grouped under ``All``. Items without a
    completion date are left out. Every group shares the same month axis,
    from the earliest start to the latest completion.
    """
    groups: dict[str, list[date]] = {}
    starts: list[date] = []
    for item in items:
        if item.expected_completion_date is None:
            continue
        group = item.building_name or PROJECT_LEVEL_GROUP
        groups.setdefault(group, []).append(item.expected_completion_date)
        starts.append(item.expected_start_date or item.expected_completion_date)

    if not groups:
        return []

    last = max(d for completions in groups.values() for d in completions)
    months = _month_ends(min(starts), last)

    points: list[ProgressPoint] = []
    for group, completions in groups.items():
        total = len(completions)
        for month_end in months:
            done = sum(1 for d in completions if d <= month_end)
            points.append(
                ProgressPoint(
                    group=group,
                    month=month_end.strftime("%Y-%m"),
                    completed_items=done,
                    total_items=total,
                    planned_percent=round(done * 100 / total, 1),
                )
            )
    return points
