"""Tests for formatting helpers and the result summary methods."""

from __future__ import annotations

from datetime import date

import pytest

from ddspolicy.data.repository import PolicyRepository
from ddspolicy.engine import DdsPolicyEngine
from ddspolicy.formatting import format_date, format_day_offset, format_weeks
from ddspolicy.models.config import BuildingInput, PolicyConfig
from ddspolicy.models.schedule import DdsPolicyResult

# ---------- Helpers ----------


def _result(height: float = 100.0) -> DdsPolicyResult:
    config = PolicyConfig(
        project_start_date=date(2026, 1, 1),
        buildings=[BuildingInput(id=1, name="Tower A", height=height)],
    )
    return DdsPolicyEngine(PolicyRepository()).generate(config)


# ---------- format_date ----------


class TestFormatDate:
    def test_date(self) -> None:
        assert format_date(date(2026, 7, 30)) == "30 Jul 2026"

    def test_single_digit_day_is_padded(self) -> None:
        assert format_date(date(2026, 1, 1)) == "01 Jan 2026"

    def test_missing(self) -> None:
        assert format_date(None) == "n/a"


# ---------- format_day_offset ----------


class TestFormatDayOffset:
    @pytest.mark.parametrize(
        ("days", "expected"),
        [
            (30, "+30 days"),
            (-7, "-7 days"),
            (0, "0 days"),
            (1, "+1 day"),
            (-1, "-1 day"),
        ],
    )
    def test_offsets(self, days: int, expected: str) -> None:
        assert format_day_offset(days) == expected


# ---------- format_weeks ----------


class TestFormatWeeks:
    def test_whole_weeks(self) -> None:
        assert format_weeks(28) == "4 wk"

    def test_days_only(self) -> None:
        assert format_weeks(3) == "3 d"

    def test_weeks_and_days(self) -> None:
        assert format_weeks(15) == "2 wk 1 d"

    def test_negative(self) -> None:
        assert format_weeks(-14) == "-2 wk"

    def test_zero(self) -> None:
        assert format_weeks(0) == "0 wk"


# ---------- DdsPolicyResult.to_summary_dict ----------


class TestResultSummary:
    def test_summary_fields(self) -> None:
        summary = _result().to_summary_dict()

        assert summary["tier_label"] == "90-120m"
        assert summary["max_height_formatted"] == "100.0 m"
        assert summary["tower_count"] == 1
        assert summary["total_items"] == 70
        assert summary["first_start_formatted"] == "16 Jan 2026"
        assert summary["height_modifier_formatted"] == "0 days"
        assert summary["land_modifier_formatted"] == "0 days"

    def test_tall_building_modifier(self) -> None:
        summary = _result(150.0).to_summary_dict()
        assert summary["height_modifier_formatted"] == "+30 days"

    def test_phase_rows(self) -> None:
        phases = _result().to_summary_dict()["phases"]

        assert [p["phase"] for p in phases][:2] == ["A - Concept", "B - Liaison"]
        assert sum(p["count"] for p in phases) == 70
        dd = next(p for p in phases if p["phase"] == "E - DD (Design Development)")
        assert dd["count"] == 5
