"""Tests for the VFC and DD drawing register generator."""

from __future__ import annotations

from datetime import date

import pytest

from ddspolicy.data.repository import PolicyRepository
from ddspolicy.drawings import DrawingListGenerator, tower_label
from ddspolicy.models.config import BuildingInput, FloorInput, PolicyConfig
from ddspolicy.models.enums import CanonicalLevel, DdsType, ListType
from ddspolicy.models.schedule import DrawingListEntry, DrawingLists

START = date(2026, 1, 1)


@pytest.fixture()
def generator() -> DrawingListGenerator:
    return DrawingListGenerator(PolicyRepository())


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _floors(typical_count: int = 10, *, basement: bool = False) -> tuple[FloorInput, ...]:
    floors: list[FloorInput] = []
    if basement:
        floors.append(FloorInput(number=-1, name="Basement 1"))
    floors.append(FloorInput(number=0, name="Ground"))
    floors += [FloorInput(number=n, name=str(n)) for n in range(1, typical_count + 1)]
    floors.append(FloorInput(number=typical_count + 1, name="Terrace"))
    return tuple(floors)


def _tower(
    name: str = "Tower A",
    tower_index: int = 0,
    floors: tuple[FloorInput, ...] | None = None,
    **overrides: object,
) -> BuildingInput:
    return BuildingInput(
        id=tower_index + 1,
        name=name,
        height=40.0,
        tower_index=tower_index,
        floors=floors if floors is not None else _floors(),
        **overrides,  # type: ignore[arg-type]
    )


def _config(buildings: list[BuildingInput] | None = None, **overrides: object) -> PolicyConfig:
    fields: dict[str, object] = {
        "project_start_date": START,
        "buildings": buildings if buildings is not None else [_tower()],
    }
    fields.update(overrides)
    return PolicyConfig(**fields)  # type: ignore[arg-type]


def _section(entries: list[DrawingListEntry], category: str) -> list[DrawingListEntry]:
    return [e for e in entries if e.category == category]


# ---------------------------------------------------------------------------
# VFC register
# ---------------------------------------------------------------------------


class TestVfcRegister:
    def test_entry_count(self, generator: DrawingListGenerator) -> None:
        """Eight trades at three levels plus lightning protection at terrace."""
        lists = generator.generate(_config())
        assert len(lists.vfc_drawings) == 25

    def test_first_entry(self, generator: DrawingListGenerator) -> None:
        first = generator.generate(_config()).vfc_drawings[0]

        assert first.list_type == ListType.VFC
        assert first.sr_no == 1
        assert first.sort_order == 1
        assert first.trade == "Fire Fighting"
        assert first.level == CanonicalLevel.GROUND_FLOOR.value
        assert first.description == "Fire Fighting Layout - GROUND floor - Tower A"
        assert first.category == "VFC Layouts"
        assert first.doc_type == "Drawing"
        assert first.building_id == 1

    def test_dates_follow_level_weeks(self, generator: DrawingListGenerator) -> None:
        entries = generator.generate(_config()).vfc_drawings
        by_level = {e.level: e.dds_date for e in entries if e.trade == "HVAC"}

        # ground 24 + 2, typical 28 + 2, terrace 36 + 2 weeks
        assert by_level["GROUND FLOOR"] == date(2026, 7, 2)
        assert by_level["TYPICAL FLOOR"] == date(2026, 7, 30)
        assert by_level["TERRACE FLOOR"] == date(2026, 9, 24)

    def test_lightning_protection_only_at_terrace(
        self, generator: DrawingListGenerator
    ) -> None:
        entries = generator.generate(_config()).vfc_drawings
        lps = [e for e in entries if e.trade == "Lightning Protection"]
        assert [e.level for e in lps] == ["TERRACE FLOOR"]

    def test_typical_label_in_description(self, generator: DrawingListGenerator) -> None:
        entries = generator.generate(_config()).vfc_drawings
        typical = next(e for e in entries if e.level == "TYPICAL FLOOR")
        assert typical.description == (
            "Fire Fighting Layout - Typical Floors (10 nos - 1 to 10) - Tower A"
        )

    def test_basement_not_in_vfc(self, generator: DrawingListGenerator) -> None:
        config = _config([_tower(floors=_floors(basement=True))])
        entries = generator.generate(config).vfc_drawings
        assert all(e.level != "BASEMENT" for e in entries)

    def test_consultant_offset(self, generator: DrawingListGenerator) -> None:
        config = _config(dds_type=DdsType.CONSULTANT)
        first = generator.generate(config).vfc_drawings[0]
        assert first.dds_date == date(2026, 6, 25)


# ---------------------------------------------------------------------------
# DD register
# ---------------------------------------------------------------------------


class TestDdRegister:
    def test_entry_count(self, generator: DrawingListGenerator) -> None:
        """18 calculations (no basement), 11 schematics and 31 layouts."""
        entries = generator.generate(_config()).dd_drawings
        assert len(_section(entries, "A. Calculations")) == 18
        assert len(_section(entries, "B. Schematics")) == 11
        assert len(entries) == 60

    def test_serial_numbers_run_across_sections(
        self, generator: DrawingListGenerator
    ) -> None:
        entries = generator.generate(_config()).dd_drawings
        assert [e.sr_no for e in entries] == list(range(1, len(entries) + 1))
        assert [e.sort_order for e in entries] == [e.sr_no for e in entries]
        assert entries[0].category == "A. Calculations"
        assert entries[18].category == "B. Schematics"
        assert entries[29].category == "CO Layouts"

    def test_section_dates(self, generator: DrawingListGenerator) -> None:
        entries = generator.generate(_config()).dd_drawings

        # calculations week 22 + 6, schematics week 28 + 4
        assert {e.dds_date for e in _section(entries, "A. Calculations")} == {
            date(2026, 7, 16)
        }
        assert {e.dds_date for e in _section(entries, "B. Schematics")} == {
            date(2026, 8, 13)
        }

    def test_layout_dates_slip_per_level_index(
        self, generator: DrawingListGenerator
    ) -> None:
        entries = _section(generator.generate(_config()).dd_drawings, "CO Layouts")

        # week 30 + level index + 3
        assert [e.dds_date for e in entries] == [
            date(2026, 8, 20),
            date(2026, 8, 27),
            date(2026, 9, 3),
        ]

    def test_layout_date_keeps_level_index_when_skipping(
        self, generator: DrawingListGenerator
    ) -> None:
        """Lightning protection skips ground and typical but keeps index 2."""
        entries = _section(generator.generate(_config()).dd_drawings, "LPS Layouts")
        assert len(entries) == 1
        assert entries[0].dds_date == date(2026, 9, 3)

    def test_fixed_entries_have_no_level(self, generator: DrawingListGenerator) -> None:
        entries = generator.generate(_config()).dd_drawings
        calc = entries[0]
        assert calc.level == ""
        assert calc.description == "UGT & OHT Tank Capacity - Tower A"
        assert calc.doc_type == "Calculation"

    def test_basement_floor_enables_basement_calculation(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config([_tower(floors=_floors(basement=True))])
        entries = generator.generate(config).dd_drawings
        calcs = _section(entries, "A. Calculations")
        assert len(calcs) == 19
        assert any("Basement & Pump Room" in e.description for e in calcs)

    def test_building_basement_count_enables_basement_calculation(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config([_tower(basement_count=1)])
        calcs = _section(generator.generate(config).dd_drawings, "A. Calculations")
        assert len(calcs) == 19

    def test_no_parking_drops_parking_ventilation(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config(has_parking=False)
        calcs = _section(generator.generate(config).dd_drawings, "A. Calculations")
        assert len(calcs) == 17
        assert not any("Car Parking" in e.description for e in calcs)

    def test_basement_layouts_for_basement_trades(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config([_tower(floors=_floors(basement=True))])
        entries = generator.generate(config).dd_drawings
        basement_trades = {e.trade for e in entries if e.level == "BASEMENT"}
        assert basement_trades == {
            "Co-ordinate",
            "Builders Work",
            "HVAC",
            "Containment",
            "Lighting",
            "FAVA",
            "ELV",
        }

    def test_consultant_offset(self, generator: DrawingListGenerator) -> None:
        config = _config(dds_type="consultant", consultant_offset_days=-14)
        entries = generator.generate(config).dd_drawings
        assert entries[0].dds_date == date(2026, 7, 2)


# ---------------------------------------------------------------------------
# Towers
# ---------------------------------------------------------------------------


class TestTowers:
    def test_serial_numbers_restart_per_tower(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config([_tower(), _tower("Tower B", 1)])
        lists = generator.generate(config)
        tower_b = [e for e in lists.vfc_drawings if e.tower == "Tower B"]
        assert tower_b[0].sr_no == 1
        assert len(tower_b) == 25

    def test_second_tower_staggered(self, generator: DrawingListGenerator) -> None:
        config = _config([_tower(), _tower("Tower B", 1)])
        lists = generator.generate(config)
        a_first = next(e for e in lists.vfc_drawings if e.tower == "Tower A")
        b_first = next(e for e in lists.vfc_drawings if e.tower == "Tower B")
        assert (b_first.dds_date - a_first.dds_date).days == 28

    def test_towers_ordered_by_tower_index(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config([_tower("Tower B", 1), _tower("Tower A", 0)])
        lists = generator.generate(config)
        assert lists.vfc_drawings[0].tower == "Tower A"
        assert lists.dd_drawings[-1].tower == "Tower B"

    def test_tower_without_floors_uses_fallback_levels(
        self, generator: DrawingListGenerator
    ) -> None:
        config = _config([_tower(floors=())])
        lists = generator.generate(config)
        assert len(lists.vfc_drawings) == 25
        assert lists.vfc_drawings[0].description == (
            "Fire Fighting Layout - Ground Floor - Tower A"
        )

    def test_unnamed_tower_label(self) -> None:
        building = BuildingInput(id=9, name="", tower_index=2)
        assert tower_label(building) == "Tower-3"

    def test_missing_start_date(self, generator: DrawingListGenerator) -> None:
        lists = generator.generate(_config(project_start_date=None))
        assert all(e.dds_date is None for e in lists.vfc_drawings)
        assert all(e.dds_date is None for e in lists.dd_drawings)

    def test_no_buildings(self, generator: DrawingListGenerator) -> None:
        lists = generator.generate(_config([]))
        assert lists == DrawingLists()


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


class TestSummary:
    def test_summary_counts(self, generator: DrawingListGenerator) -> None:
        lists = generator.generate(_config([_tower(), _tower("Tower B", 1)]))
        summary = lists.to_summary_dict()

        assert summary["vfc_count"] == 50
        assert summary["dd_count"] == 120
        assert summary["towers"] == [
            {"tower": "Tower A", "vfc_count": 25, "dd_count": 60},
            {"tower": "Tower B", "vfc_count": 25, "dd_count": 60},
        ]
        lps = next(
            g for g in summary["groups"]
            if g["tower"] == "Tower A" and g["category"] == "LPS Layouts"
        )
        assert lps["count"] == 1
        assert lps["list_type"] == "DD"
