"""Output models for generated schedules and drawing registers."""

from __future__ import annotations

from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)
from typing import Any

from pydantic import BaseModel, Field

from ddspolicy.models.catalog import HeightTier  # noqa: TCH001
from ddspolicy.models.enums import CanonicalLevel, ListType, Scope  # noqa: TCH001


class DerivedLevel(BaseModel):
    """A canonical level in one tower's ordered level list."""

    level: CanonicalLevel
    label: str
    floor_count: int = 0


class GeneratedDeliverableItem(BaseModel):
    """A dated deliverable materialised from a template."""

    sort_order: int
    building_id: str | int | None = None
    building_name: str | None = None
    phase: str
    section: str
    sr_no: int | None = None
    item_name: str
    trade: str | None = None
    discipline: str
    level_type: CanonicalLevel | None = None
    remarks: str = ""
    dependency_text: str = ""
    stakeholders: str = ""
    scope: Scope = Scope.PLANT
    policy_day_offset: int
    expected_start_date: date | None
    expected_completion_date: date | None
    architect_input_date: date | None = None
    structure_input_date: date | None = None
    is_external_area: bool = False
    external_area_type: str | None = None


class PolicyMetadata(BaseModel):
    """How a schedule was derived."""

    tier: HeightTier
    max_height: float
    height_modifier_days: int
    basement_modifier_days: int
    land_modifier_days: int
    tower_count: int
    tower_stagger_weeks: int
    total_items: int
    phases: dict[str, int]
    policy_version: str
    template_source: str


class DdsPolicyResult(BaseModel):
    """Items plus metadata for one generated schedule."""

    items: list[GeneratedDeliverableItem]
    metadata: PolicyMetadata

    def to_summary_dict(self) -> dict[str, Any]:
        """Flat summary for display."""
        from ddspolicy.formatting import format_date, format_day_offset
        from ddspolicy.progress import summarize_phases

        starts = [i.expected_start_date for i in self.items if i.expected_start_date]
        ends = [
            i.expected_completion_date for i in self.items if i.expected_completion_date
        ]
        return {
            "tier_label": self.metadata.tier.label,
            "max_height_formatted": f"{self.metadata.max_height:,.1f} m",
            "tower_count": self.metadata.tower_count,
            "total_items": self.metadata.total_items,
            "first_start_formatted": format_date(min(starts) if starts else None),
            "last_completion_formatted": format_date(max(ends) if ends else None),
            "height_modifier_formatted": format_day_offset(
                self.metadata.height_modifier_days
            ),
            "land_modifier_formatted": format_day_offset(
                self.metadata.land_modifier_days
            ),
            "phases": [
                {
                    "phase": s.phase,
                    "count": s.count,
                    "start_formatted": format_date(s.first_start),
                    "end_formatted": format_date(s.last_completion),
                }
                for s in summarize_phases(self.items)
            ],
        }


class PolicyPreview(BaseModel):
    """A cheap look at what a configuration would generate."""

    metadata: PolicyMetadata
    item_count: int
    phases: dict[str, int]
    sample_items: list[GeneratedDeliverableItem]
    height_tier: HeightTier


class DrawingListEntry(BaseModel):
    """One row of a VFC or DD drawing register."""

    building_id: str | int
    list_type: ListType
    sr_no: int
    trade: str
    doc_type: str
    tower: str
    level: str
    description: str
    category: str
    dds_date: date | None
    sort_order: int


class DrawingLists(BaseModel):
    """Both drawing registers for a project."""

    vfc_drawings: list[DrawingListEntry] = Field(default_factory=list)
    dd_drawings: list[DrawingListEntry] = Field(default_factory=list)

    def to_summary_dict(self) -> dict[str, Any]:
        """Counts per register and per tower for display."""
        from ddspolicy.progress import summarize_drawings

        towers: dict[str, dict[str, int]] = {}
        for entry in [*self.vfc_drawings, *self.dd_drawings]:
            counts = towers.setdefault(entry.tower, {"VFC": 0, "DD": 0})
            counts[entry.list_type.value] += 1

        return {
            "vfc_count": len(self.vfc_drawings),
            "dd_count": len(self.dd_drawings),
            "towers": [
                {"tower": name, "vfc_count": c["VFC"], "dd_count": c["DD"]}
                for name, c in towers.items()
            ],
            "groups": [
                g.model_dump(mode="json")
                for g in summarize_drawings([*self.vfc_drawings, *self.dd_drawings])
            ],
        }
