"""Schemas for the static Policy 130 catalogs.

Catalog rows are frozen pydantic models so the tables can be serialised,
versioned and unit-tested independently of the generators that read them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ddspolicy.models.enums import CanonicalLevel, DdsPhase, FeatureKey, Scope


class HeightTier(BaseModel):
    """A Policy 130 timeline tier keyed on building height."""

    model_config = ConfigDict(frozen=True)

    max_height: float
    design_months: int
    construction_months: int
    total_months: int
    label: str


class Milestone(BaseModel):
    """An Annexure-A milestone, in days from master-plan start."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    days_new: int
    days_existing: int
    responsibility: str


class DeliverableTemplate(BaseModel):
    """One row of a phase catalog.

    ``day_offset_new`` is measured from project start assuming new land;
    the engine applies the land and height modifiers on top of it.
    ``level`` is set on level-scoped rows (VFC issues) and left empty on
    calculation-scoped rows.
    """

    model_config = ConfigDict(frozen=True)

    sr_no: int = Field(ge=1)
    name: str
    level: CanonicalLevel | None = None
    remarks: str = ""
    dependency_text: str = ""
    stakeholders: str = ""
    day_offset_new: int = Field(ge=0)
    duration_days: int = Field(ge=0)
    trade: str | None = None
    conditional: FeatureKey | str | None = None
    scope: Scope = Scope.PLANT


class PhaseCatalog(BaseModel):
    """A phase and the templates it expands."""

    model_config = ConfigDict(frozen=True)

    phase: DdsPhase
    label: str
    building_scoped: bool
    gated: bool = False
    templates: tuple[DeliverableTemplate, ...]


class DrawingTemplate(BaseModel):
    """A fixed, floor-independent DD register row (calculation or schematic)."""

    model_config = ConfigDict(frozen=True)

    trade: str
    doc_type: str
    description: str
    conditional: FeatureKey | str | None = None


class LayoutCategory(BaseModel):
    """A DD layout category expanded once per applicable derived level."""

    model_config = ConfigDict(frozen=True)

    category: str
    trade: str


class TradeLevelRule(BaseModel):
    """Levels at which a trade draws, per register.

    ``None`` for a register means the trade has no rule there and is
    treated as applicable at every level.
    """

    model_config = ConfigDict(frozen=True)

    vfc: tuple[CanonicalLevel, ...] | None = None
    dd: tuple[CanonicalLevel, ...] | None = None


class PolicyDescriptor(BaseModel):
    """Read-only description of the default policy for display."""

    name: str
    description: str
    version: int
    policy_number: str
    height_tiers: list[HeightTier]
    phases: list[str]
    phase_catalogs: list[PhaseCatalog]
    vfc_trades: list[str]
    dd_calculations: list[DrawingTemplate]
    dd_schematics: list[DrawingTemplate]
    dd_layout_categories: list[LayoutCategory]
    trade_level_rules: dict[str, TradeLevelRule]
    level_week_offsets: dict[str, int]
    annexure_a: list[Milestone]
    default_tower_stagger_weeks: int
    consultant_offset_days: int
