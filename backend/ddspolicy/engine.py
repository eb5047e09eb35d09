"""Deliverable schedule engine for the DDS policy library.

The DdsPolicyEngine expands the nine Policy 130 phase catalogs into a dated
deliverable register:

1. **Height tier** - The tallest building in the project selects the
   timeline tier and decides the tall-building modifier.
2. **Day offset** - Each template's new-land day offset is compressed for
   existing land, then shifted by the height and land modifiers.
3. **Materialisation** - Project phases are emitted once; building phases
   are emitted per tower, shifted by the tower stagger and filtered by the
   template's feature key.
4. **External areas** - Site areas (landscape, club house...) get one VFC
   item per services trade, appended after the nine phases.
5. **Metadata** - Tier, modifiers and per-phase counts are recorded so the
   schedule can be explained later.

The engine performs no I/O and keeps no state between calls; identical
configurations produce identical results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date  # noqa: TCH003
from typing import TYPE_CHECKING

from ddspolicy.conditions import check_conditional
from ddspolicy.dates import add_days
from ddspolicy.data.drawing_templates import (
    DD_CALCULATIONS,
    DD_LAYOUT_CATEGORIES,
    DD_SCHEMATICS,
    EXTERNAL_AREA_SECTION,
    EXTERNAL_AREA_TRADES,
    VFC_TRADES,
)
from ddspolicy.data.height_tiers import (
    DEFAULT_BUILDING_HEIGHT_M,
    TALL_BUILDING_MODIFIER_DAYS,
    TALL_BUILDING_THRESHOLD_M,
)
from ddspolicy.data.phase_catalogs import (
    POLICY_NAME,
    POLICY_NUMBER,
    POLICY_REVISION,
    POLICY_VERSION,
    TEMPLATE_SOURCE,
    VFC_ARCHITECT_LEAD_DAYS,
    VFC_STRUCTURE_LEAD_DAYS,
)
from ddspolicy.data.trade_levels import MEP_SUB_TRADES
from ddspolicy.models.catalog import PolicyDescriptor
from ddspolicy.models.config import PolicyConfig
from ddspolicy.models.enums import DdsPhase
from ddspolicy.models.schedule import (
    DdsPolicyResult,
    GeneratedDeliverableItem,
    PolicyMetadata,
    PolicyPreview,
)

if TYPE_CHECKING:
    from ddspolicy.data.repository import PolicyRepository
    from ddspolicy.models.catalog import DeliverableTemplate, PhaseCatalog
    from ddspolicy.models.config import BuildingInput

logger = logging.getLogger(__name__)

# Existing-land projects start each milestone this many days earlier.
EXISTING_LAND_COMPRESSION_DAYS = 30
# Separate global land adjustment, applied on top of the compression.
EXISTING_LAND_MODIFIER_DAYS = -30
# Reported in metadata only; dates are not moved by basements.
BASEMENT_FIRST_LEVEL_DAYS = 75
BASEMENT_EXTRA_LEVEL_DAYS = 30

DEFAULT_PREVIEW_SAMPLE_SIZE = 20
MEP_DISCIPLINE = "MEP"
POLICY_DESCRIPTION = (
    "Standard DDS policy based on Policy 130 guidelines for marketing "
    "project completion within 3 years 10 months"
)


def max_building_height(config: PolicyConfig) -> float:
    """Tallest building in the project; missing or zero heights count as 30 m."""
    return max(
        [
            DEFAULT_BUILDING_HEIGHT_M,
            *(b.height or DEFAULT_BUILDING_HEIGHT_M for b in config.buildings),
        ]
    )


def discipline_for(trade: str | None) -> str:
    """Delivery segment for a trade: MEP sub-trades report as MEP."""
    if trade is None or trade in MEP_SUB_TRADES:
        return MEP_DISCIPLINE
    return trade


def stagger_days(building: BuildingInput, config: PolicyConfig) -> int:
    """Delay applied to every building-scoped date of a tower."""
    return building.tower_index * config.tower_stagger_weeks * 7


@dataclass(frozen=True)
class _Modifiers:
    """Project-wide values derived once per generation call."""

    max_height: float
    height_days: int
    land_days: int
    basement_days: int


class DdsPolicyEngine:
    """Expands the policy catalogs into a dated deliverable register.

    Args:
        repository: The policy repository providing height tiers, phase
            catalogs and the trade/level tables.

    Example::

        from ddspolicy.data.repository import PolicyRepository

        engine = DdsPolicyEngine(PolicyRepository())
        result = engine.generate(config)
    """

    def __init__(self, repository: PolicyRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> PolicyRepository:
        return self._repository

    # ------------------------------------------------------------------
    # Day offsets
    # ------------------------------------------------------------------

    def get_day_offset(self, day_offset_new: int, config: PolicyConfig) -> int:
        """Days from project start for a template, before stagger.

        Existing land compresses each milestone by 30 days (never below
        day 0) and additionally applies the -30 day land modifier. The
        tall-building modifier is taken from the tallest building in the
        whole project, not the building being expanded.
        """
        return self._day_offset(day_offset_new, config, self._modifiers(config))

    def _day_offset(
        self, day_offset_new: int, config: PolicyConfig, modifiers: _Modifiers
    ) -> int:
        if config.is_new_land:
            base = day_offset_new
        else:
            base = max(0, day_offset_new - EXISTING_LAND_COMPRESSION_DAYS)
        return base + modifiers.height_days + modifiers.land_days

    def _modifiers(self, config: PolicyConfig) -> _Modifiers:
        max_height = max_building_height(config)
        height_days = (
            TALL_BUILDING_MODIFIER_DAYS
            if max_height > TALL_BUILDING_THRESHOLD_M
            else 0
        )
        land_days = 0 if config.is_new_land else EXISTING_LAND_MODIFIER_DAYS
        basement_days = 0
        if config.basement_count > 0:
            basement_days = (
                BASEMENT_FIRST_LEVEL_DAYS
                + (config.basement_count - 1) * BASEMENT_EXTRA_LEVEL_DAYS
            )
        return _Modifiers(
            max_height=max_height,
            height_days=height_days,
            land_days=land_days,
            basement_days=basement_days,
        )

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, config: PolicyConfig) -> DdsPolicyResult:
        """Produce the dated deliverable register for a project.

        Phases are emitted in catalog order; within a building-scoped phase
        buildings are taken in configuration order and templates in catalog
        order. ``sort_order`` numbers items 1..N in that emission order.

        Args:
            config: The project configuration.

        Returns:
            A DdsPolicyResult with every item and the generation metadata.
        """
        modifiers = self._modifiers(config)
        tier = self._repository.get_height_tier(modifiers.max_height)
        logger.debug(
            "Tallest building %.1f m -> tier %s (height modifier %+d days)",
            modifiers.max_height, tier.label, modifiers.height_days,
        )

        items: list[GeneratedDeliverableItem] = []
        for catalog in self._repository.phase_catalogs:
            before = len(items)
            if catalog.building_scoped:
                for building in config.buildings:
                    self._expand_templates(
                        items, catalog, config, modifiers, building
                    )
            else:
                self._expand_templates(items, catalog, config, modifiers, None)
            logger.debug(
                "Phase %s: %d items", catalog.phase.value, len(items) - before
            )

        self._append_external_areas(items, config)

        phase_counts: dict[str, int] = {
            catalog.phase.value: 0 for catalog in self._repository.phase_catalogs
        }
        for item in items:
            phase_counts[item.phase] = phase_counts.get(item.phase, 0) + 1

        metadata = PolicyMetadata(
            tier=tier,
            max_height=modifiers.max_height,
            height_modifier_days=modifiers.height_days,
            basement_modifier_days=modifiers.basement_days,
            land_modifier_days=modifiers.land_days,
            tower_count=len(config.buildings),
            tower_stagger_weeks=config.tower_stagger_weeks,
            total_items=len(items),
            phases=phase_counts,
            policy_version=POLICY_VERSION,
            template_source=TEMPLATE_SOURCE,
        )

        logger.info(
            "Generated %d DDS items for %d towers (tier %s)",
            len(items), len(config.buildings), tier.label,
        )
        return DdsPolicyResult(items=items, metadata=metadata)

    def _expand_templates(
        self,
        items: list[GeneratedDeliverableItem],
        catalog: PhaseCatalog,
        config: PolicyConfig,
        modifiers: _Modifiers,
        building: BuildingInput | None,
    ) -> None:
        """Append one phase's items for one building (or the project)."""
        stagger = stagger_days(building, config) if building is not None else 0
        for template in catalog.templates:
            if catalog.gated and not check_conditional(
                template.conditional, config, building
            ):
                logger.debug(
                    "Skipping %s / %s: %s not present",
                    catalog.label, template.name, template.conditional,
                )
                continue
            offset = (
                self._day_offset(template.day_offset_new, config, modifiers)
                + stagger
                + config.dds_type_offset_days
            )
            items.append(
                self._build_item(
                    sort_order=len(items) + 1,
                    catalog=catalog,
                    template=template,
                    building=building,
                    offset=offset,
                    start_date=config.project_start_date,
                )
            )

    def _build_item(
        self,
        *,
        sort_order: int,
        catalog: PhaseCatalog,
        template: DeliverableTemplate,
        building: BuildingInput | None,
        offset: int,
        start_date: date | None,
    ) -> GeneratedDeliverableItem:
        start = add_days(start_date, offset)
        is_vfc = catalog.phase == DdsPhase.VFC
        item_name = template.name
        if building is not None:
            item_name = f"{building.name} - {template.name}"

        return GeneratedDeliverableItem(
            sort_order=sort_order,
            building_id=building.id if building is not None else None,
            building_name=building.name if building is not None else None,
            phase=catalog.phase.value,
            section=catalog.label,
            sr_no=template.sr_no,
            item_name=item_name,
            trade=template.trade,
            discipline=discipline_for(template.trade),
            level_type=template.level,
            remarks=template.remarks,
            dependency_text=template.dependency_text,
            stakeholders=template.stakeholders,
            scope=template.scope,
            policy_day_offset=offset,
            expected_start_date=start,
            expected_completion_date=add_days(start, template.duration_days),
            architect_input_date=(
                add_days(start, -VFC_ARCHITECT_LEAD_DAYS) if is_vfc else None
            ),
            structure_input_date=(
                add_days(start, -VFC_STRUCTURE_LEAD_DAYS) if is_vfc else None
            ),
        )

    def _append_external_areas(
        self, items: list[GeneratedDeliverableItem], config: PolicyConfig
    ) -> None:
        """Append VFC items for each external site area and services trade.

        External items reuse the dates of the last regular item, or the
        project start date when nothing else was generated.
        """
        if not config.site_areas:
            return

        if items:
            last = items[-1]
            start = last.expected_start_date
            completion = last.expected_completion_date
            offset = last.policy_day_offset
        else:
            start = completion = config.project_start_date
            offset = 0

        for area in config.site_areas:
            for sr_no, trade in enumerate(EXTERNAL_AREA_TRADES, start=1):
                items.append(
                    GeneratedDeliverableItem(
                        sort_order=len(items) + 1,
                        phase=DdsPhase.VFC.value,
                        section=EXTERNAL_AREA_SECTION,
                        sr_no=sr_no,
                        item_name=f"{area.name} ({area.area_type}) - {trade}",
                        trade=trade,
                        discipline=discipline_for(trade),
                        policy_day_offset=offset,
                        expected_start_date=start,
                        expected_completion_date=completion,
                        is_external_area=True,
                        external_area_type=area.area_type,
                    )
                )
        logger.debug(
            "Added %d external area items",
            len(config.site_areas) * len(EXTERNAL_AREA_TRADES),
        )

    # ------------------------------------------------------------------
    # Preview and description
    # ------------------------------------------------------------------

    def preview(
        self,
        config: PolicyConfig,
        sample_size: int = DEFAULT_PREVIEW_SAMPLE_SIZE,
    ) -> PolicyPreview:
        """Generate and return counts plus the first ``sample_size`` items."""
        result = self.generate(config)
        return PolicyPreview(
            metadata=result.metadata,
            item_count=len(result.items),
            phases=dict(result.metadata.phases),
            sample_items=result.items[: max(0, sample_size)],
            height_tier=result.metadata.tier,
        )

    def describe_policy(self) -> PolicyDescriptor:
        """Read-only description of the policy this engine applies.

        A fresh descriptor is built on each call, so callers may modify it
        freely without affecting later generations.
        """
        repo = self._repository
        return PolicyDescriptor(
            name=POLICY_NAME,
            description=POLICY_DESCRIPTION,
            version=POLICY_REVISION,
            policy_number=POLICY_NUMBER,
            height_tiers=list(repo.height_tiers),
            phases=[c.phase.value for c in repo.phase_catalogs],
            phase_catalogs=list(repo.phase_catalogs),
            vfc_trades=list(VFC_TRADES),
            dd_calculations=list(DD_CALCULATIONS),
            dd_schematics=list(DD_SCHEMATICS),
            dd_layout_categories=list(DD_LAYOUT_CATEGORIES),
            trade_level_rules=repo.trade_level_rules,
            level_week_offsets={
                str(level): week for level, week in repo.level_week_offsets.items()
            },
            annexure_a=list(repo.milestones),
            default_tower_stagger_weeks=PolicyConfig.model_fields[
                "tower_stagger_weeks"
            ].default,
            consultant_offset_days=PolicyConfig.model_fields[
                "consultant_offset_days"
            ].default,
        )
