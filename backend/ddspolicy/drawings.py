"""VFC and DD drawing registers, per tower.

Each tower's floors are reduced to canonical levels, then every trade is
drawn at the levels the trade/level matrix allows:

- **VFC register** - one layout per VFC trade and applicable level, due two
  weeks after the level's base week.
- **DD register** - fixed calculations (A), fixed schematics (B), then one
  layout per layout category and applicable level. Each successive level
  index slips the layout by one more week.

Serial numbers restart at 1 for every tower and every register.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ddspolicy.conditions import check_conditional
from ddspolicy.dates import add_days, add_weeks
from ddspolicy.data.drawing_templates import (
    DD_CALCULATION_BASE_WEEK,
    DD_CALCULATION_CATEGORY,
    DD_CALCULATION_LEAD_WEEKS,
    DD_CALCULATIONS,
    DD_LAYOUT_BASE_WEEK,
    DD_LAYOUT_CATEGORIES,
    DD_LAYOUT_LEAD_WEEKS,
    DD_SCHEMATIC_BASE_WEEK,
    DD_SCHEMATIC_CATEGORY,
    DD_SCHEMATIC_LEAD_WEEKS,
    DD_SCHEMATICS,
    VFC_CATEGORY,
    VFC_LEAD_WEEKS,
    VFC_TRADES,
)
from ddspolicy.levels import (
    derive_floor_levels,
    get_level_week_offset,
    is_level_applicable,
)
from ddspolicy.models.enums import CanonicalLevel, FeatureKey, ListType
from ddspolicy.models.schedule import DrawingListEntry, DrawingLists

if TYPE_CHECKING:
    from datetime import date

    from ddspolicy.data.repository import PolicyRepository
    from ddspolicy.models.catalog import DrawingTemplate
    from ddspolicy.models.config import BuildingInput, PolicyConfig
    from ddspolicy.models.schedule import DerivedLevel

logger = logging.getLogger(__name__)

DRAWING_DOC_TYPE = "Drawing"


def tower_label(building: BuildingInput) -> str:
    """Display name of a tower; unnamed towers are numbered from 1."""
    return building.name or f"Tower-{building.tower_index + 1}"


class DrawingListGenerator:
    """Builds the VFC and DD drawing registers for a project.

    Args:
        repository: The policy repository providing the trade/level rules
            and the per-level week table.
    """

    def __init__(self, repository: PolicyRepository) -> None:
        self._repository = repository

    def generate(self, config: PolicyConfig) -> DrawingLists:
        """Produce both registers for every tower, in tower-index order."""
        towers = sorted(config.buildings, key=lambda b: b.tower_index)
        lists = DrawingLists()

        for building in towers:
            levels = derive_floor_levels(building.floors, building)
            stagger_weeks = building.tower_index * config.tower_stagger_weeks
            lists.vfc_drawings.extend(
                self._vfc_register(building, levels, stagger_weeks, config)
            )
            lists.dd_drawings.extend(
                self._dd_register(building, levels, stagger_weeks, config)
            )

        logger.info(
            "Generated %d VFC and %d DD drawings for %d towers",
            len(lists.vfc_drawings), len(lists.dd_drawings), len(towers),
        )
        return lists

    # ------------------------------------------------------------------
    # VFC
    # ------------------------------------------------------------------

    def _vfc_register(
        self,
        building: BuildingInput,
        levels: list[DerivedLevel],
        stagger_weeks: int,
        config: PolicyConfig,
    ) -> list[DrawingListEntry]:
        tower = tower_label(building)
        entries: list[DrawingListEntry] = []
        for trade in VFC_TRADES:
            for derived in levels:
                if not is_level_applicable(
                    trade, derived.level, ListType.VFC, self._repository
                ):
                    continue
                week = get_level_week_offset(
                    derived.level, stagger_weeks, self._repository
                )
                sr_no = len(entries) + 1
                entries.append(
                    DrawingListEntry(
                        building_id=building.id,
                        list_type=ListType.VFC,
                        sr_no=sr_no,
                        trade=trade,
                        doc_type=DRAWING_DOC_TYPE,
                        tower=tower,
                        level=derived.level.value,
                        description=f"{trade} Layout - {derived.label} - {tower}",
                        category=VFC_CATEGORY,
                        dds_date=self._dds_date(config, week + VFC_LEAD_WEEKS),
                        sort_order=sr_no,
                    )
                )
        return entries

    # ------------------------------------------------------------------
    # DD
    # ------------------------------------------------------------------

    def _dd_register(
        self,
        building: BuildingInput,
        levels: list[DerivedLevel],
        stagger_weeks: int,
        config: PolicyConfig,
    ) -> list[DrawingListEntry]:
        tower = tower_label(building)
        has_basement = check_conditional(
            FeatureKey.HAS_BASEMENT, config, building
        ) or any(d.level == CanonicalLevel.BASEMENT for d in levels)
        entries: list[DrawingListEntry] = []

        # A. Calculations
        calc_week = (
            DD_CALCULATION_BASE_WEEK + stagger_weeks + DD_CALCULATION_LEAD_WEEKS
        )
        for template in DD_CALCULATIONS:
            if not self._is_included(template, config, building, has_basement):
                continue
            entries.append(
                self._fixed_entry(
                    template, building, tower, len(entries) + 1,
                    DD_CALCULATION_CATEGORY, self._dds_date(config, calc_week),
                )
            )

        # B. Schematics
        schematic_week = (
            DD_SCHEMATIC_BASE_WEEK + stagger_weeks + DD_SCHEMATIC_LEAD_WEEKS
        )
        for template in DD_SCHEMATICS:
            if not self._is_included(template, config, building, has_basement):
                continue
            entries.append(
                self._fixed_entry(
                    template, building, tower, len(entries) + 1,
                    DD_SCHEMATIC_CATEGORY, self._dds_date(config, schematic_week),
                )
            )

        # Layouts: one per category and applicable level
        layout_week = DD_LAYOUT_BASE_WEEK + stagger_weeks
        for category in DD_LAYOUT_CATEGORIES:
            for index, derived in enumerate(levels):
                if not is_level_applicable(
                    category.trade, derived.level, ListType.DD, self._repository
                ):
                    continue
                sr_no = len(entries) + 1
                entries.append(
                    DrawingListEntry(
                        building_id=building.id,
                        list_type=ListType.DD,
                        sr_no=sr_no,
                        trade=category.trade,
                        doc_type=DRAWING_DOC_TYPE,
                        tower=tower,
                        level=derived.level.value,
                        description=(
                            f"{category.trade} Layout - {derived.label} - {tower}"
                        ),
                        category=category.category,
                        dds_date=self._dds_date(
                            config, layout_week + index + DD_LAYOUT_LEAD_WEEKS
                        ),
                        sort_order=sr_no,
                    )
                )
        return entries

    @staticmethod
    def _is_included(
        template: DrawingTemplate,
        config: PolicyConfig,
        building: BuildingInput,
        has_basement: bool,
    ) -> bool:
        # Basements also count when only the floor list shows one
        if template.conditional == FeatureKey.HAS_BASEMENT:
            return has_basement
        return check_conditional(template.conditional, config, building)

    @staticmethod
    def _fixed_entry(
        template: DrawingTemplate,
        building: BuildingInput,
        tower: str,
        sr_no: int,
        category: str,
        dds_date: date | None,
    ) -> DrawingListEntry:
        return DrawingListEntry(
            building_id=building.id,
            list_type=ListType.DD,
            sr_no=sr_no,
            trade=template.trade,
            doc_type=template.doc_type,
            tower=tower,
            level="",
            description=f"{template.description} - {tower}",
            category=category,
            dds_date=dds_date,
            sort_order=sr_no,
        )

    @staticmethod
    def _dds_date(config: PolicyConfig, weeks: int) -> date | None:
        return add_days(
            add_weeks(config.project_start_date, weeks),
            config.dds_type_offset_days,
        )
