"""Policy catalog repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ddspolicy.data.height_tiers import HEIGHT_TIERS
from ddspolicy.data.milestones import ANNEXURE_A_MILESTONES
from ddspolicy.data.phase_catalogs import PHASE_CATALOGS
from ddspolicy.data.trade_levels import (
    DEFAULT_LEVEL_WEEK_OFFSET,
    LEVEL_WEEK_OFFSETS,
    TRADE_LEVEL_RULES,
)
from ddspolicy.exceptions import PolicyCatalogError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ddspolicy.models.catalog import (
        HeightTier,
        Milestone,
        PhaseCatalog,
        TradeLevelRule,
    )
    from ddspolicy.models.enums import CanonicalLevel, DdsPhase

logger = logging.getLogger(__name__)


class PolicyRepository:
    """Lookup layer over the static policy catalogs.

    Wraps in-memory tables so a caller can swap in a revised policy
    (different tiers, templates or trade rules) without touching the
    generators.
    """

    def __init__(
        self,
        height_tiers: Iterable[HeightTier] = HEIGHT_TIERS,
        phase_catalogs: Iterable[PhaseCatalog] = PHASE_CATALOGS,
        trade_level_rules: dict[str, TradeLevelRule] | None = None,
        level_week_offsets: dict[CanonicalLevel, int] | None = None,
        milestones: Iterable[Milestone] = ANNEXURE_A_MILESTONES,
    ) -> None:
        self._height_tiers = tuple(height_tiers)
        self._phase_catalogs = tuple(phase_catalogs)
        self._trade_level_rules = dict(
            TRADE_LEVEL_RULES if trade_level_rules is None else trade_level_rules
        )
        self._level_week_offsets = dict(
            LEVEL_WEEK_OFFSETS if level_week_offsets is None else level_week_offsets
        )
        self._milestones = tuple(milestones)
        if not self._height_tiers:
            msg = "At least one height tier is required"
            raise PolicyCatalogError(msg)

    @property
    def height_tiers(self) -> tuple[HeightTier, ...]:
        return self._height_tiers

    @property
    def phase_catalogs(self) -> tuple[PhaseCatalog, ...]:
        return self._phase_catalogs

    @property
    def trade_level_rules(self) -> dict[str, TradeLevelRule]:
        return dict(self._trade_level_rules)

    @property
    def level_week_offsets(self) -> dict[CanonicalLevel, int]:
        return dict(self._level_week_offsets)

    @property
    def milestones(self) -> tuple[Milestone, ...]:
        return self._milestones

    def get_height_tier(self, height_m: float) -> HeightTier:
        """Return the first tier whose ``max_height`` is not exceeded.

        Heights above every bound use the tallest tier; out-of-range
        heights are never an error.
        """
        for tier in self._height_tiers:
            if height_m <= tier.max_height:
                return tier
        logger.debug(
            "Height %.1f m exceeds every tier; using %s",
            height_m, self._height_tiers[-1].label,
        )
        return self._height_tiers[-1]

    def get_phase_catalog(self, phase: DdsPhase | str) -> PhaseCatalog:
        """Look up a phase catalog by phase name.

        Raises PolicyCatalogError if the phase is not part of this policy.
        """
        for catalog in self._phase_catalogs:
            if catalog.phase == phase:
                return catalog
        msg = f"No template catalog for phase '{phase}'"
        raise PolicyCatalogError(msg)

    def get_trade_rule(self, trade: str) -> TradeLevelRule | None:
        """Trade/level rule, or None for trades the matrix does not know."""
        return self._trade_level_rules.get(trade)

    def get_level_week_offset(self, level: CanonicalLevel | str) -> int:
        """Base week for a level; unknown levels use the typical-floor week."""
        offsets = self._level_week_offsets
        return offsets.get(level, DEFAULT_LEVEL_WEEK_OFFSET)  # type: ignore[arg-type]

    def get_milestone(self, key: str) -> Milestone:
        """Look up an Annexure-A milestone.

        Raises PolicyCatalogError for unknown keys.
        """
        for milestone in self._milestones:
            if milestone.key == key:
                return milestone
        msg = f"No Annexure A milestone with key '{key}'"
        raise PolicyCatalogError(msg)
