"""Policy 130 height-based timeline tiers.

Tiers are ordered by ``max_height``. The first tier whose bound is not
exceeded applies; taller buildings fall into the last tier.
"""

from __future__ import annotations

from ddspolicy.models.catalog import HeightTier

HEIGHT_TIERS: tuple[HeightTier, ...] = (
    HeightTier(
        max_height=90,
        design_months=7,
        construction_months=30,
        total_months=37,
        label="≤90m",
    ),
    HeightTier(
        max_height=120,
        design_months=10,
        construction_months=36,
        total_months=46,
        label="90-120m",
    ),
    HeightTier(
        max_height=150,
        design_months=11,
        construction_months=40,
        total_months=51,
        label="120-150m",
    ),
    HeightTier(
        max_height=200,
        design_months=12,
        construction_months=42,
        total_months=54,
        label="150-200m",
    ),
)

# Buildings above this height get extra days on every milestone.
TALL_BUILDING_THRESHOLD_M = 120.0
TALL_BUILDING_MODIFIER_DAYS = 30

# Height assumed when a building reports none.
DEFAULT_BUILDING_HEIGHT_M = 30.0
