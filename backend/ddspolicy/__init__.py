"""DDS policy engine: Policy 130 design-delivery schedules and drawing registers.

Usage::

    from datetime import date

    from ddspolicy import BuildingInput, PolicyConfig, generate_dds_policy

    config = PolicyConfig(
        project_start_date=date(2026, 1, 1),
        buildings=[BuildingInput(id=1, name="Tower A", height=100)],
    )
    result = generate_dds_policy(config)
"""

from ddspolicy.conditions import check_conditional
from ddspolicy.data import (
    ANNEXURE_A_MILESTONES,
    DDS_PHASES,
    HEIGHT_TIERS,
    PolicyRepository,
)
from ddspolicy.dates import add_days, add_weeks
from ddspolicy.drawings import DrawingListGenerator
from ddspolicy.engine import DdsPolicyEngine
from ddspolicy.exceptions import (
    DdsPolicyError,
    PolicyCatalogError,
    RecordTranslationError,
)
from ddspolicy.factory import (
    create_default_drawing_generator,
    create_default_engine,
    generate_dds_policy,
    generate_drawing_lists,
    get_default_policy,
    get_height_tier,
)
from ddspolicy.levels import (
    classify_floor,
    derive_floor_levels,
    get_level_week_offset,
    is_level_applicable,
)
from ddspolicy.models import (
    BuildingInput,
    CanonicalLevel,
    DdsPhase,
    DdsPolicyResult,
    DdsType,
    DerivedLevel,
    DrawingListEntry,
    DrawingLists,
    FloorInput,
    GeneratedDeliverableItem,
    HeightTier,
    ListType,
    PolicyConfig,
    PolicyDescriptor,
    PolicyMetadata,
    PolicyPreview,
    SiteAreaInput,
)

__all__ = [
    "ANNEXURE_A_MILESTONES",
    "BuildingInput",
    "CanonicalLevel",
    "DDS_PHASES",
    "DdsPhase",
    "DdsPolicyEngine",
    "DdsPolicyError",
    "DdsPolicyResult",
    "DdsType",
    "DerivedLevel",
    "DrawingListEntry",
    "DrawingListGenerator",
    "DrawingLists",
    "FloorInput",
    "GeneratedDeliverableItem",
    "HEIGHT_TIERS",
    "HeightTier",
    "ListType",
    "PolicyCatalogError",
    "PolicyConfig",
    "PolicyDescriptor",
    "PolicyMetadata",
    "PolicyPreview",
    "PolicyRepository",
    "RecordTranslationError",
    "SiteAreaInput",
    "add_days",
    "add_weeks",
    "check_conditional",
    "classify_floor",
    "create_default_drawing_generator",
    "create_default_engine",
    "derive_floor_levels",
    "generate_dds_policy",
    "generate_drawing_lists",
    "get_default_policy",
    "get_height_tier",
    "get_level_week_offset",
    "is_level_applicable",
]
