"""Domain models for the DDS policy engine."""

from ddspolicy.models.catalog import (
    DeliverableTemplate,
    DrawingTemplate,
    HeightTier,
    LayoutCategory,
    Milestone,
    PhaseCatalog,
    PolicyDescriptor,
    TradeLevelRule,
)
from ddspolicy.models.config import (
    BuildingInput,
    FloorInput,
    PolicyConfig,
    SiteAreaInput,
)
from ddspolicy.models.enums import (
    CanonicalLevel,
    DdsPhase,
    DdsType,
    DueStatus,
    FeatureKey,
    ListType,
    Scope,
)
from ddspolicy.models.schedule import (
    DdsPolicyResult,
    DerivedLevel,
    DrawingListEntry,
    DrawingLists,
    GeneratedDeliverableItem,
    PolicyMetadata,
    PolicyPreview,
)

__all__ = [
    "BuildingInput",
    "CanonicalLevel",
    "DdsPhase",
    "DdsPolicyResult",
    "DdsType",
    "DeliverableTemplate",
    "DerivedLevel",
    "DrawingListEntry",
    "DrawingLists",
    "DrawingTemplate",
    "DueStatus",
    "FeatureKey",
    "FloorInput",
    "GeneratedDeliverableItem",
    "HeightTier",
    "LayoutCategory",
    "ListType",
    "Milestone",
    "PhaseCatalog",
    "PolicyConfig",
    "PolicyDescriptor",
    "PolicyMetadata",
    "PolicyPreview",
    "Scope",
    "SiteAreaInput",
    "TradeLevelRule",
]
