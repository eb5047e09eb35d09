"""Static policy catalogs for the DDS policy engine."""

from ddspolicy.data.height_tiers import HEIGHT_TIERS
from ddspolicy.data.milestones import ANNEXURE_A_MILESTONES
from ddspolicy.data.phase_catalogs import DDS_PHASES, PHASE_CATALOGS
from ddspolicy.data.repository import PolicyRepository
from ddspolicy.data.trade_levels import LEVEL_WEEK_OFFSETS, TRADE_LEVEL_RULES

__all__ = [
    "ANNEXURE_A_MILESTONES",
    "DDS_PHASES",
    "HEIGHT_TIERS",
    "LEVEL_WEEK_OFFSETS",
    "PHASE_CATALOGS",
    "PolicyRepository",
    "TRADE_LEVEL_RULES",
]
