"""Which levels each trade draws at, and when each level is due.

The matrix is the MEP drawing standard applied to every project:

- Lightning protection: air termination only, so terrace / roof only.
- PHE: drainage starts at plinth; rain water and OHT piping continue
  above the terrace in DD.
- Fire fighting: terrace-level systems continue above the terrace in DD.
- HVAC, lighting, containment, FA & PA, ELV: basements drawn in DD
  (ventilation, smoke exhaust, lighting, trays, alarms, CCTV).
- Small power and FAVA: no basement VFC sheets.
- Co-ordinate and builders work: every level, DD only.

A trade without a rule, or without a rule for the requested register,
is drawn at every level.
"""

from __future__ import annotations

from ddspolicy.models.catalog import TradeLevelRule
from ddspolicy.models.enums import CanonicalLevel

# Ordered bottom to top
ALL_ABOVE_GROUND: tuple[CanonicalLevel, ...] = (
    CanonicalLevel.STILT_FLOOR,
    CanonicalLevel.GROUND_FLOOR,
    CanonicalLevel.PODIUM_LEVEL,
    CanonicalLevel.MEZZANINE_FLOOR,
    CanonicalLevel.GARDEN_LEVEL,
    CanonicalLevel.TYPICAL_FLOOR,
    CanonicalLevel.REFUGE_FLOOR,
    CanonicalLevel.PENTHOUSE_LEVEL,
    CanonicalLevel.TERRACE_FLOOR,
)
ABOVE_TERRACE: tuple[CanonicalLevel, ...] = (
    CanonicalLevel.ROOF_LEVEL,
    CanonicalLevel.LIFT_MACHINE_ROOM,
    CanonicalLevel.OHT_LEVEL,
)

_B = CanonicalLevel.BASEMENT
_P = CanonicalLevel.PLINTH_LEVEL
_TERRACE_AND_ROOF = (CanonicalLevel.TERRACE_FLOOR, CanonicalLevel.ROOF_LEVEL)

TRADE_LEVEL_RULES: dict[str, TradeLevelRule] = {
    # VFC + DD trades
    "Fire Fighting": TradeLevelRule(
        vfc=ALL_ABOVE_GROUND,
        dd=(*ALL_ABOVE_GROUND, *ABOVE_TERRACE),
    ),
    "PHE": TradeLevelRule(
        vfc=(_P, *ALL_ABOVE_GROUND),
        dd=(_P, *ALL_ABOVE_GROUND, *ABOVE_TERRACE),
    ),
    "HVAC": TradeLevelRule(vfc=ALL_ABOVE_GROUND, dd=(_B, *ALL_ABOVE_GROUND)),
    "Lighting": TradeLevelRule(vfc=ALL_ABOVE_GROUND, dd=(_B, *ALL_ABOVE_GROUND)),
    "Small Power": TradeLevelRule(vfc=ALL_ABOVE_GROUND, dd=ALL_ABOVE_GROUND),
    "Lightning Protection": TradeLevelRule(vfc=_TERRACE_AND_ROOF, dd=_TERRACE_AND_ROOF),
    "Containment": TradeLevelRule(vfc=ALL_ABOVE_GROUND, dd=(_B, *ALL_ABOVE_GROUND)),
    "FA & PA": TradeLevelRule(vfc=ALL_ABOVE_GROUND, dd=(_B, *ALL_ABOVE_GROUND)),
    "ELV": TradeLevelRule(vfc=ALL_ABOVE_GROUND, dd=(_B, *ALL_ABOVE_GROUND)),
    # DD-only layout trades
    "Co-ordinate": TradeLevelRule(dd=(_B, _P, *ALL_ABOVE_GROUND, *ABOVE_TERRACE)),
    "Builders Work": TradeLevelRule(dd=(_B, _P, *ALL_ABOVE_GROUND, *ABOVE_TERRACE)),
    "FAVA": TradeLevelRule(dd=(_B, *ALL_ABOVE_GROUND)),
}

# Base week per level; the VFC register issues two weeks later.
LEVEL_WEEK_OFFSETS: dict[CanonicalLevel, int] = {
    CanonicalLevel.BASEMENT: 12,
    CanonicalLevel.PLINTH_LEVEL: 18,
    CanonicalLevel.PODIUM_LEVEL: 20,
    CanonicalLevel.STILT_FLOOR: 22,
    CanonicalLevel.GROUND_FLOOR: 24,
    CanonicalLevel.MEZZANINE_FLOOR: 26,
    CanonicalLevel.GARDEN_LEVEL: 26,
    CanonicalLevel.PARKING_LEVEL: 16,
    CanonicalLevel.TYPICAL_FLOOR: 28,
    CanonicalLevel.REFUGE_FLOOR: 30,
    CanonicalLevel.PENTHOUSE_LEVEL: 34,
    CanonicalLevel.TERRACE_FLOOR: 36,
    CanonicalLevel.ROOF_LEVEL: 38,
    CanonicalLevel.OHT_LEVEL: 38,
    CanonicalLevel.LIFT_MACHINE_ROOM: 38,
}
DEFAULT_LEVEL_WEEK_OFFSET = 28

# Trades reported under the MEP delivery segment
MEP_SUB_TRADES: frozenset[str] = frozenset({
    "Electrical", "PHE", "Fire Fighting", "HVAC", "Security", "FAVA", "FA & PA",
    "ELV", "Lifts", "Lighting", "Small Power", "Lightning Protection",
    "Containment", "Earthing", "DG", "STP", "OWC", "Solar Hot Water",
})
