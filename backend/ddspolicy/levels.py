"""Floor classification and per-tower level derivation.

Floor names are free text typed by project teams ("B2", "Stilt",
"Terrace Garden", "14"). They are reduced to a fixed set of canonical
levels by an ordered keyword rule list: the first matching rule wins, so
"Basement Parking" is a basement and "Terrace Garden" is a terrace.
Anything no rule claims is a typical floor.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ddspolicy.data.trade_levels import (
    DEFAULT_LEVEL_WEEK_OFFSET,
    LEVEL_WEEK_OFFSETS,
    TRADE_LEVEL_RULES,
)
from ddspolicy.models.enums import CanonicalLevel, ListType
from ddspolicy.models.schedule import DerivedLevel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ddspolicy.data.repository import PolicyRepository
    from ddspolicy.models.config import BuildingInput, FloorInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloorRule:
    """Keyword rule: substring hits, exact names, or name prefixes."""

    level: CanonicalLevel
    contains: tuple[str, ...] = ()
    exact: tuple[str, ...] = ()
    prefixes: tuple[str, ...] = ()

    def matches(self, name: str) -> bool:
        return (
            any(k in name for k in self.contains)
            or name in self.exact
            or any(name.startswith(p) for p in self.prefixes)
        )


# Priority order matters: earlier rules shadow later ones.
FLOOR_RULES: tuple[FloorRule, ...] = (
    # "B1", "B2" ... are basements too
    FloorRule(CanonicalLevel.BASEMENT, contains=("basement",), prefixes=("b",)),
    FloorRule(CanonicalLevel.PLINTH_LEVEL, contains=("plinth",)),
    FloorRule(CanonicalLevel.PODIUM_LEVEL, contains=("podium",)),
    FloorRule(CanonicalLevel.STILT_FLOOR, contains=("stilt",)),
    FloorRule(
        CanonicalLevel.GROUND_FLOOR,
        contains=("ground floor",),
        exact=("gnd", "ground", "gf"),
    ),
    FloorRule(CanonicalLevel.REFUGE_FLOOR, contains=("refuge",)),
    FloorRule(CanonicalLevel.TERRACE_FLOOR, contains=("terrace",), exact=("terr",)),
    FloorRule(CanonicalLevel.ROOF_LEVEL, contains=("roof",)),
    FloorRule(CanonicalLevel.LIFT_MACHINE_ROOM, contains=("lmr", "machine room")),
    FloorRule(CanonicalLevel.OHT_LEVEL, contains=("oht", "overhead")),
    FloorRule(CanonicalLevel.PENTHOUSE_LEVEL, contains=("penthouse", "pent house")),
    FloorRule(CanonicalLevel.GARDEN_LEVEL, contains=("garden",)),
    FloorRule(CanonicalLevel.MEZZANINE_FLOOR, contains=("mezzanine",), exact=("mezz",)),
    FloorRule(CanonicalLevel.PARKING_LEVEL, contains=("parking",)),
)

FALLBACK_LEVELS: tuple[DerivedLevel, ...] = (
    DerivedLevel(level=CanonicalLevel.GROUND_FLOOR, label="Ground Floor"),
    DerivedLevel(level=CanonicalLevel.TYPICAL_FLOOR, label="Typical Floor"),
    DerivedLevel(level=CanonicalLevel.TERRACE_FLOOR, label="Terrace Floor"),
)

_LEVEL_WORD = re.compile(r" level| floor", re.IGNORECASE)


def classify_floor(name: str | None) -> CanonicalLevel | None:
    """Map a free-text floor name to its canonical level.

    Returns None for an empty or missing name; such floors are skipped.
    """
    if not name:
        return None
    normalized = name.lower().strip()
    for rule in FLOOR_RULES:
        if rule.matches(normalized):
            return rule.level
    return CanonicalLevel.TYPICAL_FLOOR


def level_label(level: CanonicalLevel) -> str:
    """Register label for a non-typical level, e.g. ``GROUND floor``."""
    return _LEVEL_WORD.sub(lambda m: m.group(0).lower(), level.value)


def derive_floor_levels(
    floors: Iterable[FloorInput],
    building: BuildingInput | None = None,
) -> list[DerivedLevel]:
    """Reduce a tower's floor list to its ordered, unique canonical levels.

    Floors are taken in floor-number order. Each canonical level appears
    once, at the position of its lowest floor; all typical floors share a
    single entry whose label records how many floors it covers. A terrace
    is appended when neither a terrace nor a roof was listed. With no
    floors at all the three-level fallback (ground, typical, terrace) is
    returned.
    """
    ordered = sorted(floors, key=lambda f: f.number or 0)
    if not ordered:
        return [lvl.model_copy() for lvl in FALLBACK_LEVELS]

    levels: list[DerivedLevel] = []
    by_level: dict[CanonicalLevel, DerivedLevel] = {}
    typical_names: list[str] = []

    for floor in ordered:
        classified = classify_floor(floor.name)
        if classified is None:
            continue

        entry = by_level.get(classified)
        if entry is None:
            label = (
                "Typical Floor"
                if classified == CanonicalLevel.TYPICAL_FLOOR
                else level_label(classified)
            )
            entry = DerivedLevel(level=classified, label=label)
            by_level[classified] = entry
            levels.append(entry)
        entry.floor_count += 1

        if classified == CanonicalLevel.TYPICAL_FLOOR:
            typical_names.append(floor.name or "")

    if (
        CanonicalLevel.TERRACE_FLOOR not in by_level
        and CanonicalLevel.ROOF_LEVEL not in by_level
    ):
        levels.append(
            DerivedLevel(level=CanonicalLevel.TERRACE_FLOOR, label="Terrace Floor")
        )

    typical = by_level.get(CanonicalLevel.TYPICAL_FLOOR)
    if typical is not None and len(typical_names) > 1:
        typical.label = (
            f"Typical Floors ({len(typical_names)} nos - "
            f"{typical_names[0]} to {typical_names[-1]})"
        )
    elif typical is not None and len(typical_names) == 1:
        typical.label = f"Typical Floor ({typical_names[0]})"

    if building is not None:
        logger.debug(
            "Derived %d levels for %s from %d floors",
            len(levels), building.name, len(ordered),
        )
    return levels


def get_level_week_offset(
    level: CanonicalLevel | str,
    stagger_weeks: int = 0,
    repository: PolicyRepository | None = None,
) -> int:
    """Base register week for a level plus the tower stagger.

    Levels missing from the table are scheduled with typical floors.
    """
    if repository is not None:
        return repository.get_level_week_offset(level) + stagger_weeks
    week = LEVEL_WEEK_OFFSETS.get(level, DEFAULT_LEVEL_WEEK_OFFSET)  # type: ignore[arg-type]
    return week + stagger_weeks


def is_level_applicable(
    trade: str,
    level: CanonicalLevel | str,
    list_type: ListType | str,
    repository: PolicyRepository | None = None,
) -> bool:
    """Whether ``trade`` draws at ``level`` in the given register.

    Unknown trades, and trades with no rule for the register, are drawn at
    every level. Only an explicit rule can exclude a level.
    """
    if repository is not None:
        rule = repository.get_trade_rule(trade)
    else:
        rule = TRADE_LEVEL_RULES.get(trade)
    if rule is None:
        return True

    levels = rule.vfc if ListType(str(list_type).upper()) == ListType.VFC else rule.dd
    if levels is None:
        return True
    return level in levels
