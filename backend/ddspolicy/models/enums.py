"""Enums for the DDS policy domain models.

These enums carry the fixed vocabularies of Policy 130: delivery phases,
canonical drawing levels, register types and the feature keys that gate
conditional templates.
"""

from enum import StrEnum


class DdsPhase(StrEnum):
    """The nine delivery phases, in generation order."""

    CONCEPT = "A - Concept"
    LIAISON = "B - Liaison"
    SLDS = "C - SLDs"
    SD = "D - SD (Schematic Design)"
    DD = "E - DD (Design Development)"
    DETAILED_CALCULATIONS = "F - Detailed Calculations"
    BUILDERS_WORK = "G - Builder's Work"
    TENDER = "H - Tender"
    VFC = "I - VFCs"


class CanonicalLevel(StrEnum):
    """Normalized floor categories used for deliverable and drawing placement."""

    BASEMENT = "BASEMENT"
    PLINTH_LEVEL = "PLINTH LEVEL"
    PODIUM_LEVEL = "PODIUM LEVEL"
    STILT_FLOOR = "STILT FLOOR"
    GROUND_FLOOR = "GROUND FLOOR"
    MEZZANINE_FLOOR = "MEZZANINE FLOOR"
    GARDEN_LEVEL = "GARDEN LEVEL"
    PARKING_LEVEL = "PARKING LEVEL"
    TYPICAL_FLOOR = "TYPICAL FLOOR"
    REFUGE_FLOOR = "REFUGE FLOOR"
    PENTHOUSE_LEVEL = "PENTHOUSE LEVEL"
    TERRACE_FLOOR = "TERRACE FLOOR"
    ROOF_LEVEL = "ROOF LEVEL"
    LIFT_MACHINE_ROOM = "LIFT MACHINE ROOM"
    OHT_LEVEL = "OHT LEVEL"


class DdsType(StrEnum):
    """Who the schedule is issued for."""

    INTERNAL = "internal"
    CONSULTANT = "consultant"


class ListType(StrEnum):
    """Drawing register types."""

    VFC = "VFC"
    DD = "DD"


class Scope(StrEnum):
    """Which party carries a deliverable."""

    PLANT = "Plant"
    CONSULTANT = "Consultant"


class FeatureKey(StrEnum):
    """Feature keys understood by the conditional evaluator."""

    HAS_SWIMMING_POOL = "has_swimming_pool"
    HAS_FITOUT = "has_fitout"
    HAS_PARKING = "has_parking"
    HAS_BASEMENT = "has_basement"
    HAS_PODIUM = "has_podium"
    HAS_PENTHOUSE = "has_penthouse"


class DueStatus(StrEnum):
    """Display status of a scheduled item relative to today."""

    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    REVISED = "revised"
    PENDING = "pending"
