"""Translate stored building and floor records into engine inputs.

Records are plain mappings as they come back from the project store:
``building_height``/``height``, ``tower_index``, ``podium_count``,
``basement_count`` and a ``floors`` list whose entries use either
``number``/``name`` or ``floor_number``/``floor_name``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ddspolicy.data.height_tiers import DEFAULT_BUILDING_HEIGHT_M
from ddspolicy.exceptions import RecordTranslationError
from ddspolicy.models.config import (
    BuildingInput,
    FloorInput,
    PolicyConfig,
    SiteAreaInput,
)
from ddspolicy.models.enums import DdsType

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from datetime import date

logger = logging.getLogger(__name__)

# Height estimate per storey when a building has no recorded height.
ASSUMED_FLOOR_HEIGHT_M = 3.0


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def floor_input_from_record(record: Mapping[str, Any]) -> FloorInput:
    """Build a FloorInput from a floor record."""
    number = _first_present(record, "number", "floor_number")
    return FloorInput(
        number=int(number) if number is not None else 0,
        name=_first_present(record, "name", "floor_name"),
    )


def building_input_from_record(
    record: Mapping[str, Any],
    position: int = 0,
) -> BuildingInput:
    """Build a BuildingInput from a stored building record.

    Args:
        record: The building record, including its ``floors`` list.
        position: Index of the record in the project's building list; used
            as the tower index when the record has none.

    Raises:
        RecordTranslationError: If the record has no ``id`` or ``name``.
    """
    building_id = record.get("id")
    name = record.get("name")
    if building_id is None or not name:
        msg = f"Building record at position {position} is missing its id or name"
        raise RecordTranslationError(msg)

    floors = tuple(floor_input_from_record(f) for f in record.get("floors") or ())

    height = float(_first_present(record, "building_height", "height") or 0)
    if height == 0 and floors:
        height = len(floors) * ASSUMED_FLOOR_HEIGHT_M
        logger.debug(
            "Building %s has no height; estimated %.1f m from %d floors",
            name, height, len(floors),
        )
    if height == 0:
        height = DEFAULT_BUILDING_HEIGHT_M

    tower_index = record.get("tower_index")
    podium_count = int(record.get("podium_count") or 0)
    return BuildingInput(
        id=building_id,
        name=name,
        height=height,
        tower_index=position if tower_index is None else int(tower_index),
        floors=floors,
        basement_count=int(record.get("basement_count") or 0),
        has_podium=podium_count > 0,
        podium_count=podium_count,
        total_floors=len(floors),
    )


def policy_config_from_records(
    buildings: Iterable[Mapping[str, Any]],
    *,
    project_start_date: date | None,
    site_areas: Iterable[Mapping[str, Any]] = (),
    tower_stagger_weeks: int = 4,
    is_new_land: bool = True,
    has_swimming_pool: bool = False,
    has_fitout: bool = False,
    has_parking: bool = True,
    dds_type: DdsType | str = DdsType.INTERNAL,
) -> PolicyConfig:
    """Build a PolicyConfig for a project from its stored records.

    The project basement count is the deepest basement of any building.
    """
    inputs = tuple(
        building_input_from_record(record, position)
        for position, record in enumerate(buildings)
    )
    areas = tuple(
        SiteAreaInput(id=a["id"], name=a["name"], area_type=a["area_type"])
        for a in site_areas
    )
    return PolicyConfig(
        project_start_date=project_start_date,
        buildings=inputs,
        tower_stagger_weeks=tower_stagger_weeks,
        is_new_land=is_new_land,
        basement_count=max((b.basement_count or 0 for b in inputs), default=0),
        has_swimming_pool=has_swimming_pool,
        has_fitout=has_fitout,
        has_parking=has_parking,
        dds_type=DdsType(dds_type),
        site_areas=areas,
    )
