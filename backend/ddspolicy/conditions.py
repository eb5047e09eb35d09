"""Feature gating for conditional templates.

A template may name a feature key (``has_basement``, ``has_podium`` ...).
The template is generated only when the feature is present for the
project or for the building being expanded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ddspolicy.models.enums import FeatureKey

if TYPE_CHECKING:
    from ddspolicy.models.config import BuildingInput, PolicyConfig

logger = logging.getLogger(__name__)

# Penthouse is inferred, never flagged
PENTHOUSE_MIN_HEIGHT_M = 60.0
PENTHOUSE_MIN_FLOORS = 15


def check_conditional(
    key: FeatureKey | str | None,
    config: PolicyConfig,
    building: BuildingInput | None = None,
) -> bool:
    """Return True if the feature named by ``key`` is present.

    Args:
        key: Feature key from a template's ``conditional`` field. ``None``
            means the template is unconditional.
        config: Project configuration (project-wide flags).
        building: The building being expanded, or None for project-scoped
            templates.

    Unknown keys return True: a template whose key this evaluator does not
    understand is always generated.
    """
    if key is None:
        return True

    if key == FeatureKey.HAS_SWIMMING_POOL:
        return config.has_swimming_pool
    if key == FeatureKey.HAS_FITOUT:
        return config.has_fitout
    if key == FeatureKey.HAS_PARKING:
        return config.has_parking
    if key == FeatureKey.HAS_BASEMENT:
        return config.basement_count > 0 or bool(
            building is not None and (building.basement_count or 0) > 0
        )
    if key == FeatureKey.HAS_PODIUM:
        return building is not None and bool(
            building.has_podium or (building.podium_count or 0) > 0
        )
    if key == FeatureKey.HAS_PENTHOUSE:
        return building is not None and (
            building.height > PENTHOUSE_MIN_HEIGHT_M
            or (building.total_floors or 0) > PENTHOUSE_MIN_FLOORS
        )

    logger.debug("Unknown conditional key '%s'; including template", key)
    return True
