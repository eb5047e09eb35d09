"""Factory functions for pre-configured engines and module-level shortcuts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ddspolicy.data.repository import PolicyRepository
from ddspolicy.drawings import DrawingListGenerator
from ddspolicy.engine import DdsPolicyEngine

if TYPE_CHECKING:
    from ddspolicy.models.catalog import HeightTier, PolicyDescriptor
    from ddspolicy.models.config import PolicyConfig
    from ddspolicy.models.schedule import DdsPolicyResult, DrawingLists


def create_default_engine() -> DdsPolicyEngine:
    """Create a DdsPolicyEngine wired up with the built-in Policy 130 catalogs.

    This is the recommended way to create an engine for typical usage; it
    wires up a PolicyRepository over the default tiers, phase catalogs and
    trade/level tables.

    Returns:
        A DdsPolicyEngine ready to generate schedules.

    Example::

        from ddspolicy import create_default_engine, PolicyConfig

        engine = create_default_engine()
        result = engine.generate(config)
    """
    return DdsPolicyEngine(PolicyRepository())


def create_default_drawing_generator() -> DrawingListGenerator:
    """Create a DrawingListGenerator over the built-in Policy 130 tables."""
    return DrawingListGenerator(PolicyRepository())


def generate_dds_policy(config: PolicyConfig) -> DdsPolicyResult:
    """Generate the deliverable schedule with the default policy."""
    return create_default_engine().generate(config)


def generate_drawing_lists(config: PolicyConfig) -> DrawingLists:
    """Generate the VFC and DD drawing registers with the default policy."""
    return create_default_drawing_generator().generate(config)


def get_default_policy() -> PolicyDescriptor:
    """Describe the default policy (tiers, catalogs, matrix, milestones)."""
    return create_default_engine().describe_policy()


def get_height_tier(height_m: float) -> HeightTier:
    """Resolve a building height against the default tiers."""
    return PolicyRepository().get_height_tier(height_m)
