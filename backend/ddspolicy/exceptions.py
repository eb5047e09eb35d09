"""Exception hierarchy for the DDS policy engine.

The generators themselves are permissive and do not raise for unknown
keys, trades or heights; these errors come from catalog lookups and
record translation.
"""

from __future__ import annotations


class DdsPolicyError(Exception):
    """Base exception for all DDS policy errors."""


class PolicyCatalogError(DdsPolicyError):
    """Raised when a catalog lookup names something the policy lacks."""


class RecordTranslationError(DdsPolicyError):
    """Raised when a stored building record cannot become a BuildingInput."""
