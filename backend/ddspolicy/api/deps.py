"""Environment-driven settings for the FastAPI layer."""

from __future__ import annotations

import logging
import os

from ddspolicy.engine import DEFAULT_PREVIEW_SAMPLE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def cors_origins() -> list[str]:
    """Allowed CORS origins from DDS_CORS_ORIGINS (comma-separated)."""
    raw = os.environ.get("DDS_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def preview_sample_size() -> int:
    """Number of sample items returned by the preview endpoint.

    Reads DDS_PREVIEW_SAMPLE_SIZE; invalid or negative values fall back to
    the default.
    """
    raw = os.environ.get("DDS_PREVIEW_SAMPLE_SIZE", "")
    if not raw:
        return DEFAULT_PREVIEW_SAMPLE_SIZE
    try:
        size = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring invalid DDS_PREVIEW_SAMPLE_SIZE=%r; using %d",
            raw, DEFAULT_PREVIEW_SAMPLE_SIZE,
        )
        return DEFAULT_PREVIEW_SAMPLE_SIZE
    return size if size >= 0 else DEFAULT_PREVIEW_SAMPLE_SIZE
