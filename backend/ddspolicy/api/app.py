"""FastAPI application: create_app factory with /api/dds endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from ddspolicy.api.deps import cors_origins, preview_sample_size
from ddspolicy.exceptions import DdsPolicyError
from ddspolicy.models.config import PolicyConfig  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from ddspolicy.drawings import DrawingListGenerator
    from ddspolicy.engine import DdsPolicyEngine

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def create_app(
    *,
    engine: DdsPolicyEngine | None = None,
    drawing_generator: DrawingListGenerator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, the default engine is created on first request.
    drawing_generator
        Optional pre-built drawing list generator. If not provided, the
        default generator is created on first request.
    """
    app = FastAPI(title="DDS Policy Engine", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine
    app.state.drawing_generator = drawing_generator

    def _get_engine() -> DdsPolicyEngine:
        eng: DdsPolicyEngine | None = app.state.engine
        if eng is not None:
            return eng
        from ddspolicy.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    def _get_drawing_generator() -> DrawingListGenerator:
        gen: DrawingListGenerator | None = app.state.drawing_generator
        if gen is not None:
            return gen
        from ddspolicy.factory import create_default_drawing_generator

        gen = create_default_drawing_generator()
        app.state.drawing_generator = gen
        return gen

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # GET /api/dds/policy-info
    # ------------------------------------------------------------------

    @app.get("/api/dds/policy-info")
    def policy_info() -> dict[str, Any]:
        return _get_engine().describe_policy().model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/dds/generate
    # ------------------------------------------------------------------

    @app.post("/api/dds/generate")
    def generate(config: PolicyConfig) -> dict[str, Any]:
        try:
            result = _get_engine().generate(config)
        except DdsPolicyError as exc:
            logger.exception("Policy error during DDS generation")
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {
            "items": [i.model_dump(mode="json") for i in result.items],
            "metadata": result.metadata.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/dds/preview-policy
    # ------------------------------------------------------------------

    @app.post("/api/dds/preview-policy")
    def preview_policy(config: PolicyConfig) -> dict[str, Any]:
        try:
            preview = _get_engine().preview(
                config, sample_size=preview_sample_size()
            )
        except DdsPolicyError as exc:
            logger.exception("Policy error during DDS preview")
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return preview.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/dds/drawing-lists
    # ------------------------------------------------------------------

    @app.post("/api/dds/drawing-lists")
    def drawing_lists(config: PolicyConfig) -> dict[str, Any]:
        try:
            lists = _get_drawing_generator().generate(config)
        except DdsPolicyError as exc:
            logger.exception("Policy error during drawing list generation")
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {
            "vfc_drawings": [d.model_dump(mode="json") for d in lists.vfc_drawings],
            "dd_drawings": [d.model_dump(mode="json") for d in lists.dd_drawings],
            "summary": lists.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/dds/height-tier
    # ------------------------------------------------------------------

    @app.get("/api/dds/height-tier")
    def height_tier(height: float = Query(..., ge=0)) -> dict[str, Any]:
        tier = _get_engine().repository.get_height_tier(height)
        return tier.model_dump(mode="json")

    return app
