"""Tests for the FastAPI application."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ddspolicy.api.app import create_app
from ddspolicy.api.deps import cors_origins, preview_sample_size
from ddspolicy.drawings import DrawingListGenerator
from ddspolicy.engine import DdsPolicyEngine
from ddspolicy.exceptions import PolicyCatalogError

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _config_body(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "project_start_date": "2026-01-01",
        "buildings": [
            {
                "id": 1,
                "name": "Tower A",
                "height": 100,
                "floors": [
                    {"number": 0, "name": "Ground"},
                    *({"number": n, "name": str(n)} for n in range(1, 11)),
                    {"number": 11, "name": "Terrace"},
                ],
            }
        ],
    }
    body.update(overrides)
    return body


def _make_failing_engine() -> MagicMock:
    mock = MagicMock(spec=DdsPolicyEngine)
    mock.generate.side_effect = PolicyCatalogError("No template catalog for phase 'X'")
    mock.preview.side_effect = PolicyCatalogError("No template catalog for phase 'X'")
    return mock


def _create_test_client(
    engine: DdsPolicyEngine | None = None,
    drawing_generator: DrawingListGenerator | None = None,
) -> TestClient:
    app = create_app(engine=engine, drawing_generator=drawing_generator)
    return TestClient(app)


# ---------------------------------------------------------------------------
# Health and policy info
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health_returns_200(self) -> None:
        client = _create_test_client()
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


class TestPolicyInfo:
    def test_policy_info(self) -> None:
        client = _create_test_client()
        response = client.get("/api/dds/policy-info")

        assert response.status_code == 200
        data = response.json()
        assert data["policy_number"] == "130"
        assert len(data["height_tiers"]) == 4
        assert data["phases"][0] == "A - Concept"
        assert len(data["phases"]) == 9
        assert data["level_week_offsets"]["GROUND FLOOR"] == 24
        assert data["default_tower_stagger_weeks"] == 4
        assert data["consultant_offset_days"] == -7


# ---------------------------------------------------------------------------
# Generate / preview
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_generate_returns_items_and_summary(self) -> None:
        client = _create_test_client()
        response = client.post("/api/dds/generate", json=_config_body())

        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 70
        assert data["metadata"]["total_items"] == 70
        assert data["metadata"]["tier"]["label"] == "90-120m"
        assert data["summary"]["tower_count"] == 1
        first = data["items"][0]
        assert first["phase"] == "A - Concept"
        assert first["expected_start_date"] == "2026-01-16"

    def test_generate_without_start_date(self) -> None:
        client = _create_test_client()
        response = client.post(
            "/api/dds/generate", json=_config_body(project_start_date=None)
        )

        assert response.status_code == 200
        items = response.json()["items"]
        assert all(i["expected_start_date"] is None for i in items)

    def test_invalid_body_returns_422(self) -> None:
        client = _create_test_client()
        response = client.post(
            "/api/dds/generate", json=_config_body(tower_stagger_weeks=-1)
        )
        assert response.status_code == 422

    def test_policy_error_returns_400(self) -> None:
        engine = _make_failing_engine()
        client = _create_test_client(engine=engine)  # type: ignore[arg-type]
        response = client.post("/api/dds/generate", json=_config_body())

        assert response.status_code == 400
        assert "No template catalog" in response.json()["detail"]
        engine.generate.assert_called_once()


class TestPreview:
    def test_preview_sample_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DDS_PREVIEW_SAMPLE_SIZE", "5")
        client = _create_test_client()
        response = client.post("/api/dds/preview-policy", json=_config_body())

        assert response.status_code == 200
        data = response.json()
        assert data["item_count"] == 70
        assert len(data["sample_items"]) == 5
        assert data["phases"]["H - Tender"] == 20
        assert data["height_tier"]["label"] == "90-120m"

    def test_preview_policy_error_returns_400(self) -> None:
        client = _create_test_client(engine=_make_failing_engine())  # type: ignore[arg-type]
        response = client.post("/api/dds/preview-policy", json=_config_body())
        assert response.status_code == 400


# ---------------------------------------------------------------------------
# Drawing lists
# ---------------------------------------------------------------------------


class TestDrawingLists:
    def test_drawing_lists(self) -> None:
        client = _create_test_client()
        response = client.post("/api/dds/drawing-lists", json=_config_body())

        assert response.status_code == 200
        data = response.json()
        assert len(data["vfc_drawings"]) == 25
        assert len(data["dd_drawings"]) == 60
        assert data["vfc_drawings"][0]["dds_date"] == "2026-07-02"
        assert data["summary"]["towers"] == [
            {"tower": "Tower A", "vfc_count": 25, "dd_count": 60}
        ]

    def test_uses_injected_generator(self) -> None:
        generator = MagicMock(spec=DrawingListGenerator)
        generator.generate.side_effect = PolicyCatalogError("bad register")
        client = _create_test_client(drawing_generator=generator)  # type: ignore[arg-type]
        response = client.post("/api/dds/drawing-lists", json=_config_body())

        assert response.status_code == 400
        assert response.json()["detail"] == "bad register"


# ---------------------------------------------------------------------------
# Height tier
# ---------------------------------------------------------------------------


class TestHeightTier:
    @pytest.mark.parametrize(
        ("height", "label"),
        [(40, "≤90m"), (90, "≤90m"), (91, "90-120m"), (250, "150-200m")],
    )
    def test_height_tier(self, height: float, label: str) -> None:
        client = _create_test_client()
        response = client.get("/api/dds/height-tier", params={"height": height})

        assert response.status_code == 200
        assert response.json()["label"] == label

    def test_negative_height_returns_422(self) -> None:
        client = _create_test_client()
        response = client.get("/api/dds/height-tier", params={"height": -1})
        assert response.status_code == 422


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    def test_default_cors_origins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DDS_CORS_ORIGINS", raising=False)
        assert cors_origins() == ["http://localhost:3000"]

    def test_cors_origins_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DDS_CORS_ORIGINS", "https://a.example, https://b.example,")
        assert cors_origins() == ["https://a.example", "https://b.example"]

    def test_cors_header_sent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DDS_CORS_ORIGINS", "https://dds.example")
        client = _create_test_client()
        response = client.get(
            "/api/health", headers={"Origin": "https://dds.example"}
        )
        assert response.headers["access-control-allow-origin"] == "https://dds.example"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("", 20), ("7", 7), ("0", 0), ("-3", 20), ("many", 20)],
    )
    def test_preview_sample_size(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
    ) -> None:
        monkeypatch.setenv("DDS_PREVIEW_SAMPLE_SIZE", raw)
        assert preview_sample_size() == expected
