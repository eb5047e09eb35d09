"""Tests for the policy input, catalog and schedule models."""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from ddspolicy.models import (
    BuildingInput,
    CanonicalLevel,
    DdsType,
    DeliverableTemplate,
    FloorInput,
    GeneratedDeliverableItem,
    HeightTier,
    PolicyConfig,
    Scope,
)


def _make_config(**overrides: object) -> PolicyConfig:
    """Helper to build a valid PolicyConfig with sensible defaults."""
    defaults: dict[str, object] = {
        "project_start_date": date(2026, 1, 1),
        "buildings": [
            BuildingInput(
                id=1,
                name="Tower A",
                height=95.0,
                floors=[FloorInput(number=0, name="Ground")],
            )
        ],
    }
    defaults.update(overrides)
    return PolicyConfig(**defaults)  # type: ignore[arg-type]


class TestPolicyConfig:
    def test_defaults(self) -> None:
        config = PolicyConfig()
        assert config.project_start_date is None
        assert config.buildings == ()
        assert config.tower_stagger_weeks == 4
        assert config.is_new_land is True
        assert config.has_parking is True
        assert config.consultant_offset_days == -7
        assert config.dds_type == DdsType.INTERNAL

    def test_lists_become_tuples(self) -> None:
        config = _make_config()
        assert isinstance(config.buildings, tuple)
        assert isinstance(config.buildings[0].floors, tuple)

    def test_frozen(self) -> None:
        config = _make_config()
        with pytest.raises(ValidationError):
            config.is_new_land = False  # type: ignore[misc]

    def test_negative_stagger_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_config(tower_stagger_weeks=-1)

    def test_negative_basement_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_config(basement_count=-2)

    def test_dds_type_from_string(self) -> None:
        assert _make_config(dds_type="consultant").dds_type == DdsType.CONSULTANT

    def test_unknown_dds_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_config(dds_type="contractor")

    def test_internal_has_no_offset(self) -> None:
        assert _make_config().dds_type_offset_days == 0

    def test_consultant_offset(self) -> None:
        config = _make_config(dds_type=DdsType.CONSULTANT, consultant_offset_days=-10)
        assert config.dds_type_offset_days == -10

    def test_json_round_trip(self) -> None:
        config = _make_config(dds_type="consultant")
        data = json.loads(config.model_dump_json())

        assert data["project_start_date"] == "2026-01-01"
        assert data["dds_type"] == "consultant"
        assert PolicyConfig.model_validate(data) == config


class TestBuildingInput:
    def test_defaults(self) -> None:
        building = BuildingInput(id="t1", name="Tower 1")
        assert building.height == 30.0
        assert building.tower_index == 0
        assert building.floors == ()
        assert building.basement_count is None

    def test_negative_height_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BuildingInput(id=1, name="Tower", height=-5)

    def test_negative_tower_index_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BuildingInput(id=1, name="Tower", tower_index=-1)


class TestCatalogModels:
    def test_height_tier_frozen(self) -> None:
        tier = HeightTier(
            max_height=90,
            design_months=7,
            construction_months=30,
            total_months=37,
            label="≤90m",
        )
        with pytest.raises(ValidationError):
            tier.label = "other"  # type: ignore[misc]

    def test_template_sr_no_starts_at_one(self) -> None:
        with pytest.raises(ValidationError):
            DeliverableTemplate(sr_no=0, name="x", day_offset_new=0, duration_days=0)

    def test_template_defaults(self) -> None:
        template = DeliverableTemplate(
            sr_no=1, name="Heat Load", day_offset_new=10, duration_days=5
        )
        assert template.scope == Scope.PLANT
        assert template.conditional is None
        assert template.level is None


class TestGeneratedItem:
    def test_json_dump(self) -> None:
        item = GeneratedDeliverableItem(
            sort_order=1,
            building_id="b-0",
            building_name="Tower A",
            phase="I - VFCs",
            section="I - VFCs",
            item_name="Tower A - VFC Ground Floor",
            discipline="MEP",
            level_type=CanonicalLevel.GROUND_FLOOR,
            policy_day_offset=180,
            expected_start_date=date(2026, 6, 30),
            expected_completion_date=None,
        )
        data = json.loads(item.model_dump_json())

        assert data["level_type"] == "GROUND FLOOR"
        assert data["scope"] == "Plant"
        assert data["expected_start_date"] == "2026-06-30"
        assert data["expected_completion_date"] is None
        assert data["is_external_area"] is False
