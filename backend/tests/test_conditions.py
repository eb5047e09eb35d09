"""Tests for the conditional feature evaluator."""

from __future__ import annotations

from ddspolicy.conditions import check_conditional
from ddspolicy.models.config import BuildingInput, PolicyConfig
from ddspolicy.models.enums import FeatureKey


def _building(**overrides: object) -> BuildingInput:
    fields: dict[str, object] = {"id": 1, "name": "Tower A", "height": 45.0}
    fields.update(overrides)
    return BuildingInput(**fields)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Project flags
# ---------------------------------------------------------------------------


class TestProjectFlags:
    def test_swimming_pool(self) -> None:
        assert check_conditional(
            FeatureKey.HAS_SWIMMING_POOL, PolicyConfig(has_swimming_pool=True)
        )
        assert not check_conditional(FeatureKey.HAS_SWIMMING_POOL, PolicyConfig())

    def test_fitout(self) -> None:
        assert check_conditional(FeatureKey.HAS_FITOUT, PolicyConfig(has_fitout=True))
        assert not check_conditional(FeatureKey.HAS_FITOUT, PolicyConfig())

    def test_parking_defaults_to_present(self) -> None:
        assert check_conditional(FeatureKey.HAS_PARKING, PolicyConfig())
        assert not check_conditional(
            FeatureKey.HAS_PARKING, PolicyConfig(has_parking=False)
        )

    def test_plain_string_keys_work(self) -> None:
        assert check_conditional("has_fitout", PolicyConfig(has_fitout=True))


# ---------------------------------------------------------------------------
# Building features
# ---------------------------------------------------------------------------


class TestBasement:
    def test_project_basement_count(self) -> None:
        config = PolicyConfig(basement_count=2)
        assert check_conditional(FeatureKey.HAS_BASEMENT, config, _building())

    def test_building_basement_count(self) -> None:
        building = _building(basement_count=1)
        assert check_conditional(FeatureKey.HAS_BASEMENT, PolicyConfig(), building)

    def test_no_basement_anywhere(self) -> None:
        building = _building(basement_count=0)
        assert not check_conditional(
            FeatureKey.HAS_BASEMENT, PolicyConfig(), building
        )

    def test_project_scope_uses_project_count(self) -> None:
        assert check_conditional(
            FeatureKey.HAS_BASEMENT, PolicyConfig(basement_count=1)
        )
        assert not check_conditional(FeatureKey.HAS_BASEMENT, PolicyConfig())


class TestPodium:
    def test_has_podium_flag(self) -> None:
        assert check_conditional(
            FeatureKey.HAS_PODIUM, PolicyConfig(), _building(has_podium=True)
        )

    def test_podium_count(self) -> None:
        assert check_conditional(
            FeatureKey.HAS_PODIUM, PolicyConfig(), _building(podium_count=2)
        )

    def test_no_podium(self) -> None:
        assert not check_conditional(
            FeatureKey.HAS_PODIUM, PolicyConfig(), _building(has_podium=False)
        )

    def test_no_building_means_no_podium(self) -> None:
        assert not check_conditional(FeatureKey.HAS_PODIUM, PolicyConfig())


class TestPenthouse:
    def test_tall_building(self) -> None:
        assert check_conditional(
            FeatureKey.HAS_PENTHOUSE, PolicyConfig(), _building(height=61)
        )

    def test_exactly_sixty_metres_is_not_tall(self) -> None:
        assert not check_conditional(
            FeatureKey.HAS_PENTHOUSE, PolicyConfig(), _building(height=60)
        )

    def test_many_floors(self) -> None:
        assert check_conditional(
            FeatureKey.HAS_PENTHOUSE,
            PolicyConfig(),
            _building(height=45, total_floors=16),
        )

    def test_fifteen_floors_is_not_enough(self) -> None:
        assert not check_conditional(
            FeatureKey.HAS_PENTHOUSE,
            PolicyConfig(),
            _building(height=45, total_floors=15),
        )


# ---------------------------------------------------------------------------
# Permissive default
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_unknown_key_is_included(self) -> None:
        assert check_conditional("has_helipad", PolicyConfig(), _building())

    def test_no_key_is_included(self) -> None:
        assert check_conditional(None, PolicyConfig())
