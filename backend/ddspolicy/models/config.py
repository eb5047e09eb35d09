"""Input models for one DDS generation call."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from ddspolicy.models.enums import DdsType


class FloorInput(BaseModel):
    """A single floor as recorded against a building."""

    model_config = ConfigDict(frozen=True)

    number: int = 0
    name: str | None = None


class BuildingInput(BaseModel):
    """One tower of the project.

    ``tower_index`` drives the stagger; the position of the building in
    ``PolicyConfig.buildings`` does not.
    """

    model_config = ConfigDict(frozen=True)

    id: str | int
    name: str
    height: float = Field(default=30.0, ge=0)
    tower_index: int = Field(default=0, ge=0)
    floors: tuple[FloorInput, ...] = ()
    basement_count: int | None = Field(default=None, ge=0)
    has_podium: bool | None = None
    podium_count: int | None = Field(default=None, ge=0)
    total_floors: int | None = Field(default=None, ge=0)


class SiteAreaInput(BaseModel):
    """An external site area (landscape, club house, entrance plaza...)."""

    model_config = ConfigDict(frozen=True)

    id: str | int
    name: str
    area_type: str


class PolicyConfig(BaseModel):
    """Everything the engine needs for one generation call.

    A missing ``project_start_date`` is accepted; every computed date is
    then ``None``. Callers that need real dates must validate first.
    """

    model_config = ConfigDict(frozen=True)

    project_start_date: date | None = None
    buildings: tuple[BuildingInput, ...] = ()
    tower_stagger_weeks: int = Field(default=4, ge=0)
    is_new_land: bool = True
    basement_count: int = Field(default=0, ge=0)
    has_swimming_pool: bool = False
    has_fitout: bool = False
    has_parking: bool = True
    consultant_offset_days: int = -7
    dds_type: DdsType = DdsType.INTERNAL
    site_areas: tuple[SiteAreaInput, ...] = ()

    @property
    def dds_type_offset_days(self) -> int:
        """Day shift applied to every date for consultant schedules."""
        if self.dds_type == DdsType.CONSULTANT:
            return self.consultant_offset_days
        return 0
