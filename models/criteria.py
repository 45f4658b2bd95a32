"""Weighted criteria request.

Every criterion is an explicit optional field. A criterion left out of the
request, or sent with a weight of 0, takes no part in scoring.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Criterion(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    weight: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.weight > 0


class PriceCriterion(_Criterion):
    value: float


class MinCountCriterion(_Criterion):
    value: int = Field(ge=0)


class GardenCriterion(_Criterion):
    pass


class StudentCriterion(_Criterion):
    value: bool


class PropertyTypeCriterion(_Criterion):
    values: list[str] = Field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.weight > 0 and len(self.values) > 0


class LocationCriterion(_Criterion):
    name: str = ""
    lat: float
    lng: float
    max_distance: float  # km


class RoomChecks(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    min_double_rooms: Optional[int] = Field(default=None, ge=0)
    min_ensuite_rooms: Optional[int] = Field(default=None, ge=0)
    similar_sized_rooms: Optional[bool] = None
    has_master_bedroom: Optional[bool] = None

    @property
    def count(self) -> int:
        return sum(
            1
            for v in (
                self.min_double_rooms,
                self.min_ensuite_rooms,
                self.similar_sized_rooms,
                self.has_master_bedroom,
            )
            if v is not None
        )


class RoomsCriterion(_Criterion):
    criteria: RoomChecks = Field(default_factory=RoomChecks)

    @property
    def is_active(self) -> bool:
        return self.weight > 0 and self.criteria.count > 0


class WeightedCriteria(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore"
    )

    max_price: Optional[PriceCriterion] = None
    min_bedrooms: Optional[MinCountCriterion] = None
    min_bathrooms: Optional[MinCountCriterion] = None
    has_garden: Optional[GardenCriterion] = None
    is_student: Optional[StudentCriterion] = None
    property_type: Optional[PropertyTypeCriterion] = None
    location: Optional[LocationCriterion] = None
    locations: list[LocationCriterion] = Field(default_factory=list)
    rooms: Optional[RoomsCriterion] = None

    @classmethod
    def from_json(cls, raw: str | bytes) -> WeightedCriteria:
        """Parse a JSON request body. Raises pydantic.ValidationError if malformed."""
        return cls.model_validate_json(raw)

    def is_empty(self) -> bool:
        """True when no criterion would contribute to a score."""
        singles = (
            self.max_price,
            self.min_bedrooms,
            self.min_bathrooms,
            self.has_garden,
            self.is_student,
            self.property_type,
            self.location,
            self.rooms,
        )
        return not any(c is not None and c.is_active for c in singles) and not any(
            loc.is_active for loc in self.locations
        )
