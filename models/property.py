from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.enums import FurnishedStatus


class RoomDetails(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    double_rooms: int = Field(default=0, ge=0)
    single_rooms: int = Field(default=0, ge=0)
    ensuite_rooms: int = Field(default=0, ge=0)
    has_master_bedroom: bool = False
    similar_sized_rooms: bool = False


class Property(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    # Identity
    id: str
    title: str = ""
    url: str = ""
    description: str = ""

    # Scored attributes
    price: float = Field(ge=0)
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: int = Field(default=0, ge=0)
    property_type: str = ""
    has_garden: bool = False
    is_student: bool = False

    # Location
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: str = ""
    postcode: Optional[str] = None

    room_details: Optional[RoomDetails] = None

    # Metadata
    price_qualifier: Optional[str] = None  # e.g. "per month", "per week"
    furnished_status: Optional[FurnishedStatus] = None
    available_from: Optional[str] = None
    added_on: str = ""
    images: list[str] = Field(default_factory=list)
    scraped_at: Optional[datetime] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class CriterionMatch(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: Literal["criterion"] = "criterion"
    matched: bool
    contribution: float


class LocationMatch(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: Literal["location"] = "location"
    matched: bool
    contribution: float
    distance: float  # km
    name: str = ""


class RoomsMatch(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: Literal["rooms"] = "rooms"
    matched: bool
    contribution: float
    checks: dict[str, float] = Field(default_factory=dict)


MatchDetail = Annotated[
    Union[CriterionMatch, LocationMatch, RoomsMatch],
    Field(discriminator="kind"),
]


class ScoredProperty(Property):
    relevance_score: float = 0.0
    match_details: dict[str, MatchDetail] = Field(default_factory=dict)

    def breakdown_str(self) -> str:
        """Compact per-criterion summary, e.g. 'price:3.33 bedrooms:1.20!'.

        A trailing '!' marks a criterion the property did not meet.
        """
        return " ".join(
            f"{key}:{detail.contribution:.2f}{'' if detail.matched else '!'}"
            for key, detail in self.match_details.items()
        )

    def summary_line(self) -> str:
        """One-line description for log output."""
        return (
            f"[{self.relevance_score}] £{self.price:g} | "
            f"{self.bedrooms}bd/{self.bathrooms}ba | "
            f"{self.property_type or 'Unknown'} | {self.title}"
        )
