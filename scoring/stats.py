"""Summary statistics over a property collection."""

from collections import Counter
from typing import Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.property import Property


class PropertyStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int
    average_price: float
    student_properties: int
    with_garden: int
    property_types: dict[str, int]
    bedroom_distribution: dict[int, int]


def compute_stats(properties: Sequence[Property]) -> PropertyStats:
    """Counts and averages across the collection. Average price is 0 when empty."""
    total = len(properties)
    average_price = sum(p.price for p in properties) / total if total else 0.0

    return PropertyStats(
        total=total,
        average_price=average_price,
        student_properties=sum(1 for p in properties if p.is_student),
        with_garden=sum(1 for p in properties if p.has_garden),
        property_types=dict(Counter(p.property_type for p in properties)),
        bedroom_distribution=dict(sorted(Counter(p.bedrooms for p in properties).items())),
    )
