"""Per-criterion scorers.

Each scorer takes a property and one criterion and returns a CriterionScore:
the points earned, the points available (the criterion's weight) and the
match detail reported back to the caller. A scorer returns None when the
criterion cannot be applied to the property, in which case nothing is charged.
"""

from typing import NamedTuple, Optional

from config.scoring_constants import (
    BATHROOM_SURPLUS_STEP,
    BEDROOM_SURPLUS_STEP,
    MIN_COUNT_BASELINE,
    MIN_COUNT_SHORTFALL,
    OVER_BOUND_CAP,
    OVER_BOUND_CEILING,
    WITHIN_BOUND_BONUS,
    WITHIN_BOUND_FLOOR,
)
from models.criteria import (
    GardenCriterion,
    LocationCriterion,
    MinCountCriterion,
    PriceCriterion,
    PropertyTypeCriterion,
    RoomsCriterion,
    StudentCriterion,
)
from models.enums import RoomCheck
from models.property import (
    CriterionMatch,
    LocationMatch,
    MatchDetail,
    Property,
    RoomsMatch,
)
from scoring.geo import haversine_km


class CriterionScore(NamedTuple):
    achieved: float
    max_achievable: float
    detail: MatchDetail


def _upper_bound_share(value: float, bound: float) -> tuple[float, bool]:
    """Share of the weight earned by a value against a ceiling.

    At or under the bound: 50% at the bound rising linearly to 100% at 0.
    Over the bound: 30% just past it, decaying to 0% at double the bound.
    A zero bound earns the at-bound share when met and nothing otherwise.
    """
    if value <= bound:
        ratio = 1 - value / bound if bound else 0.0
        return WITHIN_BOUND_FLOOR + ratio * WITHIN_BOUND_BONUS, True

    if bound == 0:
        return 0.0, False

    over_ratio = min((value - bound) / bound, OVER_BOUND_CAP)
    return OVER_BOUND_CEILING * (1 - over_ratio), False


def _lower_bound_share(value: int, minimum: int, step: float) -> tuple[float, bool]:
    """Share of the weight earned by a count against a floor.

    At the minimum: 80%, plus `step` for each unit of surplus, capped at 100%.
    Below it: up to 40%, in proportion to how close the count gets.
    """
    if value >= minimum:
        extra = value - minimum
        return min(1, MIN_COUNT_BASELINE + extra * step), True

    return (value / minimum) * MIN_COUNT_SHORTFALL, False


def score_price(prop: Property, criterion: PriceCriterion) -> CriterionScore:
    weight = criterion.weight
    share, matched = _upper_bound_share(prop.price, criterion.value)
    achieved = weight * share
    return CriterionScore(
        achieved, weight, CriterionMatch(matched=matched, contribution=achieved)
    )


def score_bedrooms(prop: Property, criterion: MinCountCriterion) -> CriterionScore:
    return _score_min_count(prop.bedrooms, criterion, BEDROOM_SURPLUS_STEP)


def score_bathrooms(prop: Property, criterion: MinCountCriterion) -> CriterionScore:
    return _score_min_count(prop.bathrooms, criterion, BATHROOM_SURPLUS_STEP)


def _score_min_count(
    value: int, criterion: MinCountCriterion, step: float
) -> CriterionScore:
    weight = criterion.weight
    share, matched = _lower_bound_share(value, criterion.value, step)
    achieved = weight * share
    return CriterionScore(
        achieved, weight, CriterionMatch(matched=matched, contribution=achieved)
    )


def score_garden(prop: Property, criterion: GardenCriterion) -> CriterionScore:
    """All or nothing: a garden is there or it isn't."""
    weight = criterion.weight
    achieved = weight if prop.has_garden else 0.0
    return CriterionScore(
        achieved, weight, CriterionMatch(matched=prop.has_garden, contribution=achieved)
    )


def score_student(prop: Property, criterion: StudentCriterion) -> CriterionScore:
    weight = criterion.weight
    matched = criterion.value == prop.is_student
    achieved = weight if matched else 0.0
    return CriterionScore(
        achieved, weight, CriterionMatch(matched=matched, contribution=achieved)
    )


def score_property_type(
    prop: Property, criterion: PropertyTypeCriterion
) -> CriterionScore:
    """Case-insensitive substring match against any requested type."""
    weight = criterion.weight
    actual = prop.property_type.lower()
    matched = any(wanted.lower() in actual for wanted in criterion.values)
    achieved = weight if matched else 0.0
    return CriterionScore(
        achieved, weight, CriterionMatch(matched=matched, contribution=achieved)
    )


def score_location(
    prop: Property, criterion: LocationCriterion
) -> Optional[CriterionScore]:
    """Proximity to one point. Properties without coordinates are skipped."""
    if not prop.has_coordinates:
        return None

    weight = criterion.weight
    distance = haversine_km(
        criterion.lat, criterion.lng, prop.latitude, prop.longitude
    )
    share, matched = _upper_bound_share(distance, criterion.max_distance)
    achieved = weight * share
    return CriterionScore(
        achieved,
        weight,
        LocationMatch(
            matched=matched,
            contribution=achieved,
            distance=distance,
            name=criterion.name,
        ),
    )


def score_rooms(prop: Property, criterion: RoomsCriterion) -> Optional[CriterionScore]:
    """Average of the requested room sub-checks, scaled by the bundle weight.

    Skipped when the property has no room breakdown or no sub-check is requested.
    """
    details = prop.room_details
    wanted = criterion.criteria
    if details is None or wanted.count == 0:
        return None

    checks: dict[str, float] = {}
    if wanted.min_double_rooms is not None:
        checks[RoomCheck.MIN_DOUBLE_ROOMS.value] = _count_check(
            details.double_rooms, wanted.min_double_rooms
        )
    if wanted.min_ensuite_rooms is not None:
        checks[RoomCheck.MIN_ENSUITE_ROOMS.value] = _count_check(
            details.ensuite_rooms, wanted.min_ensuite_rooms
        )
    if wanted.similar_sized_rooms is not None:
        checks[RoomCheck.SIMILAR_SIZED_ROOMS.value] = float(
            details.similar_sized_rooms == wanted.similar_sized_rooms
        )
    if wanted.has_master_bedroom is not None:
        checks[RoomCheck.HAS_MASTER_BEDROOM.value] = float(
            details.has_master_bedroom == wanted.has_master_bedroom
        )

    weight = criterion.weight
    achieved = weight * sum(checks.values()) / len(checks)
    matched = all(v == 1.0 for v in checks.values())
    return CriterionScore(
        achieved,
        weight,
        RoomsMatch(matched=matched, contribution=achieved, checks=checks),
    )


def _count_check(actual: int, required: int) -> float:
    if actual < required:
        return min(1.0, actual / required)
    return 1.0
