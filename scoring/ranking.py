"""Aggregates criterion scores into a 0-100 relevance score and ranks properties."""

import logging
import math
from typing import Iterable, Iterator, Optional

from models.criteria import LocationCriterion, WeightedCriteria
from models.enums import CriterionKey
from models.property import MatchDetail, Property, ScoredProperty
from scoring.scorers import (
    CriterionScore,
    score_bathrooms,
    score_bedrooms,
    score_garden,
    score_location,
    score_price,
    score_property_type,
    score_rooms,
    score_student,
)

logger = logging.getLogger(__name__)


def score_properties(
    properties: Iterable[Property], criteria: WeightedCriteria
) -> list[ScoredProperty]:
    """Score every property and sort by relevance, highest first.

    Properties with equal scores keep their input order.
    """
    scored = [score_property(prop, criteria) for prop in properties]
    scored.sort(key=lambda s: s.relevance_score, reverse=True)

    if scored:
        logger.info(
            f"Scored {len(scored)} properties "
            f"(top {scored[0].relevance_score}, bottom {scored[-1].relevance_score})"
        )
    else:
        logger.info("No properties to score")
    return scored


def score_property(prop: Property, criteria: WeightedCriteria) -> ScoredProperty:
    """Compute one property's relevance score and per-criterion breakdown."""
    total = 0.0
    max_possible = 0.0
    details: dict[str, MatchDetail] = {}

    for key, result in _criterion_scores(prop, criteria):
        if result is None:
            continue
        total += result.achieved
        max_possible += result.max_achievable
        details[key] = result.detail

    relevance = _round2(total / max_possible * 100) if max_possible > 0 else 0.0
    logger.debug(f"{prop.id}: {total:.3f}/{max_possible:.3f} -> {relevance}")

    return ScoredProperty(
        **dict(prop), relevance_score=relevance, match_details=details
    )


def _criterion_scores(
    prop: Property, criteria: WeightedCriteria
) -> Iterator[tuple[str, Optional[CriterionScore]]]:
    """Run the scorer of every active criterion, in a fixed order."""
    if criteria.max_price and criteria.max_price.is_active:
        yield CriterionKey.PRICE.value, score_price(prop, criteria.max_price)

    if criteria.min_bedrooms and criteria.min_bedrooms.is_active:
        yield CriterionKey.BEDROOMS.value, score_bedrooms(prop, criteria.min_bedrooms)

    if criteria.min_bathrooms and criteria.min_bathrooms.is_active:
        yield CriterionKey.BATHROOMS.value, score_bathrooms(
            prop, criteria.min_bathrooms
        )

    if criteria.has_garden and criteria.has_garden.is_active:
        yield CriterionKey.GARDEN.value, score_garden(prop, criteria.has_garden)

    if criteria.is_student and criteria.is_student.is_active:
        yield CriterionKey.STUDENT.value, score_student(prop, criteria.is_student)

    if criteria.property_type and criteria.property_type.is_active:
        yield CriterionKey.PROPERTY_TYPE.value, score_property_type(
            prop, criteria.property_type
        )

    if criteria.location and criteria.location.is_active:
        yield CriterionKey.LOCATION.value, score_location(prop, criteria.location)

    for key, location in location_keys(criteria.locations):
        if location.is_active:
            yield key, score_location(prop, location)

    if criteria.rooms and criteria.rooms.is_active:
        yield CriterionKey.ROOMS.value, score_rooms(prop, criteria.rooms)


def location_keys(
    locations: list[LocationCriterion],
) -> list[tuple[str, LocationCriterion]]:
    """Assign each named location its own match-detail key.

    Keys are 'location:<name>', falling back to the index for blank names.
    A repeated key gets a '#<index>' suffix so every location is reported.
    """
    keyed: list[tuple[str, LocationCriterion]] = []
    seen: set[str] = set()
    for i, location in enumerate(locations):
        label = location.name.strip() or str(i)
        key = f"{CriterionKey.LOCATION.value}:{label}"
        if key in seen:
            key = f"{key}#{i}"
        seen.add(key)
        keyed.append((key, location))
    return keyed


def _round2(value: float) -> float:
    """Round to 2 decimals with halves rounded up. NaN and infinities pass through."""
    if not math.isfinite(value):
        return value
    return math.floor(value * 100 + 0.5) / 100
