"""Tests for the aggregator: normalisation, criterion gating and ordering."""

import math

import pytest

from models.criteria import (
    GardenCriterion,
    LocationCriterion,
    MinCountCriterion,
    PriceCriterion,
    RoomChecks,
    RoomsCriterion,
    WeightedCriteria,
)
from models.property import Property, RoomDetails
from scoring.ranking import location_keys, score_properties, score_property


def make_property(id: str = "p1", **overrides) -> Property:
    fields = {"id": id, "price": 1000, "bedrooms": 2, "bathrooms": 1}
    fields.update(overrides)
    return Property(**fields)


class TestScoreProperty:
    def test_worked_example(self):
        prop = make_property(price=1000, bedrooms=2, bathrooms=1, has_garden=True)
        criteria = WeightedCriteria(
            max_price=PriceCriterion(value=1500, weight=5),
            min_bedrooms=MinCountCriterion(value=2, weight=5),
            has_garden=GardenCriterion(weight=3),
        )
        scored = score_property(prop, criteria)
        # (3.333 + 4.0 + 3) / 13
        assert scored.relevance_score == 79.49
        assert set(scored.match_details) == {"price", "bedrooms", "hasGarden"}
        assert scored.match_details["price"].contribution == pytest.approx(10 / 3)
        assert scored.match_details["bedrooms"].contribution == pytest.approx(4.0)

    def test_empty_criteria_scores_zero(self):
        scored = score_property(make_property(has_garden=True), WeightedCriteria())
        assert scored.relevance_score == 0
        assert scored.match_details == {}

    def test_perfect_match_scores_100(self):
        criteria = WeightedCriteria(has_garden=GardenCriterion(weight=2))
        scored = score_property(make_property(has_garden=True), criteria)
        assert scored.relevance_score == 100.0

    def test_zero_weight_is_inert(self):
        criteria = WeightedCriteria(
            has_garden=GardenCriterion(weight=0),
            min_bedrooms=MinCountCriterion(value=2, weight=5),
        )
        scored = score_property(make_property(bedrooms=4), criteria)
        assert "hasGarden" not in scored.match_details
        assert scored.relevance_score == 100.0

    def test_negative_weight_is_inert(self):
        criteria = WeightedCriteria(has_garden=GardenCriterion(weight=-3))
        scored = score_property(make_property(), criteria)
        assert scored.relevance_score == 0
        assert scored.match_details == {}

    def test_zero_price_bound_still_charged(self):
        criteria = WeightedCriteria.from_json(
            '{"maxPrice": {"value": 0, "weight": 5}, "hasGarden": {"weight": 3}}'
        )
        scored = score_property(make_property(price=900, has_garden=True), criteria)
        assert scored.relevance_score == 37.5
        assert scored.match_details["price"].matched is False

    def test_keeps_property_fields(self):
        prop = make_property(title="Two bed flat", url="https://example.com/1")
        scored = score_property(prop, WeightedCriteria())
        assert scored.id == "p1"
        assert scored.title == "Two bed flat"
        assert scored.url == "https://example.com/1"

    def test_infinite_bound_does_not_raise(self):
        criteria = WeightedCriteria(max_price=PriceCriterion(value=math.inf, weight=5))
        scored = score_property(make_property(price=1000), criteria)
        assert scored.relevance_score == 100.0


class TestLocations:
    def test_each_location_charged(self):
        prop = make_property(latitude=52.95, longitude=-1.15)
        criteria = WeightedCriteria(
            locations=[
                LocationCriterion(name="work", lat=52.95, lng=-1.15, max_distance=5, weight=1),
                LocationCriterion(name="gym", lat=51.5, lng=-0.12, max_distance=5, weight=2),
                LocationCriterion(name="family", lat=55.95, lng=-3.19, max_distance=5, weight=3),
            ]
        )
        scored = score_property(prop, criteria)
        # Only "work" is close: 1 of a possible 6
        assert scored.relevance_score == 16.67
        assert set(scored.match_details) == {"location:work", "location:gym", "location:family"}
        assert scored.match_details["location:work"].matched is True
        assert scored.match_details["location:gym"].matched is False

    def test_singular_location(self):
        prop = make_property(latitude=52.95, longitude=-1.15)
        criteria = WeightedCriteria(
            location=LocationCriterion(lat=52.95, lng=-1.15, max_distance=5, weight=4)
        )
        scored = score_property(prop, criteria)
        assert scored.relevance_score == 100.0
        assert scored.match_details["location"].distance == pytest.approx(0.0)

    def test_no_coordinates_not_charged(self):
        criteria = WeightedCriteria(
            has_garden=GardenCriterion(weight=1),
            locations=[LocationCriterion(name="work", lat=52.95, lng=-1.15, max_distance=5, weight=9)],
        )
        scored = score_property(make_property(has_garden=True), criteria)
        assert scored.relevance_score == 100.0
        assert "location:work" not in scored.match_details

    def test_location_keys(self):
        keys = [
            key
            for key, _ in location_keys(
                [
                    LocationCriterion(name="work", lat=0, lng=0, max_distance=1, weight=1),
                    LocationCriterion(name="", lat=0, lng=0, max_distance=1, weight=1),
                    LocationCriterion(name="work", lat=1, lng=1, max_distance=1, weight=1),
                ]
            )
        ]
        assert keys == ["location:work", "location:1", "location:work#2"]


class TestRooms:
    def test_skipped_without_room_details(self):
        criteria = WeightedCriteria(
            has_garden=GardenCriterion(weight=1),
            rooms=RoomsCriterion(criteria=RoomChecks(min_double_rooms=2), weight=5),
        )
        scored = score_property(make_property(has_garden=True), criteria)
        assert scored.relevance_score == 100.0
        assert "rooms" not in scored.match_details

    def test_charged_with_room_details(self):
        criteria = WeightedCriteria(
            has_garden=GardenCriterion(weight=1),
            rooms=RoomsCriterion(criteria=RoomChecks(min_double_rooms=2), weight=3),
        )
        prop = make_property(has_garden=True, room_details=RoomDetails(double_rooms=0))
        scored = score_property(prop, criteria)
        assert scored.relevance_score == 25.0
        assert scored.match_details["rooms"].checks == {"minDoubleRooms": 0.0}


class TestScoreProperties:
    def test_sorted_descending(self):
        criteria = WeightedCriteria(max_price=PriceCriterion(value=1500, weight=5))
        props = [
            make_property("a", price=2000),
            make_property("b", price=500),
            make_property("c", price=1200),
        ]
        scored = score_properties(props, criteria)
        assert [s.id for s in scored] == ["b", "c", "a"]
        scores = [s.relevance_score for s in scored]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        criteria = WeightedCriteria(has_garden=GardenCriterion(weight=1))
        props = [
            make_property("a", has_garden=False),
            make_property("b", has_garden=True),
            make_property("c", has_garden=False),
            make_property("d", has_garden=True),
        ]
        scored = score_properties(props, criteria)
        assert [s.id for s in scored] == ["b", "d", "a", "c"]

    def test_empty_criteria_keeps_order(self):
        props = [make_property(str(i)) for i in range(5)]
        scored = score_properties(props, WeightedCriteria())
        assert [s.id for s in scored] == ["0", "1", "2", "3", "4"]
        assert all(s.relevance_score == 0 for s in scored)

    def test_no_properties(self):
        criteria = WeightedCriteria(has_garden=GardenCriterion(weight=1))
        assert score_properties([], criteria) == []

    def test_accepts_generator(self):
        criteria = WeightedCriteria(has_garden=GardenCriterion(weight=1))
        scored = score_properties((make_property(str(i)) for i in range(3)), criteria)
        assert len(scored) == 3
