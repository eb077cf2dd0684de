"""Unit tests for shelter parsing, occupancy and search."""

import pytest

from src.core.geo import Coordinates
from src.core.shelter import (
    Shelter,
    available_spaces,
    filter_active,
    occupancy_ratio,
    occupancy_status,
    parse_shelter,
    parse_shelters,
    search_shelters,
)


@pytest.fixture
def raw_shelter():
    return {
        "id": "shelter-1",
        "name": "City Community Center",
        "coordinates": {"latitude": 34.052235, "longitude": -118.243683},
        "address": "123 Main St, Los Angeles, CA 90012",
        "capacity": 200,
        "occupancy": 45,
        "contact": "213-555-1234",
        "amenities": ["Food", "Water", "Medical"],
        "openingTime": "24/7",
        "closingTime": "24/7",
        "active": True,
    }


def make_shelter(shelter_id="s", name="Shelter", address="", capacity=100, occupancy=0, active=True):
    return Shelter(
        id=shelter_id,
        name=name,
        coordinates=Coordinates(0.0, 0.0),
        capacity=capacity,
        occupancy=occupancy,
        address=address,
        active=active,
    )


class TestParseShelter:
    """Tests for parse_shelter() function."""

    def test_parses_valid_record(self, raw_shelter):
        shelter = parse_shelter(raw_shelter)

        assert shelter.id == "shelter-1"
        assert shelter.capacity == 200
        assert shelter.occupancy == 45
        assert shelter.amenities == ("Food", "Water", "Medical")
        assert shelter.opening_time == "24/7"
        assert shelter.active is True

    def test_missing_coordinates_returns_none(self, raw_shelter):
        del raw_shelter["coordinates"]

        assert parse_shelter(raw_shelter) is None

    def test_non_positive_capacity_returns_none(self, raw_shelter):
        raw_shelter["capacity"] = 0

        assert parse_shelter(raw_shelter) is None

    def test_negative_occupancy_returns_none(self, raw_shelter):
        raw_shelter["occupancy"] = -1

        assert parse_shelter(raw_shelter) is None

    def test_occupancy_over_capacity_is_allowed(self, raw_shelter):
        raw_shelter["occupancy"] = 250

        assert parse_shelter(raw_shelter).occupancy == 250

    def test_parse_shelters_skips_invalid(self, raw_shelter):
        shelters = parse_shelters([raw_shelter, {"id": "x"}])

        assert [s.id for s in shelters] == ["shelter-1"]


class TestOccupancy:
    """Tests for occupancy helpers."""

    @pytest.mark.parametrize("occupancy,expected", [
        (95, "Near Capacity"),
        (90, "Near Capacity"),
        (89, "High Capacity"),
        (75, "High Capacity"),
        (74, "Moderate"),
        (50, "Moderate"),
        (49, "Available"),
        (0, "Available"),
    ])
    def test_status_thresholds(self, occupancy, expected):
        assert occupancy_status(make_shelter(capacity=100, occupancy=occupancy)) == expected

    def test_ratio(self):
        assert occupancy_ratio(make_shelter(capacity=200, occupancy=45)) == pytest.approx(0.225)

    def test_available_spaces_never_negative(self):
        assert available_spaces(make_shelter(capacity=10, occupancy=12)) == 0
        assert available_spaces(make_shelter(capacity=10, occupancy=4)) == 6


class TestSearch:
    """Tests for search_shelters() and filter_active()."""

    @pytest.fixture
    def shelters(self):
        return [
            make_shelter("1", name="Lincoln High School", address="456 Oak Ave"),
            make_shelter("2", name="Westside Church", address="789 Elm St"),
            make_shelter("3", name="Rec Center", address="321 Pine Rd", active=False),
        ]

    def test_matches_name_case_insensitive(self, shelters):
        assert [s.id for s in search_shelters(shelters, "CHURCH")] == ["2"]

    def test_matches_address(self, shelters):
        assert [s.id for s in search_shelters(shelters, "oak ave")] == ["1"]

    def test_empty_term_matches_all(self, shelters):
        assert search_shelters(shelters, "  ") == shelters

    def test_no_match(self, shelters):
        assert search_shelters(shelters, "stadium") == []

    def test_filter_active(self, shelters):
        assert [s.id for s in filter_active(shelters)] == ["1", "2"]
