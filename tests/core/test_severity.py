"""Unit tests for severity classification.

Pure function tests - boundary values matter here.
"""

import pytest

from src.core.disaster import DisasterEvent
from src.core.geo import Coordinates
from src.core.severity import (
    SEVERITY_LEVELS,
    classify_event,
    classify_severity,
    highest_severity,
    severity_rank,
    sort_by_severity,
)


def make_event(event_id, disaster_type, **readings):
    """Create an event with the given readings."""
    return DisasterEvent(
        id=event_id,
        title=event_id,
        type=disaster_type,
        coordinates=Coordinates(0.0, 0.0),
        timestamp_ms=0,
        **readings,
    )


class TestEarthquake:
    """Earthquake thresholds are inclusive (>=)."""

    @pytest.mark.parametrize("magnitude,expected", [
        (7.5, "critical"),
        (6.0, "critical"),
        (5.9, "high"),
        (4.5, "high"),
        (4.4, "moderate"),
        (0.0, "moderate"),
    ])
    def test_boundaries(self, magnitude, expected):
        assert classify_severity("earthquake", magnitude) == expected


class TestFlood:
    """Flood thresholds are strict (>)."""

    def test_exactly_three_meters_is_high(self):
        assert classify_severity("flood", 3.0) == "high"

    def test_just_above_three_meters_is_critical(self):
        assert classify_severity("flood", 3.01) == "critical"

    def test_exactly_two_meters_is_moderate(self):
        assert classify_severity("flood", 2.0) == "moderate"

    def test_just_above_two_meters_is_high(self):
        assert classify_severity("flood", 2.5) == "high"


class TestWind:
    """Hurricane and tornado share strict wind thresholds."""

    @pytest.mark.parametrize("category", ["hurricane", "tornado"])
    def test_boundaries(self, category):
        assert classify_severity(category, 111) == "critical"
        assert classify_severity(category, 110) == "high"
        assert classify_severity(category, 75) == "high"
        assert classify_severity(category, 74) == "moderate"


class TestWildfire:
    """Wildfire area thresholds are strict (>)."""

    def test_boundaries(self):
        assert classify_severity("wildfire", 25000) == "critical"
        assert classify_severity("wildfire", 10000) == "high"
        assert classify_severity("wildfire", 5001) == "high"
        assert classify_severity("wildfire", 5000) == "moderate"


class TestFallbacks:
    """Unsupported categories and missing readings default to moderate."""

    def test_tsunami_without_reading(self):
        assert classify_severity("tsunami", None) == "moderate"

    def test_wildfire_without_reading(self):
        assert classify_severity("wildfire", None) == "moderate"

    def test_other_category_ignores_reading(self):
        assert classify_severity("other", 9999) == "moderate"

    def test_unknown_category(self):
        assert classify_severity("volcano", 8.0) == "moderate"

    def test_never_returns_low(self):
        for category in ("earthquake", "flood", "hurricane", "tornado", "wildfire"):
            for reading in (-10, 0, 0.1, 1, 50, 1e9):
                assert classify_severity(category, reading) != "low"

    def test_deterministic(self):
        results = {classify_severity("flood", 2.7) for _ in range(10)}
        assert results == {"high"}


class TestClassifyEvent:
    """Tests for classify_event() and the DisasterEvent.severity property."""

    def test_uses_category_reading(self):
        event = make_event("fl", "flood", water_level=4.2, magnitude=1.0)

        assert classify_event(event) == "critical"
        assert event.severity == "critical"

    def test_reading_for_other_category_is_ignored(self):
        event = make_event("eq", "earthquake", wind_speed=200)

        assert classify_event(event) == "moderate"


class TestRanking:
    """Tests for severity ordering helpers."""

    def test_rank_order(self):
        ranks = [severity_rank(level) for level in SEVERITY_LEVELS]
        assert ranks == [0, 1, 2, 3]

    def test_unknown_level_ranks_lowest(self):
        assert severity_rank("apocalyptic") == -1

    def test_sort_by_severity_is_stable(self):
        events = [
            make_event("m1", "earthquake", magnitude=3.0),
            make_event("c1", "earthquake", magnitude=6.5),
            make_event("m2", "tsunami"),
            make_event("h1", "flood", water_level=2.5),
            make_event("c2", "wildfire", area=20000),
        ]

        result = sort_by_severity(events)

        assert [e.id for e in result] == ["c1", "c2", "h1", "m1", "m2"]

    def test_highest_severity(self):
        events = [
            make_event("m", "tsunami"),
            make_event("h", "tornado", wind_speed=90),
        ]

        assert highest_severity(events) == "high"

    def test_highest_severity_empty(self):
        assert highest_severity([]) is None
