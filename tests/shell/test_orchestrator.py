"""Tests for the Orchestrator module.

Tests the coordination between functional core and imperative shell.
Uses mocks for shell components to test orchestration logic.
"""

from unittest.mock import Mock

import pytest

from src.core.config import Config, RateLimitConfig
from src.core.geo import Coordinates
from src.orchestrator import Orchestrator, RefreshResult


NOW = 1_700_000_000.0
NOW_MS = 1_700_000_000_000
LA = Coordinates(34.052235, -118.243683)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def raw_events():
    return [
        {
            "id": "eq-1",
            "type": "earthquake",
            "title": "M 6.2 - Los Angeles",
            "coordinates": {"latitude": 34.052235, "longitude": -118.243683},
            "timestamp": NOW_MS - 3_600_000,
            "magnitude": 6.2,
        },
        {
            "id": "fl-1",
            "type": "flood",
            "title": "Houston flooding",
            "coordinates": {"latitude": 29.760427, "longitude": -95.369804},
            "timestamp": NOW_MS - 7_200_000,
            "waterLevel": 2.5,
        },
        {"id": "broken"},
    ]


@pytest.fixture
def raw_shelters():
    return [
        {
            "id": "shelter-1",
            "name": "City Community Center",
            "coordinates": {"latitude": 34.052235, "longitude": -118.243683},
            "capacity": 200,
            "occupancy": 45,
        },
    ]


@pytest.fixture
def feed(raw_events, raw_shelters):
    mock_feed = Mock()
    mock_feed.fetch_disasters.return_value = raw_events
    mock_feed.fetch_shelters.return_value = raw_shelters
    return mock_feed


@pytest.fixture
def location_provider():
    provider = Mock()
    provider.get_current_location.return_value = LA
    return provider


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return Config(rate_limit=RateLimitConfig(max_requests=2, window_seconds=60))


@pytest.fixture
def orchestrator(config, feed, location_provider, clock):
    return Orchestrator(
        config,
        feed=feed,
        store=Mock(),
        location_provider=location_provider,
        clock=clock,
    )


class TestRefreshResult:
    """Tests for RefreshResult."""

    def test_success_without_errors(self):
        assert RefreshResult(view=None).success is True

    def test_rate_limited_is_not_success(self):
        result = RefreshResult(view=None, rate_limited=True)

        assert result.success is False
        assert result.summary == "Refresh skipped: rate limited"

    def test_summary_without_view(self):
        assert RefreshResult(view=None).summary == "No data available"


class TestRefresh:
    """Tests for Orchestrator.refresh."""

    def test_builds_dashboard(self, orchestrator):
        result = orchestrator.refresh()

        assert result.success is True
        assert result.events_fetched == 2
        assert result.shelters_fetched == 1
        assert [e.id for e in result.view.nearby_events] == ["eq-1"]
        assert [e.id for e in result.view.critical_events] == ["eq-1"]
        assert [s.id for s in result.view.nearby_shelters] == ["shelter-1"]
        assert orchestrator.last_view is result.view
        assert result.summary.startswith("2 active alerts, 1 critical")

    def test_without_location(self, orchestrator, location_provider):
        location_provider.get_current_location.return_value = None

        result = orchestrator.refresh()

        assert result.view.location is None
        assert len(result.view.nearby_events) == 2
        assert result.view.nearby_shelters == []

    def test_rate_limited_returns_previous_view(self, orchestrator, feed):
        first = orchestrator.refresh()
        orchestrator.refresh()

        result = orchestrator.refresh()

        assert result.rate_limited is True
        assert result.view is orchestrator.last_view
        assert orchestrator.last_view is not first.view
        assert feed.fetch_disasters.call_count == 2

    def test_rate_limit_window_resets(self, orchestrator, clock):
        orchestrator.refresh()
        orchestrator.refresh()
        assert orchestrator.refresh().rate_limited is True

        clock.now += 61

        assert orchestrator.refresh().rate_limited is False

    def test_rate_limit_state_replaced(self, orchestrator):
        before = orchestrator.rate_limit_state

        orchestrator.refresh()

        assert before.count == 0
        assert orchestrator.rate_limit_state.count == 1

    def test_event_fetch_failure(self, orchestrator, feed):
        feed.fetch_disasters.side_effect = FileNotFoundError("catalog.yaml")

        result = orchestrator.refresh()

        assert result.success is False
        assert result.view is None
        assert "Failed to fetch disaster data" in result.errors[0]
        feed.fetch_shelters.assert_not_called()

    def test_event_fetch_failure_keeps_last_view(self, orchestrator, feed):
        first = orchestrator.refresh()
        feed.fetch_disasters.side_effect = OSError("disk")

        result = orchestrator.refresh()

        assert result.view is first.view

    def test_shelter_fetch_failure_is_partial(self, orchestrator, feed):
        feed.fetch_shelters.side_effect = OSError("disk")

        result = orchestrator.refresh()

        assert result.success is False
        assert result.view is not None
        assert result.view.nearby_shelters == []
        assert "Failed to fetch shelters" in result.errors[0]

    def test_filters_event_types(self, config, feed, location_provider, clock):
        orchestrator = Orchestrator(
            config,
            feed=feed,
            store=Mock(),
            location_provider=location_provider,
            clock=clock,
            event_types={"flood"},
        )

        result = orchestrator.refresh()

        assert result.events_fetched == 1
        assert [e.id for e in result.view.events] == ["fl-1"]


class TestWatch:
    """Tests for Orchestrator.watch."""

    def make_orchestrator(self, config, feed, location_provider, clock, sleep):
        return Orchestrator(
            config,
            feed=feed,
            store=Mock(),
            location_provider=location_provider,
            clock=clock,
            sleep=sleep,
        )

    def test_sleeps_refresh_interval_between_cycles(self, feed, location_provider, clock):
        config = Config(refresh_interval_seconds=300)
        sleep = Mock()
        orchestrator = self.make_orchestrator(config, feed, location_provider, clock, sleep)

        results = list(orchestrator.watch(max_cycles=3))

        assert len(results) == 3
        assert sleep.call_count == 2
        sleep.assert_called_with(300)

    def test_limiter_rejects_cycle_after_max_requests(self, feed, location_provider, clock):
        config = Config(
            refresh_interval_seconds=10,
            rate_limit=RateLimitConfig(max_requests=2, window_seconds=60),
        )

        def sleep(seconds):
            clock.now += seconds

        orchestrator = self.make_orchestrator(config, feed, location_provider, clock, sleep)

        results = list(orchestrator.watch(max_cycles=3))

        assert [r.rate_limited for r in results] == [False, False, True]
        assert results[2].view is results[1].view
        assert feed.fetch_disasters.call_count == 2

    def test_window_reset_allows_refresh_again(self, feed, location_provider, clock):
        config = Config(
            refresh_interval_seconds=40,
            rate_limit=RateLimitConfig(max_requests=1, window_seconds=60),
        )

        def sleep(seconds):
            clock.now += seconds

        orchestrator = self.make_orchestrator(config, feed, location_provider, clock, sleep)

        results = list(orchestrator.watch(max_cycles=3))

        # t=0 allowed, t=40 rejected, t=80 past the window end
        assert [r.rate_limited for r in results] == [False, True, False]
