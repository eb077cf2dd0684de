"""Tests for the Incident Reporter module."""

from unittest.mock import Mock

import pytest

from src.core.geo import Coordinates
from src.shell.incident_reporter import REPORTS_KEY, IncidentReporter
from src.shell.local_store import LocalStore


LA = Coordinates(34.05, -118.24)


@pytest.fixture
def store(tmp_path):
    return LocalStore(tmp_path / "store.json")


@pytest.fixture
def reporter(store):
    return IncidentReporter(store, clock=lambda: 1_700_000_000.0)


class TestSubmit:
    """Tests for IncidentReporter.submit."""

    def test_valid_report_is_stored(self, reporter, store):
        result = reporter.submit("flood", "Street flooded", LA, images=("a.jpg",))

        assert result.success is True
        assert result.report.id == "report-1700000000000"
        assert result.report.user_id == "anonymous"
        stored = store.get(REPORTS_KEY)
        assert len(stored) == 1
        assert stored[0]["images"] == ["a.jpg"]

    def test_invalid_report_is_rejected(self, reporter, store):
        result = reporter.submit("flood", "", None)

        assert result.success is False
        assert result.report is None
        assert {e.field for e in result.errors} == {"description", "coordinates"}
        assert store.get(REPORTS_KEY) is None

    def test_storage_failure(self):
        store = Mock()
        store.append.return_value = False
        reporter = IncidentReporter(store, clock=lambda: 1.0)

        result = reporter.submit("wildfire", "Smoke", LA)

        assert result.report is not None
        assert result.stored is False
        assert result.success is False


class TestListReports:
    """Tests for IncidentReporter.list_reports."""

    def test_empty(self, reporter):
        assert reporter.list_reports() == []

    def test_oldest_first(self, store):
        times = iter([1.0, 2.0])
        reporter = IncidentReporter(store, clock=lambda: next(times))

        reporter.submit("flood", "first", LA)
        reporter.submit("wildfire", "second", LA)

        assert [r["description"] for r in reporter.list_reports()] == ["first", "second"]
