"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Geo/distance calculations and radius filtering
- Severity classification
- Disaster and shelter parsing
- Rate limiting
- Dashboard assembly and display formatting

All functions here are deterministic and have no I/O.
"""

from src.core.geo import (
    Coordinates,
    calculate_distance,
    filter_by_radius,
    is_within_radius,
    to_radians,
)
from src.core.severity import SEVERITY_LEVELS, classify_event, classify_severity
from src.core.disaster import DisasterEvent, parse_disasters
from src.core.shelter import Shelter, parse_shelters
from src.core.rate_limit import RateLimitState, check_and_consume
from src.core.dashboard import DashboardView, build_dashboard

__all__ = [
    # Geo
    "Coordinates",
    "calculate_distance",
    "filter_by_radius",
    "is_within_radius",
    "to_radians",
    # Severity
    "SEVERITY_LEVELS",
    "classify_event",
    "classify_severity",
    # Records
    "DisasterEvent",
    "parse_disasters",
    "Shelter",
    "parse_shelters",
    # Rate limiting
    "RateLimitState",
    "check_and_consume",
    # Dashboard
    "DashboardView",
    "build_dashboard",
]
