"""Dashboard view assembly - Pure functions.

Combines a snapshot of events and shelters with the user's location into
the lists the dashboard displays. No I/O; the caller supplies ``now_ms``.
"""

from dataclasses import dataclass, field

from src.core.config import Config
from src.core.disaster import DisasterEvent, filter_by_severity, filter_recent
from src.core.geo import Coordinates, filter_by_radius, sort_by_distance
from src.core.severity import CRITICAL, SEVERITY_LEVELS, sort_by_severity
from src.core.shelter import Shelter, filter_active


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard shows for one refresh.

    Attributes:
        location: User location used for filtering (None if unknown)
        events: All events, newest first
        nearby_events: Events within the nearby radius (all if no location),
            most severe first
        critical_events: Critical events, newest first
        recent_events: Events within the recent window
        nearby_shelters: Active shelters within the shelter radius, nearest first
        severity_counts: Number of events per severity level
    """
    location: Coordinates | None
    events: list[DisasterEvent] = field(default_factory=list)
    nearby_events: list[DisasterEvent] = field(default_factory=list)
    critical_events: list[DisasterEvent] = field(default_factory=list)
    recent_events: list[DisasterEvent] = field(default_factory=list)
    nearby_shelters: list[Shelter] = field(default_factory=list)
    severity_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_events(self) -> int:
        return len(self.events)


def count_by_severity(events: list[DisasterEvent]) -> dict[str, int]:
    """Count events per severity level, including empty levels.

    Pure function.
    """
    counts = {level: 0 for level in SEVERITY_LEVELS}
    for event in events:
        counts[event.severity] = counts.get(event.severity, 0) + 1
    return counts


def find_nearby_shelters(
    shelters: list[Shelter],
    location: Coordinates | None,
    radius_km: float,
) -> list[Shelter]:
    """Active shelters within a radius, nearest first.

    Pure function. The nearby list requires a location, so without one
    this returns an empty list rather than every shelter.
    """
    if location is None:
        return []

    nearby = filter_by_radius(filter_active(shelters), location, radius_km)
    return sort_by_distance(nearby, location)


def build_dashboard(
    events: list[DisasterEvent],
    shelters: list[Shelter],
    location: Coordinates | None,
    now_ms: int,
    config: Config,
) -> DashboardView:
    """Build the dashboard view for a snapshot.

    Pure function.

    Args:
        events: Parsed events, newest first
        shelters: Parsed shelters
        location: User location, or None if unavailable
        now_ms: Current time in milliseconds since epoch
        config: Application configuration (radii and recent window)

    Returns:
        DashboardView for display
    """
    nearby_events = filter_by_radius(events, location, config.nearby_radius_km)
    window_ms = config.recent_window_hours * 60 * 60 * 1000

    return DashboardView(
        location=location,
        events=list(events),
        nearby_events=sort_by_severity(nearby_events),
        critical_events=filter_by_severity(events, CRITICAL),
        recent_events=filter_recent(events, now_ms, window_ms),
        nearby_shelters=find_nearby_shelters(shelters, location, config.shelter_radius_km),
        severity_counts=count_by_severity(events),
    )
