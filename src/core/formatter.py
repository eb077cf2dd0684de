"""Display formatting - Pure functions.

This module turns events, shelters and dashboard views into display
strings and JSON-ready payloads. It is the only place where kilometers
are converted to meters. All functions are pure with no side effects.
"""

from typing import Any

from src.core.dashboard import DashboardView
from src.core.disaster import DisasterEvent
from src.core.geo import Coordinates, get_distance_to
from src.core.severity import SEVERITY_LEVELS, highest_severity
from src.core.shelter import Shelter, available_spaces, occupancy_status


SEVERITY_COLORS = {
    "critical": "#FF0000",
    "high": "#FF9900",
    "moderate": "#FFCC00",
    "low": "#00CC00",
}

UNKNOWN_SEVERITY_COLOR = "#9E9E9E"


def get_severity_color(severity: str) -> str:
    """Get the marker color for a severity level.

    Pure function.
    """
    return SEVERITY_COLORS.get(severity, UNKNOWN_SEVERITY_COLOR)


def get_severity_emoji(severity: str) -> str:
    """Get an emoji representing a severity level.

    Pure function.
    """
    if severity == "critical":
        return "🚨"
    elif severity == "high":
        return "⚠️"
    elif severity == "moderate":
        return "🔶"
    elif severity == "low":
        return "🔹"
    else:
        return "⚪"


def format_severity_label(severity: str) -> str:
    """Capitalize a severity level for display ('high' -> 'High')."""
    return severity[:1].upper() + severity[1:]


def format_distance(distance_km: float | None) -> str:
    """Format a distance for display.

    Pure function. Distances under 1 km are shown in meters.

    Args:
        distance_km: Distance in kilometers, None if unknown

    Returns:
        e.g. '850 m', '12.3 km' or 'Distance unknown'
    """
    if distance_km is None:
        return "Distance unknown"

    if distance_km < 1:
        return f"{distance_km * 1000:.0f} m"

    return f"{distance_km:.1f} km"


def format_number(num: int) -> str:
    """Format an integer with thousands separators (12345 -> '12,345')."""
    return f"{num:,}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_time_ago(timestamp_ms: int, now_ms: int) -> str:
    """Format an event time relative to now.

    Pure function.

    Returns:
        e.g. 'just now', '5 minutes ago', '2 hours ago', 'in 3 days'
    """
    delta_seconds = (now_ms - timestamp_ms) // 1000
    future = delta_seconds < 0
    seconds = abs(delta_seconds)

    if seconds < 60:
        return "just now"

    if seconds < 3600:
        text = _plural(seconds // 60, "minute")
    elif seconds < 86400:
        text = _plural(seconds // 3600, "hour")
    else:
        text = _plural(seconds // 86400, "day")

    return f"in {text}" if future else f"{text} ago"


def format_event_summary(
    event: DisasterEvent,
    location: Coordinates | None = None,
) -> str:
    """Format a one-line summary of a disaster event.

    Pure function.

    Args:
        event: Event to summarize
        location: User location for distance (optional)

    Returns:
        One-line summary string
    """
    severity = event.severity
    summary = f"{get_severity_emoji(severity)} [{format_severity_label(severity)}] {event.title}"

    if location is not None:
        summary += f" ({format_distance(get_distance_to(event, location))} away)"

    return summary


def format_event(
    event: DisasterEvent,
    now_ms: int,
    location: Coordinates | None = None,
) -> dict[str, Any]:
    """Format an event as a JSON-ready payload.

    Pure function.
    """
    severity = event.severity
    payload: dict[str, Any] = {
        "id": event.id,
        "title": event.title,
        "type": event.type,
        "severity": severity,
        "color": get_severity_color(severity),
        "latitude": event.coordinates.latitude,
        "longitude": event.coordinates.longitude,
        "time_ago": format_time_ago(event.timestamp_ms, now_ms),
        "source": event.source,
    }

    if event.reading is not None:
        payload["reading"] = event.reading
    if event.url:
        payload["url"] = event.url
    if location is not None:
        payload["distance"] = format_distance(get_distance_to(event, location))

    return payload


def format_shelter(
    shelter: Shelter,
    location: Coordinates | None = None,
) -> dict[str, Any]:
    """Format a shelter as a JSON-ready payload.

    Pure function.
    """
    distance = get_distance_to(shelter, location) if location is not None else None

    return {
        "id": shelter.id,
        "name": shelter.name,
        "address": shelter.address,
        "contact": shelter.contact,
        "hours": f"{shelter.opening_time} - {shelter.closing_time}",
        "occupancy": f"{shelter.occupancy} / {shelter.capacity}",
        "available_spaces": available_spaces(shelter),
        "status": occupancy_status(shelter),
        "amenities": list(shelter.amenities),
        "distance": format_distance(distance),
    }


def format_dashboard_summary(view: DashboardView) -> str:
    """Human-readable one-line summary of a dashboard view.

    Pure function.
    """
    parts = [
        f"{format_number(view.total_events)} active alerts",
        f"{len(view.critical_events)} critical",
        f"{len(view.recent_events)} recent",
    ]

    if view.location is None:
        parts.append("location unknown")
    else:
        parts.append(f"{len(view.nearby_events)} nearby")
        parts.append(f"{len(view.nearby_shelters)} shelters nearby")

    return ", ".join(parts)


def format_dashboard(view: DashboardView, now_ms: int) -> dict[str, Any]:
    """Format a dashboard view as a JSON-ready payload.

    Pure function.
    """
    location = view.location
    top_alert = None
    if view.nearby_events:
        top_alert = format_event_summary(view.nearby_events[0], location)

    return {
        "summary": format_dashboard_summary(view),
        "top_alert": top_alert,
        "highest_severity": highest_severity(view.nearby_events),
        "location": None if location is None else {
            "latitude": location.latitude,
            "longitude": location.longitude,
        },
        "severity_counts": {
            level: view.severity_counts.get(level, 0)
            for level in reversed(SEVERITY_LEVELS)
        },
        "critical": [format_event(e, now_ms, location) for e in view.critical_events],
        "nearby": [format_event(e, now_ms, location) for e in view.nearby_events],
        "shelters": [format_shelter(s, location) for s in view.nearby_shelters],
    }
