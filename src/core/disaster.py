"""Disaster event models and parsing - Pure functions.

This module parses raw disaster records (as produced by the acquisition
layer) into typed DisasterEvent objects and provides simple list filters.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from src.core.geo import Coordinates
from src.core.severity import classify_severity


DISASTER_TYPES = (
    "earthquake",
    "flood",
    "hurricane",
    "tornado",
    "wildfire",
    "tsunami",
    "other",
)

# 24 hours in milliseconds
RECENT_WINDOW_MS = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class DisasterEvent:
    """Immutable disaster event snapshot.

    Attributes:
        id: Unique event ID
        title: Short headline
        type: Disaster category (one of DISASTER_TYPES)
        coordinates: Event location
        timestamp_ms: Event time, milliseconds since epoch
        description: Longer description
        source: Reporting agency (e.g. 'USGS', 'NWS')
        url: External link (optional)
        magnitude: Earthquake magnitude
        water_level: Flood water level in meters
        wind_speed: Hurricane/tornado wind speed in mph
        area: Wildfire burned area in acres
    """
    id: str
    title: str
    type: str
    coordinates: Coordinates
    timestamp_ms: int
    description: str = ""
    source: str = ""
    url: str | None = None
    magnitude: float | None = None
    water_level: float | None = None
    wind_speed: float | None = None
    area: float | None = None

    @property
    def reading(self) -> float | None:
        """The physical reading that drives this category's severity."""
        if self.type == "earthquake":
            return self.magnitude
        if self.type == "flood":
            return self.water_level
        if self.type in ("hurricane", "tornado"):
            return self.wind_speed
        if self.type == "wildfire":
            return self.area
        return None

    @property
    def severity(self) -> str:
        """Severity level, computed on every read."""
        return classify_severity(self.type, self.reading)

    @property
    def time(self) -> datetime:
        """Event time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp_ms / 1000, tz=timezone.utc)


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


def _first(data: dict[str, Any], *keys: str) -> Any:
    """Return the first present key's value (camelCase or snake_case)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def parse_coordinates(data: dict[str, Any]) -> Coordinates:
    """Parse a coordinates mapping.

    Raises:
        KeyError, TypeError, ValueError: If the data is malformed
    """
    return Coordinates(
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
    )


def parse_disaster(raw: dict[str, Any]) -> DisasterEvent | None:
    """Parse a single raw record into a DisasterEvent.

    Pure function: takes raw dict, returns typed DisasterEvent or None if
    invalid. Unknown categories are kept as 'other'.

    Args:
        raw: Raw disaster dict (camelCase or snake_case keys)

    Returns:
        DisasterEvent object or None if parsing fails
    """
    try:
        event_id = raw.get("id")
        if not event_id:
            return None

        coords = raw.get("coordinates")
        if coords is None:
            return None

        timestamp = _first(raw, "timestamp", "timestamp_ms")
        if timestamp is None:
            return None

        disaster_type = raw.get("type", "other")
        if disaster_type not in DISASTER_TYPES:
            disaster_type = "other"

        return DisasterEvent(
            id=str(event_id),
            title=raw.get("title", ""),
            type=disaster_type,
            coordinates=parse_coordinates(coords),
            timestamp_ms=int(timestamp),
            description=raw.get("description", ""),
            source=raw.get("source", ""),
            url=raw.get("url"),
            magnitude=_optional_float(raw.get("magnitude")),
            water_level=_optional_float(_first(raw, "waterLevel", "water_level")),
            wind_speed=_optional_float(_first(raw, "windSpeed", "wind_speed")),
            area=_optional_float(raw.get("area")),
        )
    except (KeyError, TypeError, ValueError):
        return None


def parse_disasters(raws: list[dict[str, Any]]) -> list[DisasterEvent]:
    """Parse raw records into a list of DisasterEvents.

    Pure function: skips invalid records.

    Returns:
        Valid DisasterEvent objects, sorted by time (newest first)
    """
    events = []

    for raw in raws:
        event = parse_disaster(raw)
        if event is not None:
            events.append(event)

    return sorted(events, key=lambda e: e.timestamp_ms, reverse=True)


def filter_by_type(
    events: list[DisasterEvent],
    types: set[str] | None = None,
) -> list[DisasterEvent]:
    """Filter events to the given categories (None keeps all).

    Pure function.
    """
    if not types:
        return list(events)
    return [e for e in events if e.type in types]


def filter_by_severity(
    events: list[DisasterEvent],
    level: str,
) -> list[DisasterEvent]:
    """Filter events to exactly one severity level.

    Pure function.
    """
    return [e for e in events if e.severity == level]


def filter_recent(
    events: list[DisasterEvent],
    now_ms: int,
    window_ms: int = RECENT_WINDOW_MS,
) -> list[DisasterEvent]:
    """Filter events newer than ``now_ms - window_ms`` (exclusive).

    Pure function.
    """
    cutoff = now_ms - window_ms
    return [e for e in events if e.timestamp_ms > cutoff]
