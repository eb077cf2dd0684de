"""Geographic calculations - Pure functions.

This module provides distance and radius calculations for disaster events,
shelters and any other record carrying a ``coordinates`` attribute.
All functions are pure with no side effects.

Distances are always in kilometers. Conversion to meters belongs to the
presentation layer (see src/core/formatter.py).
"""

import math
from dataclasses import dataclass
from typing import Protocol, Sequence, TypeVar


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees.

    Attributes:
        latitude: Latitude in degrees, expected in [-90, 90]
        longitude: Longitude in degrees, expected in [-180, 180]
    """
    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


class Located(Protocol):
    """Anything with a ``coordinates`` attribute."""

    coordinates: Coordinates


T = TypeVar("T", bound=Located)


def to_radians(degrees: float) -> float:
    """Convert degrees to radians.

    Pure function.
    """
    return degrees * math.pi / 180


def calculate_distance(a: Coordinates, b: Coordinates) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function. Accepts any real-valued coordinates, including
    out-of-range ones; validation happens at ingestion.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometers
    """
    delta_lat = to_radians(b.latitude - a.latitude)
    delta_lon = to_radians(b.longitude - a.longitude)

    # Haversine formula
    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(to_radians(a.latitude))
        * math.cos(to_radians(b.latitude))
        * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push h a hair outside [0, 1] near antipodes
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def is_within_radius(
    center: Coordinates,
    point: Coordinates,
    radius_km: float,
) -> bool:
    """Check if a point is within a radius of a center point.

    Pure function.

    Args:
        center: Center point
        point: Point to check
        radius_km: Radius in kilometers (inclusive)

    Returns:
        True if point is within radius
    """
    return calculate_distance(center, point) <= radius_km


def get_distance_to(record: Located, center: Coordinates) -> float:
    """Calculate distance from a center point to a located record.

    Pure function.

    Returns:
        Distance in kilometers
    """
    return calculate_distance(center, record.coordinates)


def filter_by_radius(
    records: Sequence[T],
    center: Coordinates | None,
    radius_km: float,
) -> list[T]:
    """Filter records to only those within a radius of a center point.

    Pure function. Input order is preserved. When no center is available
    (location unknown or denied) filtering is skipped and every record is
    returned.

    Args:
        records: Records with a ``coordinates`` attribute
        center: Center point, or None when no location is available
        radius_km: Radius in kilometers

    Returns:
        New list of records within the radius
    """
    if center is None:
        return list(records)

    return [r for r in records if is_within_radius(center, r.coordinates, radius_km)]


def sort_by_distance(
    records: Sequence[T],
    center: Coordinates | None,
) -> list[T]:
    """Sort records nearest first.

    Pure function. Ties keep their input order. Without a center the
    input order is returned unchanged.
    """
    if center is None:
        return list(records)

    return sorted(records, key=lambda r: get_distance_to(r, center))


def find_nearest(
    records: Sequence[T],
    center: Coordinates,
    limit: int = 5,
) -> list[tuple[T, float]]:
    """Find the records closest to a center point.

    Pure function.

    Args:
        records: Records with a ``coordinates`` attribute
        center: Center point
        limit: Maximum number of results

    Returns:
        List of (record, distance_km) tuples, nearest first
    """
    with_distance = [(r, get_distance_to(r, center)) for r in records]
    with_distance.sort(key=lambda pair: pair[1])
    return with_distance[:limit]
