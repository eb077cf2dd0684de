"""Emergency shelter models - Pure functions.

Parsing, occupancy classification and search over shelter records.
"""

from dataclasses import dataclass, field
from typing import Any

from src.core.disaster import parse_coordinates
from src.core.geo import Coordinates


@dataclass(frozen=True)
class Shelter:
    """Immutable emergency shelter snapshot.

    Attributes:
        id: Unique shelter ID
        name: Display name
        coordinates: Shelter location
        address: Street address
        capacity: Total capacity (positive)
        occupancy: Current occupants (may exceed capacity)
        contact: Phone number
        amenities: Available amenities (e.g. 'Food', 'Medical')
        opening_time: Opening time as displayed (e.g. '7:00 AM', '24/7')
        closing_time: Closing time as displayed
        active: Whether the shelter is currently open
    """
    id: str
    name: str
    coordinates: Coordinates
    capacity: int
    occupancy: int = 0
    address: str = ""
    contact: str = ""
    amenities: tuple[str, ...] = field(default_factory=tuple)
    opening_time: str = ""
    closing_time: str = ""
    active: bool = True


def parse_shelter(raw: dict[str, Any]) -> Shelter | None:
    """Parse a single raw record into a Shelter.

    Pure function: returns None for invalid records (missing id or
    coordinates, non-positive capacity, negative occupancy).
    """
    try:
        shelter_id = raw.get("id")
        if not shelter_id:
            return None

        capacity = int(raw["capacity"])
        occupancy = int(raw.get("occupancy", 0))
        if capacity <= 0 or occupancy < 0:
            return None

        return Shelter(
            id=str(shelter_id),
            name=raw.get("name", ""),
            coordinates=parse_coordinates(raw["coordinates"]),
            capacity=capacity,
            occupancy=occupancy,
            address=raw.get("address", ""),
            contact=raw.get("contact", ""),
            amenities=tuple(raw.get("amenities", ())),
            opening_time=raw.get("openingTime", raw.get("opening_time", "")),
            closing_time=raw.get("closingTime", raw.get("closing_time", "")),
            active=bool(raw.get("active", True)),
        )
    except (KeyError, TypeError, ValueError):
        return None


def parse_shelters(raws: list[dict[str, Any]]) -> list[Shelter]:
    """Parse raw records into Shelters, skipping invalid ones."""
    shelters = []
    for raw in raws:
        shelter = parse_shelter(raw)
        if shelter is not None:
            shelters.append(shelter)
    return shelters


def occupancy_ratio(shelter: Shelter) -> float:
    """Occupancy as a fraction of capacity (may exceed 1.0)."""
    return shelter.occupancy / shelter.capacity


def occupancy_status(shelter: Shelter) -> str:
    """Get a human-readable occupancy label.

    Pure function.
    """
    percentage = occupancy_ratio(shelter) * 100

    if percentage >= 90:
        return "Near Capacity"
    elif percentage >= 75:
        return "High Capacity"
    elif percentage >= 50:
        return "Moderate"
    else:
        return "Available"


def available_spaces(shelter: Shelter) -> int:
    """Remaining spaces, never negative."""
    return max(shelter.capacity - shelter.occupancy, 0)


def search_shelters(shelters: list[Shelter], term: str) -> list[Shelter]:
    """Case-insensitive search on name or address.

    Pure function. An empty term matches every shelter.
    """
    needle = term.strip().lower()
    if not needle:
        return list(shelters)

    return [
        s for s in shelters
        if needle in s.name.lower() or needle in s.address.lower()
    ]


def filter_active(shelters: list[Shelter]) -> list[Shelter]:
    """Keep only shelters that are currently open."""
    return [s for s in shelters if s.active]
