"""Severity classification - Pure functions.

Maps a disaster category and its physical reading to a coarse severity
level. Thresholds are defined independently per category, so a "high"
flood and a "high" earthquake are not comparable readings.

Classification is advisory. Unknown categories and missing readings fall
back to "moderate" instead of raising.
"""

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from src.core.disaster import DisasterEvent


LOW = "low"
MODERATE = "moderate"
HIGH = "high"
CRITICAL = "critical"

# Ordered least to most severe. "low" is never produced by
# classify_severity(); it is kept for manual overrides.
SEVERITY_LEVELS = (LOW, MODERATE, HIGH, CRITICAL)

DEFAULT_SEVERITY = MODERATE

# Earthquake magnitude (inclusive thresholds)
EARTHQUAKE_CRITICAL_MAGNITUDE = 6.0
EARTHQUAKE_HIGH_MAGNITUDE = 4.5

# Flood water level in meters (strict thresholds)
FLOOD_CRITICAL_LEVEL_M = 3.0
FLOOD_HIGH_LEVEL_M = 2.0

# Hurricane/tornado sustained wind in mph (strict thresholds)
WIND_CRITICAL_MPH = 110.0
WIND_HIGH_MPH = 74.0

# Wildfire burned area in acres (strict thresholds)
WILDFIRE_CRITICAL_ACRES = 10000.0
WILDFIRE_HIGH_ACRES = 5000.0


def classify_severity(category: str, reading: float | None) -> str:
    """Classify severity from a category-specific reading.

    Pure function. Never raises.

    Args:
        category: Disaster category (e.g. 'earthquake', 'flood')
        reading: Magnitude, water level (m), wind speed (mph) or
                 burned area (acres), depending on category

    Returns:
        One of 'moderate', 'high', 'critical'
    """
    if reading is None:
        return DEFAULT_SEVERITY

    if category == "earthquake":
        if reading >= EARTHQUAKE_CRITICAL_MAGNITUDE:
            return CRITICAL
        if reading >= EARTHQUAKE_HIGH_MAGNITUDE:
            return HIGH
        return MODERATE

    if category == "flood":
        if reading > FLOOD_CRITICAL_LEVEL_M:
            return CRITICAL
        if reading > FLOOD_HIGH_LEVEL_M:
            return HIGH
        return MODERATE

    if category in ("hurricane", "tornado"):
        if reading > WIND_CRITICAL_MPH:
            return CRITICAL
        if reading > WIND_HIGH_MPH:
            return HIGH
        return MODERATE

    if category == "wildfire":
        if reading > WILDFIRE_CRITICAL_ACRES:
            return CRITICAL
        if reading > WILDFIRE_HIGH_ACRES:
            return HIGH
        return MODERATE

    return DEFAULT_SEVERITY


def classify_event(event: "DisasterEvent") -> str:
    """Classify a disaster event by its own category and reading.

    Pure function.
    """
    return classify_severity(event.type, event.reading)


def severity_rank(level: str) -> int:
    """Get the ordinal rank of a severity level (low=0 ... critical=3).

    Unknown levels rank below everything (-1).
    """
    try:
        return SEVERITY_LEVELS.index(level)
    except ValueError:
        return -1


def sort_by_severity(events: Iterable["DisasterEvent"]) -> list["DisasterEvent"]:
    """Sort events most severe first.

    Pure function. Events of equal severity keep their input order.
    """
    return sorted(events, key=lambda e: severity_rank(classify_event(e)), reverse=True)


def highest_severity(events: Iterable["DisasterEvent"]) -> str | None:
    """Get the most severe level among events, or None if there are none."""
    levels = [classify_event(e) for e in events]
    if not levels:
        return None
    return max(levels, key=severity_rank)
