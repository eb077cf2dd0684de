"""Incident reports - Pure functions.

Validation and construction of user-submitted incident reports. Storing
a report is the shell's job (src/shell/incident_reporter.py).
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from src.core.config import ValidationError, validate_coordinates
from src.core.disaster import DISASTER_TYPES
from src.core.geo import Coordinates


ANONYMOUS_USER = "anonymous"


@dataclass(frozen=True)
class IncidentReport:
    """A user-generated incident report.

    Attributes:
        id: Report ID ('report-<timestamp_ms>')
        user_id: Reporting user ('anonymous' if not signed in)
        type: Disaster category
        coordinates: Incident location
        timestamp_ms: Submission time, milliseconds since epoch
        description: Free-text description
        images: Attached image file names
        verified: Whether an operator has verified the report
    """
    id: str
    user_id: str
    type: str
    coordinates: Coordinates
    timestamp_ms: int
    description: str
    images: tuple[str, ...] = field(default_factory=tuple)
    verified: bool = False

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        data = asdict(self)
        data["images"] = list(self.images)
        return data


def validate_incident(
    disaster_type: str,
    description: str,
    coordinates: Coordinates | None,
) -> list[ValidationError]:
    """Validate incident report input.

    Pure function.

    Args:
        disaster_type: Reported category
        description: Free-text description
        coordinates: Incident location (None if it could not be determined)

    Returns:
        List of validation errors (empty if valid)
    """
    errors: list[ValidationError] = []

    if not description or not description.strip():
        errors.append(ValidationError(
            field="description",
            message="Please provide a description of the incident.",
        ))

    if disaster_type not in DISASTER_TYPES:
        errors.append(ValidationError(
            field="type",
            message=f"Unknown incident type '{disaster_type}'",
        ))

    if coordinates is None:
        errors.append(ValidationError(
            field="coordinates",
            message="Could not determine the incident location. Set a location or enter coordinates manually.",
        ))
    else:
        errors.extend(validate_coordinates(
            coordinates.latitude,
            coordinates.longitude,
            "coordinates",
        ))

    return errors


def build_incident_report(
    disaster_type: str,
    description: str,
    coordinates: Coordinates,
    timestamp_ms: int,
    user_id: str | None = None,
    images: tuple[str, ...] = (),
) -> IncidentReport:
    """Create a new unverified incident report.

    Pure function. Callers validate first with validate_incident().
    """
    return IncidentReport(
        id=f"report-{timestamp_ms}",
        user_id=user_id or ANONYMOUS_USER,
        type=disaster_type,
        coordinates=coordinates,
        timestamp_ms=timestamp_ms,
        description=description.strip(),
        images=tuple(images),
    )
