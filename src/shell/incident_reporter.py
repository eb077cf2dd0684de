"""Incident Reporter - Imperative Shell.

Submits user incident reports. Validation and report construction are
pure core functions (src/core/report.py); this module adds the clock and
stores accepted reports in the local store.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from src.core.config import ValidationError
from src.core.geo import Coordinates
from src.core.report import IncidentReport, build_incident_report, validate_incident
from src.shell.local_store import LocalStore


logger = logging.getLogger(__name__)


# Local store key for submitted reports
REPORTS_KEY = "incident_reports"


@dataclass
class SubmissionResult:
    """Result of submitting an incident report.

    Attributes:
        report: The created report (None if rejected)
        errors: Validation errors that rejected the report
        stored: Whether the report was persisted locally
    """
    report: IncidentReport | None
    errors: list[ValidationError] = field(default_factory=list)
    stored: bool = False

    @property
    def success(self) -> bool:
        """Returns True if the report was accepted and stored."""
        return self.report is not None and self.stored


class IncidentReporter:
    """Validates and stores incident reports.

    This is part of the imperative shell - it writes to the local store.
    """

    def __init__(
        self,
        store: LocalStore,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize incident reporter.

        Args:
            store: Local store for submitted reports
            clock: Returns current time in seconds since epoch
        """
        self.store = store
        self.clock = clock

    def submit(
        self,
        disaster_type: str,
        description: str,
        coordinates: Coordinates | None,
        user_id: str | None = None,
        images: tuple[str, ...] = (),
    ) -> SubmissionResult:
        """Validate and store a new incident report.

        Args:
            disaster_type: Reported category
            description: Free-text description
            coordinates: Incident location (None if unknown)
            user_id: Reporting user (None for anonymous)
            images: Attached image file names

        Returns:
            SubmissionResult describing the outcome
        """
        errors = validate_incident(disaster_type, description, coordinates)
        if errors or coordinates is None:
            for error in errors:
                logger.warning("Incident report rejected: %s: %s", error.field, error.message)
            return SubmissionResult(report=None, errors=errors)

        report = build_incident_report(
            disaster_type=disaster_type,
            description=description,
            coordinates=coordinates,
            timestamp_ms=int(self.clock() * 1000),
            user_id=user_id,
            images=images,
        )

        stored = self.store.append(REPORTS_KEY, report.to_dict())
        if stored:
            logger.info("Incident report %s submitted (%s)", report.id, report.type)
        else:
            logger.error("Failed to store incident report %s", report.id)

        return SubmissionResult(report=report, stored=stored)

    def list_reports(self) -> list[dict]:
        """Return previously stored reports (raw dicts), oldest first."""
        reports = self.store.get(REPORTS_KEY, [])
        return reports if isinstance(reports, list) else []
