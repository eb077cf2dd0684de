"""Disaster Feed - Imperative Shell.

This module is the data-acquisition collaborator. It serves a fabricated
catalog of disaster events and shelters from a YAML file, stamping each
event relative to the current clock so the catalog always looks live.
All I/O (file reads, clock, simulated latency) is contained here;
parsing is in the core module.

Catalog structure:

    events:
      - id: eq-1
        type: earthquake
        title: "M 6.2 - 20km SW of Los Angeles, CA"
        coordinates: {latitude: 34.05, longitude: -118.24}
        age_minutes: 60
        magnitude: 6.2
    shelters:
      - id: shelter-1
        name: City Community Center
        coordinates: {latitude: 34.05, longitude: -118.24}
        capacity: 200
        occupancy: 45
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable

import yaml


logger = logging.getLogger(__name__)


# Default catalog shipped with the repository
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "catalog.yaml"


class DisasterFeed:
    """Client serving disaster events and shelters from a catalog file.

    This is part of the imperative shell - it handles file I/O.
    """

    def __init__(
        self,
        catalog_path: str | Path = DEFAULT_CATALOG_PATH,
        delay_seconds: float = 0.0,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize disaster feed.

        Args:
            catalog_path: Path to the YAML catalog
            delay_seconds: Simulated network latency per fetch
            clock: Returns current time in seconds since epoch
            sleep: Used to simulate latency
        """
        self.catalog_path = Path(catalog_path)
        self.delay_seconds = delay_seconds
        self.clock = clock
        self.sleep = sleep
        self._catalog: dict[str, Any] | None = None

    def _load_catalog(self) -> dict[str, Any]:
        """Load and cache the catalog.

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            yaml.YAMLError: If the catalog is invalid YAML
        """
        if self._catalog is None:
            logger.info("Loading disaster catalog from %s", self.catalog_path)

            with open(self.catalog_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

            self._catalog = data if isinstance(data, dict) else {}

        return self._catalog

    def _simulate_latency(self) -> None:
        if self.delay_seconds > 0:
            self.sleep(self.delay_seconds)

    def fetch_disasters(self, types: set[str] | None = None) -> list[dict[str, Any]]:
        """Fetch raw disaster records.

        This method performs file I/O.

        Args:
            types: Only return these categories (None for all)

        Returns:
            Raw event dicts with ``timestamp`` in milliseconds since epoch

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            yaml.YAMLError: If the catalog is invalid YAML
        """
        catalog = self._load_catalog()
        self._simulate_latency()

        now_ms = int(self.clock() * 1000)
        records = []

        for entry in catalog.get("events") or []:
            if types and entry.get("type") not in types:
                continue

            record = {k: v for k, v in entry.items() if k != "age_minutes"}
            if "timestamp" not in record:
                age_minutes = entry.get("age_minutes", 0)
                record["timestamp"] = now_ms - int(float(age_minutes) * 60_000)
            records.append(record)

        logger.info("Fetched %d disaster records", len(records))

        return records

    def fetch_shelters(self) -> list[dict[str, Any]]:
        """Fetch raw shelter records.

        This method performs file I/O.

        Returns:
            Raw shelter dicts

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            yaml.YAMLError: If the catalog is invalid YAML
        """
        catalog = self._load_catalog()
        self._simulate_latency()

        records = [dict(entry) for entry in catalog.get("shelters") or []]

        logger.info("Fetched %d shelter records", len(records))

        return records
