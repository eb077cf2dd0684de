"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with the outside world:
- Disaster feed (catalog file, simulated latency)
- Local store (JSON key-value cache)
- Location provider (manual/default location)
- Incident reporter (report submission)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.disaster_feed import DisasterFeed
from src.shell.local_store import LocalStore
from src.shell.location_provider import LocationProvider
from src.shell.incident_reporter import IncidentReporter
from src.shell.config_loader import load_config, Config

__all__ = [
    "DisasterFeed",
    "LocalStore",
    "LocationProvider",
    "IncidentReporter",
    "load_config",
    "Config",
]
