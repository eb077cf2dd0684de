"""Location Provider - Imperative Shell.

Resolves the user's current location. There is no device geolocation
here: the location is whatever the user set manually (persisted in the
local store) or, failing that, the configured default. When neither is
available the result is None and callers skip radius filtering.
"""

import logging
from typing import Any

from src.core.config import validate_coordinates
from src.core.geo import Coordinates
from src.shell.local_store import LocalStore


logger = logging.getLogger(__name__)


# Local store key for the manually set location
LOCATION_KEY = "user_location"


def _parse_stored_location(value: Any) -> Coordinates | None:
    """Parse a stored location dict, or None if it is unusable."""
    if not isinstance(value, dict):
        return None

    try:
        location = Coordinates(
            latitude=float(value["latitude"]),
            longitude=float(value["longitude"]),
        )
    except (KeyError, TypeError, ValueError):
        return None

    if validate_coordinates(location.latitude, location.longitude, LOCATION_KEY):
        return None

    return location


class LocationProvider:
    """Resolves the best available user location.

    This is part of the imperative shell - it reads the local store.
    """

    def __init__(
        self,
        store: LocalStore,
        default_location: Coordinates | None = None,
    ) -> None:
        """Initialize location provider.

        Args:
            store: Local store holding the manual location
            default_location: Fallback location from configuration
        """
        self.store = store
        self.default_location = default_location

    def get_current_location(self) -> Coordinates | None:
        """Get the current location.

        Returns:
            Manual location if set, else the default, else None
        """
        stored = self.store.get(LOCATION_KEY)
        if stored is not None:
            location = _parse_stored_location(stored)
            if location is not None:
                return location
            logger.warning("Ignoring invalid stored location: %s", stored)

        if self.default_location is not None:
            return self.default_location

        logger.info("No location available; nearby filtering disabled")
        return None

    def set_manual_location(self, location: Coordinates) -> bool:
        """Persist a manually chosen location.

        Returns:
            True if the location was valid and stored
        """
        errors = validate_coordinates(location.latitude, location.longitude, LOCATION_KEY)
        if errors:
            for error in errors:
                logger.error("Rejected manual location: %s", error.message)
            return False

        logger.info(
            "Setting manual location to (%.4f, %.4f)",
            location.latitude,
            location.longitude,
        )
        return self.store.set(LOCATION_KEY, {
            "latitude": location.latitude,
            "longitude": location.longitude,
        })

    def clear_manual_location(self) -> bool:
        """Forget the manual location, falling back to the default."""
        logger.info("Clearing manual location")
        return self.store.delete(LOCATION_KEY)
