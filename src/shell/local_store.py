"""Local Store - Imperative Shell.

This module persists small pieces of per-user state (manual location,
preferences, submitted incident reports) in a JSON file. It is a
best-effort cache: read failures return defaults and write failures are
logged and reported as False, never raised.

Document structure:
{
    "<key>": <json value>,
    ...
    "updated_at": "<ISO-8601 timestamp>"
}
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# Default location of the store file
DEFAULT_STORE_PATH = ".disaster_alerts/store.json"

UPDATED_AT_KEY = "updated_at"


class LocalStore:
    """Key-value cache backed by a single JSON file.

    This is part of the imperative shell - it handles file I/O.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH) -> None:
        """Initialize local store.

        Args:
            path: Path of the JSON file (created on first write)
        """
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        """Read the whole document, or an empty one if unavailable."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to read local store %s: %s", self.path, str(e))
            return {}

        if not isinstance(data, dict):
            logger.warning("Local store %s is not a JSON object, ignoring", self.path)
            return {}

        return data

    def _write(self, data: dict[str, Any]) -> bool:
        """Write the whole document atomically."""
        data[UPDATED_AT_KEY] = datetime.now(timezone.utc).isoformat()

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            tmp_path.replace(self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write local store %s: %s", self.path, str(e))
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Fetch a value.

        Args:
            key: Key to look up
            default: Returned when the key is missing or the store is unreadable

        Returns:
            Stored value or default
        """
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """Store a JSON-serializable value.

        Returns:
            True if the write succeeded
        """
        data = self._read()
        data[key] = value

        if not self._write(data):
            return False

        logger.debug("Stored key %s", key)
        return True

    def delete(self, key: str) -> bool:
        """Remove a key. Removing a missing key succeeds.

        Returns:
            True if the write succeeded
        """
        data = self._read()
        if key not in data:
            return True

        del data[key]
        return self._write(data)

    def append(self, key: str, item: Any) -> bool:
        """Append an item to a list value, creating the list if needed.

        Returns:
            True if the write succeeded
        """
        data = self._read()
        items = data.get(key)
        if not isinstance(items, list):
            items = []

        items.append(item)
        data[key] = items

        return self._write(data)
