"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, RateLimitConfig) are defined in src/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config, RateLimitConfig
from src.core.geo import Coordinates


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ``${VAR}`` environment placeholder.

    Non-strings and plain strings are returned unchanged. Unset variables
    leave the placeholder in place.

    Args:
        value: Value to resolve

    Returns:
        Resolved value
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_location(data: dict[str, Any]) -> Coordinates:
    """Parse a location from config data."""
    return Coordinates(
        latitude=float(_resolve_value(data["latitude"])),
        longitude=float(_resolve_value(data["longitude"])),
    )


def _parse_location_string(value: str) -> Coordinates | None:
    """Parse 'lat,lon' into Coordinates, or None if malformed."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        logger.warning("Invalid location '%s', expected 'lat,lon'", value)
        return None

    try:
        return Coordinates(latitude=float(parts[0]), longitude=float(parts[1]))
    except ValueError:
        logger.warning("Invalid location '%s', expected 'lat,lon'", value)
        return None


def _parse_rate_limit(data: dict[str, Any]) -> RateLimitConfig:
    """Parse rate limit settings from config data."""
    defaults = RateLimitConfig()
    return RateLimitConfig(
        max_requests=int(data.get("max_requests", defaults.max_requests)),
        window_seconds=float(data.get("window_seconds", defaults.window_seconds)),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    default_location = None
    if data.get("default_location"):
        default_location = _parse_location(data["default_location"])

    catalog_path = _resolve_value(data.get("catalog_path", defaults.catalog_path))

    return Config(
        refresh_interval_seconds=int(data.get("refresh_interval_seconds", defaults.refresh_interval_seconds)),
        nearby_radius_km=float(data.get("nearby_radius_km", defaults.nearby_radius_km)),
        shelter_radius_km=float(data.get("shelter_radius_km", defaults.shelter_radius_km)),
        recent_window_hours=int(data.get("recent_window_hours", defaults.recent_window_hours)),
        default_location=default_location,
        catalog_path=catalog_path,
        store_path=_resolve_value(data.get("store_path", defaults.store_path)),
        language=data.get("language", defaults.language),
        simulated_delay_seconds=float(data.get("simulated_delay_seconds", defaults.simulated_delay_seconds)),
        rate_limit=_parse_rate_limit(data.get("rate_limit") or {}),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: nearby radius %.1f km, shelter radius %.1f km, default location %s",
        config.nearby_radius_km,
        config.shelter_radius_km,
        "set" if config.default_location else "unset",
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        DISASTER_ALERTS_LOCATION: Default location as 'lat,lon'
        NEARBY_RADIUS_KM: Radius for nearby events
        SHELTER_RADIUS_KM: Radius for nearby shelters
        CATALOG_PATH: YAML catalog of events and shelters
        STORE_PATH: JSON file backing the local cache
        LANGUAGE: Preferred safety tip language

    Returns:
        Config object from environment
    """
    defaults = Config()

    default_location = None
    location_str = os.environ.get("DISASTER_ALERTS_LOCATION")
    if location_str:
        default_location = _parse_location_string(location_str)

    return Config(
        nearby_radius_km=float(os.environ.get("NEARBY_RADIUS_KM", defaults.nearby_radius_km)),
        shelter_radius_km=float(os.environ.get("SHELTER_RADIUS_KM", defaults.shelter_radius_km)),
        default_location=default_location,
        catalog_path=os.environ.get("CATALOG_PATH", defaults.catalog_path),
        store_path=os.environ.get("STORE_PATH", defaults.store_path),
        language=os.environ.get("LANGUAGE", defaults.language),
    )
