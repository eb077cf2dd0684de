"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from src.core.geo import Coordinates
from src.core.rate_limit import DEFAULT_MAX_REQUESTS, DEFAULT_WINDOW_SECONDS


@dataclass
class RateLimitConfig:
    """Rate limiting configuration for feed refreshes.

    Attributes:
        max_requests: Maximum refreshes per window
        window_seconds: Window duration in seconds
    """
    max_requests: int = DEFAULT_MAX_REQUESTS
    window_seconds: float = DEFAULT_WINDOW_SECONDS


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        refresh_interval_seconds: How often the dashboard refreshes
        nearby_radius_km: Radius for "near you" disaster events
        shelter_radius_km: Radius for nearby shelters
        recent_window_hours: Window for "recent" events
        default_location: Fallback location when none has been set
        catalog_path: YAML catalog of events and shelters (None for bundled)
        store_path: JSON file backing the local cache
        language: Preferred language for safety tips
        simulated_delay_seconds: Artificial feed latency
        rate_limit: Rate limiting configuration
    """
    refresh_interval_seconds: int = 300
    nearby_radius_km: float = 100.0
    shelter_radius_km: float = 10.0
    recent_window_hours: int = 24
    default_location: Coordinates | None = None
    catalog_path: str | None = None
    store_path: str = ".disaster_alerts/store.json"
    language: str = "en"
    simulated_delay_seconds: float = 0.0
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)


@dataclass
class ValidationError:
    """A validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.default_location is not None:
        errors.extend(validate_coordinates(
            config.default_location.latitude,
            config.default_location.longitude,
            "default_location",
        ))
    else:
        errors.append(ValidationError(
            field="default_location",
            message="No default location; nearby filtering is skipped until one is set",
            severity="warning",
        ))

    for name in ("nearby_radius_km", "shelter_radius_km"):
        value = getattr(config, name)
        if value < 0:
            errors.append(ValidationError(
                field=name,
                message=f"Radius must be non-negative, got {value}",
            ))

    if config.refresh_interval_seconds <= 0:
        errors.append(ValidationError(
            field="refresh_interval_seconds",
            message=f"Refresh interval must be positive, got {config.refresh_interval_seconds}",
        ))

    if config.recent_window_hours <= 0:
        errors.append(ValidationError(
            field="recent_window_hours",
            message=f"Recent window must be positive, got {config.recent_window_hours}",
        ))

    if config.rate_limit.max_requests <= 0:
        errors.append(ValidationError(
            field="rate_limit.max_requests",
            message=f"max_requests must be positive, got {config.rate_limit.max_requests}",
        ))

    if config.rate_limit.window_seconds <= 0:
        errors.append(ValidationError(
            field="rate_limit.window_seconds",
            message=f"window_seconds must be positive, got {config.rate_limit.window_seconds}",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
