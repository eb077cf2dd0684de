"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components. It's the "glue" that
makes the application work.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator

from src.core.config import Config
from src.core.dashboard import DashboardView, build_dashboard
from src.core.disaster import DisasterEvent, filter_by_type, parse_disasters
from src.core.formatter import format_dashboard_summary, format_event_summary
from src.core.rate_limit import (
    RateLimitState,
    check_and_consume,
    format_rate_limit_message,
    new_rate_limit_state,
    remaining_requests,
)
from src.core.shelter import Shelter, parse_shelters
from src.shell.disaster_feed import DEFAULT_CATALOG_PATH, DisasterFeed
from src.shell.local_store import LocalStore
from src.shell.location_provider import LocationProvider


logger = logging.getLogger(__name__)


@dataclass
class RefreshResult:
    """Result of one dashboard refresh cycle.

    Attributes:
        view: Dashboard view (previous view when rate limited, None if none yet)
        events_fetched: Events parsed from the feed this cycle
        shelters_fetched: Shelters parsed from the feed this cycle
        rate_limited: Whether the refresh was rejected by the rate limiter
        errors: Any errors that occurred
    """
    view: DashboardView | None
    events_fetched: int = 0
    shelters_fetched: int = 0
    rate_limited: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if the refresh ran and no errors occurred."""
        return not self.rate_limited and len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the refresh result."""
        if self.rate_limited:
            return "Refresh skipped: rate limited"
        if self.view is None:
            return "No data available"
        return format_dashboard_summary(self.view)


class Orchestrator:
    """Coordinates dashboard refreshes.

    This class wires together:
    - Disaster feed (fetches raw events and shelters)
    - Location provider (resolves the user location)
    - Core functions (parsing, classification, filtering, rate limiting)
    """

    def __init__(
        self,
        config: Config,
        feed: DisasterFeed | None = None,
        store: LocalStore | None = None,
        location_provider: LocationProvider | None = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
        event_types: set[str] | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            feed: Disaster feed (created if not provided)
            store: Local store (created if not provided)
            location_provider: Location provider (created if not provided)
            clock: Returns current time in seconds since epoch
            sleep: Waits between refreshes in watch()
            event_types: Only show these categories (None for all)
        """
        self.config = config
        self.clock = clock
        self.sleep = sleep
        self.event_types = event_types
        self.feed = feed or DisasterFeed(
            catalog_path=config.catalog_path or DEFAULT_CATALOG_PATH,
            delay_seconds=config.simulated_delay_seconds,
            clock=clock,
        )
        self.store = store or LocalStore(config.store_path)
        self.location_provider = location_provider or LocationProvider(
            self.store,
            default_location=config.default_location,
        )
        self.rate_limit_state: RateLimitState = new_rate_limit_state(
            clock(),
            limit=config.rate_limit.max_requests,
            window_seconds=config.rate_limit.window_seconds,
        )
        self.last_view: DashboardView | None = None

    def _fetch_events(self) -> list[DisasterEvent]:
        """Fetch and parse disaster events (newest first)."""
        return filter_by_type(parse_disasters(self.feed.fetch_disasters()), self.event_types)

    def _fetch_shelters(self) -> list[Shelter]:
        """Fetch and parse shelters."""
        return parse_shelters(self.feed.fetch_shelters())

    def refresh(self) -> RefreshResult:
        """Run a complete dashboard refresh cycle.

        This is the main entry point that:
        1. Checks the refresh rate limit
        2. Fetches events and shelters
        3. Resolves the user location
        4. Builds the dashboard view

        Returns:
            RefreshResult with details of what happened
        """
        now = self.clock()

        # Step 1: Rate limit (pure core function, state replaced not mutated)
        decision = check_and_consume(self.rate_limit_state, now)
        self.rate_limit_state = decision.state

        if not decision.allowed:
            logger.warning(format_rate_limit_message(decision))
            return RefreshResult(view=self.last_view, rate_limited=True)

        logger.info(
            "Refresh allowed, %d remaining in window",
            remaining_requests(self.rate_limit_state, now),
        )

        errors: list[str] = []

        # Step 2: Fetch events
        try:
            events = self._fetch_events()
            logger.info("Fetched %d disaster events", len(events))
        except Exception as e:
            error_msg = f"Failed to fetch disaster data: {e}"
            logger.error(error_msg)
            return RefreshResult(view=self.last_view, errors=[error_msg])

        # Shelters are optional for the dashboard
        try:
            shelters = self._fetch_shelters()
            logger.info("Fetched %d shelters", len(shelters))
        except Exception as e:
            error_msg = f"Failed to fetch shelters: {e}"
            logger.error(error_msg)
            errors.append(error_msg)
            shelters = []

        # Step 3: Location
        location = self.location_provider.get_current_location()

        # Step 4: Build view (pure core function)
        view = build_dashboard(
            events,
            shelters,
            location,
            now_ms=int(now * 1000),
            config=self.config,
        )
        self.last_view = view

        logger.info(
            "%d events nearby, %d critical, %d shelters nearby",
            len(view.nearby_events),
            len(view.critical_events),
            len(view.nearby_shelters),
        )
        if view.nearby_events:
            logger.info("Top alert: %s", format_event_summary(view.nearby_events[0], location))

        return RefreshResult(
            view=view,
            events_fetched=len(events),
            shelters_fetched=len(shelters),
            errors=errors,
        )

    def watch(self, max_cycles: int | None = None) -> Iterator[RefreshResult]:
        """Refresh repeatedly, waiting ``refresh_interval_seconds`` between cycles.

        Every cycle goes through the same rate limiter, so a short interval
        yields rate-limited results once the window is used up.

        Args:
            max_cycles: Stop after this many refreshes (None runs forever)

        Yields:
            RefreshResult for each cycle
        """
        interval = self.config.refresh_interval_seconds
        cycle = 0

        while max_cycles is None or cycle < max_cycles:
            if cycle > 0:
                self.sleep(interval)
            cycle += 1
            logger.info("Refresh cycle %d", cycle)
            yield self.refresh()
