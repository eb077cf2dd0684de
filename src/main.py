"""Command-line Entry Point.

A thin wrapper that loads configuration, wires the shell components and
prints JSON results. Business logic lives in src/core.

Usage:
    python main.py dashboard --type earthquake --type flood
    python main.py dashboard --watch
    python main.py shelters --search church --nearby
    python main.py shelters --nearest 3
    python main.py reports
    python main.py tips --type flood --language es
    python main.py report --type flood --description "Street flooded" --lat 34.05 --lon -118.24
    python main.py locate --lat 34.05 --lon -118.24
    python main.py classify earthquake 6.1

Environment:
    CONFIG_PATH: Path to YAML config file
    DISASTER_ALERTS_LOCATION: Default location as 'lat,lon' (env-only config)
    LOG_LEVEL: Logging level (default INFO)
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import Any

from src.core.config import Config, validate_config
from src.core.dashboard import find_nearby_shelters
from src.core.disaster import DISASTER_TYPES
from src.core.formatter import (
    format_dashboard,
    format_shelter,
    get_severity_color,
)
from src.core.geo import Coordinates, find_nearest, sort_by_distance
from src.core.safety import get_emergency_contacts, get_safety_tips
from src.core.severity import classify_severity
from src.core.shelter import parse_shelters, search_shelters
from src.orchestrator import Orchestrator, RefreshResult
from src.shell.config_loader import load_config, load_config_from_env
from src.shell.disaster_feed import DEFAULT_CATALOG_PATH, DisasterFeed
from src.shell.incident_reporter import IncidentReporter
from src.shell.local_store import LocalStore
from src.shell.location_provider import LocationProvider


logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("DISASTER_ALERTS_LOCATION"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _location_provider(config: Config) -> LocationProvider:
    return LocationProvider(LocalStore(config.store_path), config.default_location)


def _dashboard_response(result: RefreshResult, now_ms: int) -> dict[str, Any]:
    response: dict[str, Any] = {
        "status": "rate_limited" if result.rate_limited else (
            "success" if result.success else "partial_failure"
        ),
        "summary": result.summary,
        "events_fetched": result.events_fetched,
        "shelters_fetched": result.shelters_fetched,
    }

    if result.view is not None:
        response["dashboard"] = format_dashboard(result.view, now_ms)

    if result.errors:
        response["errors"] = result.errors

    return response


def cmd_dashboard(args: argparse.Namespace, config: Config) -> int:
    """Refresh and print the dashboard, once or every refresh interval."""
    orchestrator = Orchestrator(
        config,
        event_types=set(args.type) if args.type else None,
    )

    if not args.watch:
        result = orchestrator.refresh()
        _print_json(_dashboard_response(result, int(time.time() * 1000)))
        logger.info("Completed: %s", result.summary)
        return 0 if result.view is not None else 1

    logger.info(
        "Watching dashboard every %ds",
        config.refresh_interval_seconds,
    )
    for result in orchestrator.watch(max_cycles=args.cycles):
        _print_json(_dashboard_response(result, int(orchestrator.clock() * 1000)))

    return 0


def cmd_shelters(args: argparse.Namespace, config: Config) -> int:
    """List shelters, optionally searched and limited to nearby ones."""
    feed = DisasterFeed(config.catalog_path or DEFAULT_CATALOG_PATH)
    shelters = search_shelters(parse_shelters(feed.fetch_shelters()), args.search or "")
    location = _location_provider(config).get_current_location()

    if (args.nearby or args.nearest is not None) and location is None:
        logger.error("Nearby shelters require a location; use 'locate' first")
        return 1

    if args.nearby:
        radius = args.radius if args.radius is not None else config.shelter_radius_km
        shelters = find_nearby_shelters(shelters, location, radius)
    else:
        shelters = sort_by_distance(shelters, location)

    if args.nearest is not None:
        shelters = [s for s, _ in find_nearest(shelters, location, args.nearest)]

    _print_json([format_shelter(s, location) for s in shelters])
    return 0


def cmd_tips(args: argparse.Namespace, config: Config) -> int:
    """Print safety tips."""
    language = args.language or config.language
    tips = get_safety_tips(args.type, language)

    _print_json([
        {
            "id": t.id,
            "type": t.disaster_type,
            "title": t.title,
            "content": t.content,
            "language": t.language,
            "fallback": t.language != language,
        }
        for t in tips
    ])
    return 0


def cmd_reports(args: argparse.Namespace, config: Config) -> int:
    """Print previously submitted incident reports, oldest first."""
    reports = IncidentReporter(LocalStore(config.store_path)).list_reports()

    if args.type:
        reports = [r for r in reports if r.get("type") == args.type]

    _print_json(reports)
    return 0


def cmd_contacts(args: argparse.Namespace, config: Config) -> int:
    """Print emergency contacts."""
    _print_json([
        {"name": c.name, "number": c.number, "description": c.description, "region": c.region}
        for c in get_emergency_contacts(args.region)
    ])
    return 0


def cmd_report(args: argparse.Namespace, config: Config) -> int:
    """Submit an incident report."""
    if (args.lat is None) != (args.lon is None):
        logger.error("Provide both --lat and --lon, or neither")
        return 1

    if args.lat is not None:
        coordinates = Coordinates(latitude=args.lat, longitude=args.lon)
    else:
        coordinates = _location_provider(config).get_current_location()

    reporter = IncidentReporter(LocalStore(config.store_path))
    result = reporter.submit(
        disaster_type=args.type,
        description=args.description,
        coordinates=coordinates,
        user_id=args.user,
        images=tuple(args.image or ()),
    )

    if result.report is None:
        _print_json({
            "status": "rejected",
            "errors": [{"field": e.field, "message": e.message} for e in result.errors],
        })
        return 1

    _print_json({
        "status": "submitted" if result.stored else "not_stored",
        "report": result.report.to_dict(),
    })
    return 0 if result.success else 1


def cmd_locate(args: argparse.Namespace, config: Config) -> int:
    """Show, set or clear the manual location."""
    provider = _location_provider(config)

    if args.clear:
        if not provider.clear_manual_location():
            return 1
    elif args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None:
            logger.error("Provide both --lat and --lon")
            return 1
        if not provider.set_manual_location(Coordinates(latitude=args.lat, longitude=args.lon)):
            return 1

    location = provider.get_current_location()
    _print_json(None if location is None else {
        "latitude": location.latitude,
        "longitude": location.longitude,
    })
    return 0


def cmd_classify(args: argparse.Namespace, config: Config) -> int:
    """Classify a single reading."""
    severity = classify_severity(args.type, args.reading)
    _print_json({
        "type": args.type,
        "reading": args.reading,
        "severity": severity,
        "color": get_severity_color(severity),
    })
    return 0


def cmd_validate_config(args: argparse.Namespace, config: Config) -> int:
    """Validate the loaded configuration."""
    result = validate_config(config)

    _print_json({
        "valid": result.valid,
        "errors": [
            {"field": e.field, "message": e.message, "severity": e.severity}
            for e in result.errors
        ],
    })
    return 0 if result.valid else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Disaster alert dashboard",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dashboard = subparsers.add_parser("dashboard", help="Refresh and print the dashboard")
    dashboard.add_argument(
        "--type",
        action="append",
        choices=DISASTER_TYPES,
        help="Only show this disaster type (repeatable)",
    )
    dashboard.add_argument("--watch", action="store_true", help="Refresh every refresh_interval_seconds")
    dashboard.add_argument("--cycles", type=int, help="Stop watching after this many refreshes")
    dashboard.set_defaults(func=cmd_dashboard)

    shelters = subparsers.add_parser("shelters", help="List emergency shelters")
    shelters.add_argument("--search", help="Filter by name or address")
    shelters.add_argument("--nearby", action="store_true", help="Only shelters near your location")
    shelters.add_argument("--radius", type=float, help="Nearby radius in km")
    shelters.add_argument("--nearest", type=int, help="Only the N closest shelters")
    shelters.set_defaults(func=cmd_shelters)

    tips = subparsers.add_parser("tips", help="Print safety tips")
    tips.add_argument("--type", help="Disaster type")
    tips.add_argument("--language", help="Language code (e.g. en, es)")
    tips.set_defaults(func=cmd_tips)

    contacts = subparsers.add_parser("contacts", help="Print emergency contacts")
    contacts.add_argument("--region", help="Include contacts for this region")
    contacts.set_defaults(func=cmd_contacts)

    report = subparsers.add_parser("report", help="Report an incident")
    report.add_argument("--type", required=True, help="Disaster type")
    report.add_argument("--description", required=True, help="What happened")
    report.add_argument("--lat", type=float, help="Incident latitude")
    report.add_argument("--lon", type=float, help="Incident longitude")
    report.add_argument("--user", help="Reporting user ID")
    report.add_argument("--image", action="append", help="Attached image file name")
    report.set_defaults(func=cmd_report)

    reports = subparsers.add_parser("reports", help="List submitted incident reports")
    reports.add_argument("--type", help="Only reports of this disaster type")
    reports.set_defaults(func=cmd_reports)

    locate = subparsers.add_parser("locate", help="Show or set your location")
    locate.add_argument("--lat", type=float, help="Latitude")
    locate.add_argument("--lon", type=float, help="Longitude")
    locate.add_argument("--clear", action="store_true", help="Forget the manual location")
    locate.set_defaults(func=cmd_locate)

    classify = subparsers.add_parser("classify", help="Classify a reading")
    classify.add_argument("type", help="Disaster type")
    classify.add_argument("reading", type=float, nargs="?", help="Magnitude, water level, wind speed or area")
    classify.set_defaults(func=cmd_classify)

    validate = subparsers.add_parser("validate-config", help="Validate configuration")
    validate.set_defaults(func=cmd_validate_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to a command.

    Returns:
        Process exit code
    """
    _configure_logging()
    args = build_parser().parse_args(argv)

    try:
        config = _get_config()
        return args.func(args, config)
    except Exception:
        logger.exception("Unexpected error running '%s'", args.command)
        return 1


if __name__ == "__main__":
    sys.exit(main())
