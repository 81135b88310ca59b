"""Command line interface for rendering line routes."""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

import aiohttp

from line_route_map.adapters.config import AppConfig, LineConfigurationLoader
from line_route_map.domain.models import LineConfiguration, RoutePath, Station
from line_route_map.main import configure_logging, create_path_service
from line_route_map.main import run as run_server


def parse_station(value: str) -> Station:
    """Parse "lat,lon" or "name=lat,lon" into a Station.

    Raises:
        argparse.ArgumentTypeError: If the value is not in one of those forms.
    """
    name, sep, coords = value.rpartition("=")
    if not sep:
        name, coords = value, value
    try:
        lat_str, lon_str = coords.split(",")
        latitude, longitude = float(lat_str), float(lon_str)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"Invalid station '{value}', expected 'lat,lon' or 'name=lat,lon'"
        ) from e
    return Station(name=name.strip(), latitude=latitude, longitude=longitude)


def path_to_dict(path: RoutePath) -> dict[str, Any]:
    """Serialize a rendered path for JSON output."""
    return {
        "points": [list(point) for point in path.points],
        "bounds": path.bounds.as_list(),
        "distance_km": round(path.distance_km, 3),
        "estimated_duration_minutes": path.estimated_duration_minutes,
        "segments": [
            {
                "from": segment.start.name,
                "to": segment.end.name,
                "points": len(segment.points),
                "fallback": segment.failure.model_dump() if segment.failure else None,
            }
            for segment in path.segments
        ],
    }


def print_path_summary(stations: list[Station], path: RoutePath) -> None:
    """Print a human-readable summary of a rendered path."""
    print(f"\nRoute: {stations[0].name} → {stations[-1].name}")
    print(f"  Stations: {len(stations)}")
    print(f"  Points: {len(path.points)}")
    print(f"  Distance: {path.distance_km:.2f} km")
    print(f"  Estimated duration: {path.estimated_duration_minutes} min")
    for segment in path.segments:
        marker = "straight line" if segment.is_fallback else f"{len(segment.points)} points"
        print(f"    {segment.start.name} → {segment.end.name}: {marker}")
        if segment.failure:
            print(f"      ({segment.failure.kind}: {segment.failure.reason})")


async def render_stations(config: AppConfig, stations: list[Station]) -> RoutePath:
    """Render a path through stations with a throwaway HTTP session."""
    async with aiohttp.ClientSession() as session:
        path_service = create_path_service(config, session)
        return await path_service.render_path(stations)


def find_line(config: AppConfig, name: str) -> LineConfiguration | None:
    """Look up a configured line by name."""
    for line in LineConfigurationLoader.load(config):
        if line.name == name:
            return line
    return None


def cmd_lines(config: AppConfig, as_json: bool) -> int:
    """List configured lines."""
    lines = LineConfigurationLoader.load(config)
    if as_json:
        print(
            json.dumps(
                [
                    {"name": line.name, "color": line.color, "stations": len(line.stations)}
                    for line in lines
                ],
                indent=2,
            )
        )
        return 0

    if not lines:
        print("No lines configured.")
        return 0
    for line in lines:
        print(f"{line.name} ({line.color}): {' → '.join(s.name for s in line.stations)}")
    return 0


def cmd_path(config: AppConfig, stations: list[Station], as_json: bool) -> int:
    """Render and print a path."""
    path = asyncio.run(render_stations(config, stations))
    if as_json:
        print(json.dumps(path_to_dict(path), indent=2))
    else:
        print_path_summary(stations, path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Render road-following routes for transit lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List lines from config.toml
  line-route-map lines

  # Render a configured line
  line-route-map path L1 --json

  # Render ad-hoc stations
  line-route-map route "Bab El Had=34.0209,-6.8416" "Agdal=33.9981,-6.8483"

  # Serve all configured lines over HTTP
  line-route-map serve
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    lines_parser = subparsers.add_parser("lines", help="List configured lines")
    lines_parser.add_argument("--json", action="store_true", help="Output as JSON")

    path_parser = subparsers.add_parser("path", help="Render a configured line")
    path_parser.add_argument("line", help="Line name as configured")
    path_parser.add_argument("--json", action="store_true", help="Output as JSON")

    route_parser = subparsers.add_parser("route", help="Render a path through given stations")
    route_parser.add_argument(
        "stations", nargs="+", type=parse_station, help="Stations as 'lat,lon' or 'name=lat,lon'"
    )
    route_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("serve", help="Serve configured lines over HTTP")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        if args.config:
            os.environ["CONFIG_FILE"] = args.config
        run_server()
        return

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    config = AppConfig(config_file=args.config) if args.config else AppConfig()

    try:
        if args.command == "lines":
            exit_code = cmd_lines(config, args.json)
        elif args.command == "path":
            line = find_line(config, args.line)
            if line is None:
                print(f"Unknown line: {args.line}", file=sys.stderr)
                sys.exit(1)
            exit_code = cmd_path(config, line.stations, args.json)
        else:
            if len(args.stations) < 2:
                parser.error("route needs at least 2 stations")
            config.apply_file_overrides(required=bool(args.config))
            exit_code = cmd_path(config, args.stations, args.json)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
