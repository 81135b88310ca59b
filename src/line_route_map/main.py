"""Main entry point for the line route map server."""

import asyncio
import logging
import sys

import aiohttp

from line_route_map.adapters.config import AppConfig, LineConfigurationLoader
from line_route_map.adapters.osrm_api import OsrmRoutingService
from line_route_map.adapters.web import GeoJsonMapDisplay, LineMapWebAdapter
from line_route_map.adapters.web.starlette_app import LineRouteState
from line_route_map.adapters.web.state import LineMapState, StatusUpdater
from line_route_map.application.services import LineMapView, RoutePathService
from line_route_map.domain.models import LineConfiguration

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging the same way for every entry point."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_path_service(config: AppConfig, session: aiohttp.ClientSession) -> RoutePathService:
    """Wire the OSRM adapter into a path service."""
    routing_service = OsrmRoutingService(
        session,
        base_url=config.osrm_base_url,
        profile=config.osrm_profile,
        timeout_seconds=config.osrm_timeout_seconds,
        min_delay_seconds=config.osrm_min_delay_seconds,
    )
    return RoutePathService(routing_service, segment_delay_seconds=config.segment_delay_seconds)


def build_line_states(
    line_configs: list[LineConfiguration],
    path_service: RoutePathService,
    fit_padding: int,
) -> dict[str, LineRouteState]:
    """Create and initialize one map view per configured line."""
    line_states: dict[str, LineRouteState] = {}
    for line in line_configs:
        display = GeoJsonMapDisplay()
        state = LineMapState()
        view = LineMapView(
            path_service,
            display,
            status_listener=StatusUpdater(state),
            fit_padding=fit_padding,
        )
        view.init()
        line_states[line.name] = LineRouteState(line=line, view=view, display=display, state=state)
    return line_states


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        line_configs = LineConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid line configuration: {e}")
        sys.exit(1)

    if not line_configs:
        logger.error("No lines configured.")
        logger.error("Add [[lines]] with [[lines.stations]] to your config.toml file.")
        sys.exit(1)

    logger.info(f"Loaded {len(line_configs)} line(s):")
    for line in line_configs:
        logger.info(f"  - '{line.name}' with {len(line.stations)} station(s)")

    async with aiohttp.ClientSession() as session:
        path_service = create_path_service(config, session)
        line_states = build_line_states(line_configs, path_service, config.fit_padding_px)
        adapter = LineMapWebAdapter(line_states, config)
        try:
            await adapter.start()
        finally:
            await adapter.stop()


def run() -> None:
    """Run the server (console script entry point)."""
    configure_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
