"""Adapters layer - external system integrations."""

from line_route_map.adapters.config import AppConfig, LineConfigurationLoader
from line_route_map.adapters.osrm_api import OsrmRoutingService

__all__ = [
    "AppConfig",
    "LineConfigurationLoader",
    "OsrmRoutingService",
]
