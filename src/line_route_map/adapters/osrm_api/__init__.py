"""OSRM routing API adapter."""

from line_route_map.adapters.osrm_api.osrm_routing_service import OsrmRoutingService

__all__ = ["OsrmRoutingService"]
