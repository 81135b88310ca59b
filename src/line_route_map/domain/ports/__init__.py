"""Ports (interfaces) for the ports-and-adapters architecture."""

from line_route_map.domain.ports.map_display import MapDisplay
from line_route_map.domain.ports.routing_service import RoutingService

__all__ = [
    "MapDisplay",
    "RoutingService",
]
