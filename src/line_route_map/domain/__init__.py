"""Domain layer - core models and ports."""

from line_route_map.domain.models import (
    Bounds,
    RoutePath,
    Segment,
    Station,
)
from line_route_map.domain.ports import (
    MapDisplay,
    RoutingService,
)

__all__ = [
    "Bounds",
    "MapDisplay",
    "RoutePath",
    "RoutingService",
    "Segment",
    "Station",
]
