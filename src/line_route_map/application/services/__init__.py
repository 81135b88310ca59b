"""Application services."""

from line_route_map.application.services.layer_builder import (
    LayerDiff,
    build_editor_layers,
    build_line_layers,
    build_navigation_layers,
    diff_layers,
)
from line_route_map.application.services.line_map_view import LineMapView
from line_route_map.application.services.route_path_service import (
    RoutePathService,
    require_stations,
    stitch_segments,
)

__all__ = [
    "LayerDiff",
    "LineMapView",
    "RoutePathService",
    "build_editor_layers",
    "build_line_layers",
    "build_navigation_layers",
    "diff_layers",
    "require_stations",
    "stitch_segments",
]
