"""Web adapter for serving line maps."""

from line_route_map.adapters.web.geojson_map_display import GeoJsonMapDisplay
from line_route_map.adapters.web.starlette_app import LineMapWebAdapter, create_app

__all__ = ["GeoJsonMapDisplay", "LineMapWebAdapter", "create_app"]
