"""Domain models for line route rendering."""

from line_route_map.domain.models.bounds import Bounds
from line_route_map.domain.models.errors import (
    InvalidStationListError,
    MalformedRouteError,
    RoutingError,
    RoutingTransportError,
    StaleRenderError,
    ViewDisposedError,
)
from line_route_map.domain.models.line_configuration import LineConfiguration
from line_route_map.domain.models.line_style import DEFAULT_LINE_COLOR, LineStyle
from line_route_map.domain.models.map_layer import MapLayer, MarkerLayer, PolylineLayer
from line_route_map.domain.models.render_status import RenderStatus
from line_route_map.domain.models.route_path import RoutePath
from line_route_map.domain.models.segment import Segment
from line_route_map.domain.models.segment_failure import SegmentFailure
from line_route_map.domain.models.station import LatLng, Station

__all__ = [
    "DEFAULT_LINE_COLOR",
    "Bounds",
    "InvalidStationListError",
    "LatLng",
    "LineConfiguration",
    "LineStyle",
    "MalformedRouteError",
    "MapLayer",
    "MarkerLayer",
    "PolylineLayer",
    "RenderStatus",
    "RoutePath",
    "RoutingError",
    "RoutingTransportError",
    "Segment",
    "SegmentFailure",
    "StaleRenderError",
    "Station",
    "ViewDisposedError",
]
