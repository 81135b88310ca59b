"""Parser for OSRM route responses."""

from numbers import Real
from typing import Any

from line_route_map.domain.models.errors import MalformedRouteError
from line_route_map.domain.models.station import LatLng


def _parse_coordinate(coord: Any) -> LatLng:
    """Convert one GeoJSON [lon, lat] position to (lat, lon)."""
    if not isinstance(coord, (list, tuple)) or len(coord) < 2:
        raise MalformedRouteError(f"Invalid coordinate: {coord!r}")
    lon, lat = coord[0], coord[1]
    # bool is a Real subclass but never a valid coordinate
    if isinstance(lon, bool) or isinstance(lat, bool):
        raise MalformedRouteError(f"Invalid coordinate: {coord!r}")
    if not isinstance(lon, Real) or not isinstance(lat, Real):
        raise MalformedRouteError(f"Non-numeric coordinate: {coord!r}")
    return (float(lat), float(lon))


def parse_route_geometry(data: Any) -> list[LatLng]:
    """Extract the first route's geometry as (latitude, longitude) pairs.

    Args:
        data: Decoded JSON body of a route/v1 response.

    Returns:
        Coordinate sequence of the first route candidate.

    Raises:
        MalformedRouteError: If there is no route or its geometry is unusable.
    """
    if not isinstance(data, dict):
        raise MalformedRouteError("Route response is not a JSON object")

    routes = data.get("routes")
    if not isinstance(routes, list) or not routes:
        code = data.get("code", "unknown")
        raise MalformedRouteError(f"Route response contains no routes (code: {code})")

    first = routes[0]
    geometry = first.get("geometry") if isinstance(first, dict) else None
    coordinates = geometry.get("coordinates") if isinstance(geometry, dict) else None
    if not isinstance(coordinates, list):
        raise MalformedRouteError("Route has no GeoJSON geometry")
    if len(coordinates) < 2:
        raise MalformedRouteError(f"Route geometry has {len(coordinates)} point(s), need 2")

    return [_parse_coordinate(coord) for coord in coordinates]
