"""Routing service port."""

from typing import Protocol

from line_route_map.domain.models.station import LatLng


class RoutingService(Protocol):
    """Port for computing a driving route between two points."""

    async def fetch_route(self, start: LatLng, end: LatLng) -> list[LatLng]:
        """Return the (latitude, longitude) sequence from start to end.

        Raises:
            RoutingTransportError: If the service is unreachable or returns an error status.
            MalformedRouteError: If the response carries no usable geometry.
        """
        ...
