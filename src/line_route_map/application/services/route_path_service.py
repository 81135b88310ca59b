"""Route path service.

Builds a continuous, road-following path through an ordered list of stations by
asking the routing service for each consecutive pair and stitching the results.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

from line_route_map.application.services.geo import estimate_duration_minutes, path_length_km
from line_route_map.domain.models.bounds import Bounds
from line_route_map.domain.models.errors import (
    InvalidStationListError,
    MalformedRouteError,
    RoutingTransportError,
    StaleRenderError,
)
from line_route_map.domain.models.route_path import RoutePath
from line_route_map.domain.models.segment import Segment
from line_route_map.domain.models.segment_failure import SegmentFailure
from line_route_map.domain.models.station import LatLng, Station
from line_route_map.domain.ports.routing_service import RoutingService

logger = logging.getLogger(__name__)

# Delay before every segment request after the first, to spare the shared public service
DEFAULT_SEGMENT_DELAY_SECONDS = 0.3


def stitch_segments(segments: Sequence[Segment]) -> list[LatLng]:
    """Concatenate segment points, dropping the first point of every segment after the first.

    The first point of segment i duplicates the last point of segment i-1.
    """
    points: list[LatLng] = []
    for index, segment in enumerate(segments):
        points.extend(segment.points if index == 0 else segment.points[1:])
    return points


def require_stations(stations: Sequence[Station]) -> None:
    """Raise InvalidStationListError unless at least two stations are given."""
    if len(stations) < 2:
        raise InvalidStationListError(
            f"At least 2 stations are required to render a path, got {len(stations)}"
        )


class RoutePathService:
    """Service for rendering transit line paths."""

    def __init__(
        self,
        routing_service: RoutingService,
        segment_delay_seconds: float = DEFAULT_SEGMENT_DELAY_SECONDS,
    ) -> None:
        """Initialize with a routing service.

        Args:
            routing_service: Point-to-point routing port.
            segment_delay_seconds: Fixed pause before each request after the first.
        """
        self._routing_service = routing_service
        self._segment_delay_seconds = segment_delay_seconds

    async def render_path(
        self,
        stations: Sequence[Station],
        is_current: Callable[[], bool] | None = None,
    ) -> RoutePath:
        """Render the drawable path through the given stations.

        Segments are fetched one after another, never concurrently. A failed
        segment degrades to a straight line and never aborts the render.

        Args:
            stations: Ordered stations, at least two.
            is_current: Optional liveness check. It is consulted before each
                fetch; once it returns False no further requests are issued.

        Returns:
            The stitched path with bounds and a distance/duration summary.

        Raises:
            InvalidStationListError: If fewer than two stations are given.
            StaleRenderError: If is_current reports the render was superseded.
        """
        require_stations(stations)

        segments: list[Segment] = []
        for index in range(len(stations) - 1):
            if index > 0:
                await asyncio.sleep(self._segment_delay_seconds)
            if is_current is not None and not is_current():
                logger.debug(f"Render superseded after {index} of {len(stations) - 1} segments")
                raise StaleRenderError("Station list changed while rendering")
            segments.append(await self.fetch_segment(stations[index], stations[index + 1]))

        points = stitch_segments(segments)
        station_points = [station.coordinates for station in stations]
        distance_km = path_length_km(points)

        route_path = RoutePath(
            points=points,
            bounds=Bounds.around([*points, *station_points]),
            segments=segments,
            distance_km=distance_km,
            estimated_duration_minutes=estimate_duration_minutes(distance_km),
        )
        logger.info(
            f"Rendered path through {len(stations)} stations: {len(points)} points, "
            f"{route_path.distance_km:.2f} km, {route_path.fallback_count} straight-line fallback(s)"
        )
        return route_path

    async def fetch_segment(self, start: Station, end: Station) -> Segment:
        """Fetch one station-to-station hop, falling back to a straight line on failure."""
        try:
            points = await self._routing_service.fetch_route(start.coordinates, end.coordinates)
        except RoutingTransportError as e:
            logger.warning(
                f"Routing service unreachable for {start.name} -> {end.name} "
                f"(status: {e.status_code}): {e}; using straight line"
            )
            failure = SegmentFailure(kind="transport", reason=str(e), status_code=e.status_code)
        except MalformedRouteError as e:
            logger.warning(
                f"Malformed route for {start.name} -> {end.name}: {e}; using straight line"
            )
            failure = SegmentFailure(kind="malformed", reason=str(e))
        else:
            return Segment(start=start, end=end, points=points)

        return Segment(
            start=start,
            end=end,
            points=[start.coordinates, end.coordinates],
            failure=failure,
        )
