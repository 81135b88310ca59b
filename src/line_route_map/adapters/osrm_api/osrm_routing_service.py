"""OSRM routing service adapter.

Uses the route/v1 endpoint of an OSRM server, by default the public demo
server at router.project-osrm.org.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from line_route_map.adapters.api_rate_limiter import ApiRateLimiter
from line_route_map.adapters.api_request_logger import log_api_request
from line_route_map.adapters.osrm_api.constants import (
    OSRM_DEFAULT_PROFILE,
    OSRM_MIN_DELAY_SECONDS,
    OSRM_PUBLIC_BASE_URL,
    OSRM_ROUTE_PARAMS,
)
from line_route_map.adapters.osrm_api.geometry_parser import parse_route_geometry
from line_route_map.domain.models.errors import MalformedRouteError, RoutingTransportError
from line_route_map.domain.models.station import LatLng
from line_route_map.domain.ports.routing_service import RoutingService

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


def format_waypoints(start: LatLng, end: LatLng) -> str:
    """Format two (lat, lon) points as OSRM's semicolon-joined "lon,lat" list."""
    return ";".join(f"{lon},{lat}" for lat, lon in (start, end))


class OsrmRoutingService(RoutingService):
    """Adapter computing driving routes with OSRM."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = OSRM_PUBLIC_BASE_URL,
        profile: str = OSRM_DEFAULT_PROFILE,
        timeout_seconds: float = 10,
        min_delay_seconds: float = OSRM_MIN_DELAY_SECONDS,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: Shared aiohttp ClientSession.
            base_url: OSRM server root.
            profile: Routing profile, e.g. "driving".
            timeout_seconds: Total timeout per request.
            min_delay_seconds: Minimum spacing between requests to this server.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._profile = profile
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        """Get the limiter shared by every client of this server."""
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.get_instance(
                f"osrm:{self._base_url}", self._min_delay_seconds
            )
        return self._rate_limiter

    def build_route_url(self, start: LatLng, end: LatLng) -> str:
        """Build the route/v1 URL for a pair of points."""
        return f"{self._base_url}/route/v1/{self._profile}/{format_waypoints(start, end)}"

    async def _read_body(self, response: "ClientResponse", url: str) -> Any:
        """Return the decoded JSON body or raise a routing error."""
        if response.status != 200:
            # Gateway error pages are not always valid UTF-8
            body = await response.text(errors="replace")
            raise RoutingTransportError(
                f"OSRM returned status {response.status} for {url}: {body[:200]}",
                status_code=response.status,
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise MalformedRouteError(f"OSRM returned invalid JSON: {e}") from e

    async def fetch_route(self, start: LatLng, end: LatLng) -> list[LatLng]:
        """Fetch the driving route between two points.

        Args:
            start: (latitude, longitude) of the origin.
            end: (latitude, longitude) of the destination.

        Returns:
            (latitude, longitude) sequence of the first route candidate.

        Raises:
            RoutingTransportError: On network errors, timeouts or non-200 responses.
            MalformedRouteError: If the payload carries no usable geometry.
        """
        url = self.build_route_url(start, end)
        rate_limiter = await self._get_rate_limiter()

        try:
            async with rate_limiter:
                log_api_request("GET", url, OSRM_ROUTE_PARAMS)
                async with self._session.get(
                    url, params=OSRM_ROUTE_PARAMS, timeout=self._timeout
                ) as response:
                    data = await self._read_body(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            raise RoutingTransportError(f"Error fetching OSRM route {url}: {e!r}") from e

        points = parse_route_geometry(data)
        logger.debug(f"OSRM route {url}: {len(points)} points")
        return points
