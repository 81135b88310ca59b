"""Line map view: an explicitly owned handle for one rendered map."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from line_route_map.application.services.layer_builder import (
    build_line_layers,
    build_navigation_layers,
    diff_layers,
)
from line_route_map.application.services.route_path_service import require_stations
from line_route_map.domain.models.bounds import Bounds
from line_route_map.domain.models.errors import StaleRenderError, ViewDisposedError
from line_route_map.domain.models.render_status import RenderStatus
from line_route_map.domain.models.station import Station

if TYPE_CHECKING:
    from line_route_map.application.services.route_path_service import RoutePathService
    from line_route_map.domain.contracts.status_listener import StatusListenerProtocol
    from line_route_map.domain.models.line_style import LineStyle
    from line_route_map.domain.models.map_layer import MapLayer
    from line_route_map.domain.models.route_path import RoutePath
    from line_route_map.domain.models.station import LatLng
    from line_route_map.domain.ports.map_display import MapDisplay

logger = logging.getLogger(__name__)

DEFAULT_FIT_PADDING_PX = 50


class LineMapView:
    """Owns the drawn state of a single map.

    The host creates one view per mounted map, calls init() once, update()
    whenever the station list changes and dispose() on unmount. Each update
    bumps a generation counter; a render that finishes after a newer update
    started is discarded and never touches the display.
    """

    def __init__(
        self,
        path_service: RoutePathService,
        display: MapDisplay,
        status_listener: StatusListenerProtocol | None = None,
        fit_padding: int = DEFAULT_FIT_PADDING_PX,
    ) -> None:
        """Initialize the view.

        Args:
            path_service: Service used to render paths.
            display: Adapter that draws layers.
            status_listener: Optional receiver of loading/ready signals.
            fit_padding: Padding in pixels applied when fitting the viewport.
        """
        self._path_service = path_service
        self._display = display
        self._status_listener = status_listener
        self._fit_padding = fit_padding
        self._generation = 0
        self._layers: list[MapLayer] = []
        self._initialized = False
        self._disposed = False
        self.status = RenderStatus.IDLE
        self.path: RoutePath | None = None
        self.bounds: Bounds | None = None

    @property
    def layers(self) -> list[MapLayer]:
        """Layers currently drawn on the display."""
        return list(self._layers)

    @property
    def generation(self) -> int:
        """Counter of started renders, used to detect stale results."""
        return self._generation

    def init(self) -> None:
        """Prepare the display for drawing."""
        self._ensure_not_disposed()
        if self._initialized:
            logger.warning("Line map view already initialized")
            return
        self._display.clear()
        self._layers = []
        self._initialized = True
        self._set_status(RenderStatus.IDLE)

    async def update(self, stations: Sequence[Station], style: LineStyle | None = None) -> bool:
        """Render a new station list and redraw the display.

        Args:
            stations: Ordered stations, at least two.
            style: Optional polyline styling.

        Returns:
            True if the result was drawn, False if a newer update superseded it.

        Raises:
            InvalidStationListError: If fewer than two stations are given. The
                current drawing and any in-flight render are left untouched.
        """
        self._ensure_ready()
        require_stations(stations)
        self._generation += 1
        generation = self._generation

        def is_current() -> bool:
            return not self._disposed and generation == self._generation

        self._set_status(RenderStatus.LOADING)
        try:
            path = await self._path_service.render_path(stations, is_current=is_current)
        except StaleRenderError:
            logger.debug(f"Discarding superseded render (generation {generation})")
            return False

        if not is_current():
            logger.debug(
                f"Discarding stale render result (generation {generation}, "
                f"current {self._generation})"
            )
            return False

        self.path = path
        self._apply(build_line_layers(stations, path, style), path.bounds)
        return True

    async def navigate(self, driver_location: LatLng, next_station: Station) -> bool:
        """Show the driving route from the driver's position to the next station.

        Returns:
            True if the result was drawn, False if a newer update superseded it.
        """
        self._ensure_ready()
        self._generation += 1
        generation = self._generation

        self._set_status(RenderStatus.LOADING)
        driver = Station(name="Driver", latitude=driver_location[0], longitude=driver_location[1])
        segment = await self._path_service.fetch_segment(driver, next_station)

        if self._disposed or generation != self._generation:
            logger.debug(f"Discarding stale navigation route (generation {generation})")
            return False

        self.path = None
        self._apply(
            build_navigation_layers(driver_location, segment),
            Bounds.around([driver_location, next_station.coordinates, *segment.points]),
        )
        return True

    def dispose(self) -> None:
        """Release the display; in-flight renders become stale."""
        if self._disposed:
            return
        self._generation += 1
        self._disposed = True
        self._display.clear()
        self._layers = []
        self.path = None
        self.bounds = None
        logger.debug("Disposed line map view")

    def _apply(self, layers: list[MapLayer], bounds: Bounds) -> None:
        diff = diff_layers(self._layers, layers)
        if diff.removed:
            self._display.remove_layers(diff.removed)
        if diff.added:
            self._display.add_layers(diff.added)
        self._layers = layers
        self.bounds = bounds
        self._display.fit_bounds(bounds, self._fit_padding)
        self._set_status(RenderStatus.READY)
        logger.debug(f"Redrew map: +{len(diff.added)} / -{len(diff.removed)} layers")

    def _set_status(self, status: RenderStatus) -> None:
        self.status = status
        if self._status_listener is not None:
            self._status_listener.update_status(status)

    def _ensure_not_disposed(self) -> None:
        if self._disposed:
            raise ViewDisposedError("Line map view has been disposed")

    def _ensure_ready(self) -> None:
        self._ensure_not_disposed()
        if not self._initialized:
            self.init()
