"""Pure builders from stations and paths to drawable map layers."""

from collections.abc import Sequence
from dataclasses import dataclass
from html import escape

from line_route_map.domain.models.line_style import LineStyle
from line_route_map.domain.models.map_layer import MapLayer, MarkerLayer, PolylineLayer
from line_route_map.domain.models.route_path import RoutePath
from line_route_map.domain.models.segment import Segment
from line_route_map.domain.models.station import LatLng, Station

START_COLOR = "#2563eb"
END_COLOR = "#ef4444"
INTERMEDIATE_COLOR = "#64748b"
TERMINAL_SIZE = 24
INTERMEDIATE_SIZE = 16

EDITOR_START_COLOR = "#22c55e"
EDITOR_STATION_COLOR = "#3b82f6"
EDITOR_LINE_STYLE = LineStyle(color=INTERMEDIATE_COLOR, weight=3, opacity=1.0, dash_array="5, 10")

NAVIGATION_COLOR = "#3b82f6"
NAVIGATION_ROUTE_STYLE = LineStyle(
    color=NAVIGATION_COLOR, weight=8, opacity=0.8, line_join="round", line_cap="round"
)
NAVIGATION_FALLBACK_STYLE = LineStyle(color=NAVIGATION_COLOR, weight=6, opacity=0.6)
DRIVER_MARKER_SIZE = 40
DESTINATION_MARKER_SIZE = 32

LINE_LAYER_ID = "line"


@dataclass(frozen=True)
class LayerDiff:
    """Layers to add and layer ids to remove to move from one drawing to the next."""

    added: list[MapLayer]
    removed: list[str]

    @property
    def is_empty(self) -> bool:
        """Whether nothing needs to be redrawn."""
        return not self.added and not self.removed


def _station_popup(station: Station, index: int, count: int) -> str:
    popup = f"<b>{escape(station.name)}</b>"
    if index == 0:
        popup += "<br>Start"
    elif index == count - 1:
        popup += "<br>End"
    return popup


def build_station_markers(stations: Sequence[Station]) -> list[MarkerLayer]:
    """Build one marker per station; terminals are larger and colored."""
    markers = []
    count = len(stations)
    for index, station in enumerate(stations):
        is_terminal = index in (0, count - 1)
        if is_terminal:
            color = START_COLOR if index == 0 else END_COLOR
        else:
            color = INTERMEDIATE_COLOR
        markers.append(
            MarkerLayer(
                layer_id=f"station-{index}",
                position=station.coordinates,
                color=color,
                size=TERMINAL_SIZE if is_terminal else INTERMEDIATE_SIZE,
                popup=_station_popup(station, index, count),
            )
        )
    return markers


def build_line_layers(
    stations: Sequence[Station],
    path: RoutePath,
    style: LineStyle | None = None,
) -> list[MapLayer]:
    """Build the full drawable layer list for a rendered line.

    Args:
        stations: Ordered stations of the line.
        path: The rendered path through those stations.
        style: Polyline styling, defaults to the standard line style.

    Returns:
        Station markers followed by the line polyline.
    """
    layers: list[MapLayer] = list(build_station_markers(stations))
    if len(path.points) > 1:
        layers.append(
            PolylineLayer(
                layer_id=LINE_LAYER_ID,
                points=tuple(path.points),
                style=style or LineStyle(),
            )
        )
    return layers


def build_editor_layers(stations: Sequence[Station]) -> list[MapLayer]:
    """Build layers for the line editor: numbered draggable markers and a dashed preview."""
    layers: list[MapLayer] = []
    count = len(stations)
    for index, station in enumerate(stations):
        if index == 0:
            color = EDITOR_START_COLOR
        elif index == count - 1:
            color = END_COLOR
        else:
            color = EDITOR_STATION_COLOR
        layers.append(
            MarkerLayer(
                layer_id=f"editor-station-{index}",
                position=station.coordinates,
                color=color,
                size=TERMINAL_SIZE,
                popup=f"<b>{escape(station.name)}</b>",
                label=str(index + 1),
                draggable=True,
            )
        )
    if count > 1:
        layers.append(
            PolylineLayer(
                layer_id="editor-line",
                points=tuple(station.coordinates for station in stations),
                style=EDITOR_LINE_STYLE,
            )
        )
    return layers


def build_navigation_layers(driver_location: LatLng, segment: Segment) -> list[MapLayer]:
    """Build layers for driver navigation towards the next station."""
    next_station = segment.end
    return [
        MarkerLayer(
            layer_id="driver",
            position=driver_location,
            color=NAVIGATION_COLOR,
            size=DRIVER_MARKER_SIZE,
        ),
        MarkerLayer(
            layer_id="destination",
            position=next_station.coordinates,
            color=END_COLOR,
            size=DESTINATION_MARKER_SIZE,
            popup=f"<b>Next Stop:</b> {escape(next_station.name)}",
        ),
        PolylineLayer(
            layer_id="navigation-route",
            points=tuple(segment.points),
            style=NAVIGATION_FALLBACK_STYLE if segment.is_fallback else NAVIGATION_ROUTE_STYLE,
        ),
    ]


def diff_layers(current: Sequence[MapLayer], desired: Sequence[MapLayer]) -> LayerDiff:
    """Compute the minimal redraw between two layer lists.

    A layer whose id is kept but whose content changed is removed and re-added.
    """
    current_by_id = {layer.layer_id: layer for layer in current}
    desired_by_id = {layer.layer_id: layer for layer in desired}

    removed = [
        layer_id
        for layer_id, layer in current_by_id.items()
        if desired_by_id.get(layer_id) != layer
    ]
    added = [layer for layer in desired if current_by_id.get(layer.layer_id) != layer]
    return LayerDiff(added=added, removed=removed)
