"""Map display adapter that keeps drawn layers as GeoJSON."""

import logging
from typing import Any

from line_route_map.domain.models.bounds import Bounds
from line_route_map.domain.models.map_layer import MapLayer, MarkerLayer
from line_route_map.domain.ports.map_display import MapDisplay

logger = logging.getLogger(__name__)


def _lon_lat(point: tuple[float, float]) -> list[float]:
    lat, lon = point
    return [lon, lat]


def layer_to_feature(layer: MapLayer) -> dict[str, Any]:
    """Convert a layer to a GeoJSON Feature (coordinates in [lon, lat] order)."""
    if isinstance(layer, MarkerLayer):
        return {
            "type": "Feature",
            "id": layer.layer_id,
            "geometry": {"type": "Point", "coordinates": _lon_lat(layer.position)},
            "properties": {
                "kind": "marker",
                "color": layer.color,
                "size": layer.size,
                "popup": layer.popup,
                "label": layer.label,
                "draggable": layer.draggable,
            },
        }

    style = layer.style
    return {
        "type": "Feature",
        "id": layer.layer_id,
        "geometry": {
            "type": "LineString",
            "coordinates": [_lon_lat(point) for point in layer.points],
        },
        "properties": {
            "kind": "polyline",
            "color": style.color,
            "weight": style.weight,
            "opacity": style.opacity,
            "lineJoin": style.line_join,
            "lineCap": style.line_cap,
            "dashArray": style.dash_array,
        },
    }


class GeoJsonMapDisplay(MapDisplay):
    """Holds the drawn layers of one map in insertion order."""

    def __init__(self) -> None:
        self._layers: dict[str, MapLayer] = {}
        self.viewport: Bounds | None = None
        self.padding: int = 0

    @property
    def layer_ids(self) -> list[str]:
        """Ids of the currently drawn layers."""
        return list(self._layers)

    def add_layers(self, layers: list[MapLayer]) -> None:
        for layer in layers:
            if layer.layer_id in self._layers:
                logger.warning(f"Replacing layer {layer.layer_id} that was never removed")
            self._layers[layer.layer_id] = layer

    def remove_layers(self, layer_ids: list[str]) -> None:
        for layer_id in layer_ids:
            self._layers.pop(layer_id, None)

    def fit_bounds(self, bounds: Bounds, padding: int) -> None:
        self.viewport = bounds
        self.padding = padding

    def clear(self) -> None:
        self._layers.clear()
        self.viewport = None

    def to_feature_collection(self) -> dict[str, Any]:
        """Return the drawn layers as a GeoJSON FeatureCollection."""
        collection: dict[str, Any] = {
            "type": "FeatureCollection",
            "features": [layer_to_feature(layer) for layer in self._layers.values()],
        }
        if self.viewport is not None:
            v = self.viewport
            collection["bbox"] = [v.west, v.south, v.east, v.north]
        return collection
