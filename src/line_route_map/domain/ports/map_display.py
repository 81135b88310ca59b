"""Map display port."""

from typing import Protocol

from line_route_map.domain.models.bounds import Bounds
from line_route_map.domain.models.map_layer import MapLayer


class MapDisplay(Protocol):
    """Port for the widget that actually draws layers."""

    def add_layers(self, layers: list[MapLayer]) -> None:
        """Draw new layers."""
        ...

    def remove_layers(self, layer_ids: list[str]) -> None:
        """Remove previously drawn layers by id."""
        ...

    def fit_bounds(self, bounds: Bounds, padding: int) -> None:
        """Fit the viewport to the given region."""
        ...

    def clear(self) -> None:
        """Remove every layer."""
        ...
