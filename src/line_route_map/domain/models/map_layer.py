"""Drawable map layer domain models."""

from dataclasses import dataclass

from .line_style import LineStyle
from .station import LatLng


@dataclass(frozen=True)
class MarkerLayer:
    """A circular station marker."""

    layer_id: str
    position: LatLng
    color: str
    size: int
    popup: str | None = None
    label: str | None = None
    draggable: bool = False


@dataclass(frozen=True)
class PolylineLayer:
    """A drawn line through a sequence of points."""

    layer_id: str
    points: tuple[LatLng, ...]
    style: LineStyle


MapLayer = MarkerLayer | PolylineLayer
