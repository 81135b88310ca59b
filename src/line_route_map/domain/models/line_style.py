"""Line style domain model."""

from dataclasses import dataclass

DEFAULT_LINE_COLOR = "#2563eb"


@dataclass(frozen=True)
class LineStyle:
    """Styling applied to a drawn polyline."""

    color: str = DEFAULT_LINE_COLOR
    weight: int = 5
    opacity: float = 0.8
    line_join: str = "round"
    line_cap: str | None = None
    dash_array: str | None = None
