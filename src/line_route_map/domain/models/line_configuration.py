"""Line configuration domain model."""

from dataclasses import dataclass

from .line_style import DEFAULT_LINE_COLOR
from .station import Station


@dataclass(frozen=True)
class LineConfiguration:
    """Configuration for a transit line with its ordered stations."""

    name: str
    stations: list[Station]
    color: str = DEFAULT_LINE_COLOR
    title: str | None = None  # Optional display name, defaults to name
