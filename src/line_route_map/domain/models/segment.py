"""Segment domain model."""

from dataclasses import dataclass

from .segment_failure import SegmentFailure
from .station import LatLng, Station


@dataclass(frozen=True)
class Segment:
    """Coordinate path for one station-to-station hop."""

    start: Station
    end: Station
    points: list[LatLng]
    failure: SegmentFailure | None = None

    @property
    def is_fallback(self) -> bool:
        """Whether the segment is a straight line substituted after a failure."""
        return self.failure is not None
