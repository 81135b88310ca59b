"""Route path domain model."""

from dataclasses import dataclass, field

from .bounds import Bounds
from .segment import Segment
from .station import LatLng


@dataclass(frozen=True)
class RoutePath:
    """Full concatenated route for display."""

    points: list[LatLng]
    bounds: Bounds
    segments: list[Segment] = field(default_factory=list)
    distance_km: float = 0.0
    estimated_duration_minutes: int = 0

    @property
    def fallback_count(self) -> int:
        """Number of segments drawn as straight lines."""
        return sum(1 for segment in self.segments if segment.is_fallback)
