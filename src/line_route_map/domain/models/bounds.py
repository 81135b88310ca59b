"""Bounding region domain model."""

from collections.abc import Iterable
from dataclasses import dataclass

from .station import LatLng


@dataclass(frozen=True)
class Bounds:
    """Geographic bounding box, used by callers to fit a viewport."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def around(cls, points: Iterable[LatLng]) -> "Bounds":
        """Build the smallest box containing all points.

        Raises:
            ValueError: If no points are given.
        """
        latitudes: list[float] = []
        longitudes: list[float] = []
        for lat, lon in points:
            latitudes.append(lat)
            longitudes.append(lon)
        if not latitudes:
            raise ValueError("Cannot compute bounds of an empty point set")
        return cls(
            south=min(latitudes),
            west=min(longitudes),
            north=max(latitudes),
            east=max(longitudes),
        )

    def contains(self, point: LatLng) -> bool:
        """Check whether a point lies inside the box (edges included)."""
        lat, lon = point
        return self.south <= lat <= self.north and self.west <= lon <= self.east

    def as_list(self) -> list[list[float]]:
        """Return [[south, west], [north, east]] as map widgets expect it."""
        return [[self.south, self.west], [self.north, self.east]]
