"""Station domain model."""

from dataclasses import dataclass

LatLng = tuple[float, float]


@dataclass(frozen=True)
class Station:
    """Represents a stop on a transit line."""

    name: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> LatLng:
        """Return (latitude, longitude) of the station."""
        return (self.latitude, self.longitude)
