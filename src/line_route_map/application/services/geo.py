"""Geodesic helpers for path summaries."""

import math
from collections.abc import Sequence

from line_route_map.domain.models.station import LatLng

EARTH_RADIUS_KM = 6371.0

# Average bus speed used for travel-time estimates
AVERAGE_SPEED_KMH = 40.0


def haversine_km(start: LatLng, end: LatLng) -> float:
    """Great-circle distance between two (latitude, longitude) points in kilometers."""
    lat1, lon1 = math.radians(start[0]), math.radians(start[1])
    lat2, lon2 = math.radians(end[0]), math.radians(end[1])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def path_length_km(points: Sequence[LatLng]) -> float:
    """Sum of haversine distances along a point sequence."""
    return sum(haversine_km(a, b) for a, b in zip(points, points[1:]))


def estimate_duration_minutes(distance_km: float, speed_kmh: float = AVERAGE_SPEED_KMH) -> int:
    """Estimated travel time in whole minutes at a constant average speed."""
    if speed_kmh <= 0:
        raise ValueError("speed_kmh must be positive")
    return round(distance_km / speed_kmh * 60)
