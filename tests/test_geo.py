"""Tests for geodesic helpers."""

import pytest

from line_route_map.application.services.geo import (
    estimate_duration_minutes,
    haversine_km,
    path_length_km,
)


def test_haversine_same_point_is_zero() -> None:
    """Given identical points, when measuring, then the distance is zero."""
    assert haversine_km((34.02, -6.84), (34.02, -6.84)) == 0.0


def test_haversine_one_degree_of_latitude() -> None:
    """Given points one degree of latitude apart, when measuring, then it is about 111.19 km."""
    assert haversine_km((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111.19, abs=0.01)


def test_haversine_known_city_pair() -> None:
    """Given Rabat and Casablanca, when measuring, then it is roughly 85 km."""
    rabat = (34.0209, -6.8416)
    casablanca = (33.5731, -7.5898)

    assert haversine_km(rabat, casablanca) == pytest.approx(85.2, abs=1.0)


def test_path_length_sums_legs() -> None:
    """Given a three-point path, when measuring, then leg distances are summed."""
    points = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]

    assert path_length_km(points) == pytest.approx(2 * haversine_km((0.0, 0.0), (1.0, 0.0)))


def test_path_length_of_single_point_is_zero() -> None:
    """Given a single point, when measuring, then the length is zero."""
    assert path_length_km([(1.0, 1.0)]) == 0.0


def test_estimate_duration_at_average_speed() -> None:
    """Given 20 km at 40 km/h, when estimating, then it takes 30 minutes."""
    assert estimate_duration_minutes(20.0) == 30


def test_estimate_duration_rejects_non_positive_speed() -> None:
    """Given zero speed, when estimating, then ValueError is raised."""
    with pytest.raises(ValueError, match="speed_kmh must be positive"):
        estimate_duration_minutes(10.0, speed_kmh=0)
