"""Tests for the line map JSON API."""

from collections.abc import Iterator

import pytest
from conftest import FailingRoutingService, FakeRoutingService
from starlette.testclient import TestClient

from line_route_map.adapters.web import create_app
from line_route_map.adapters.web.starlette_app import LineRouteState
from line_route_map.application.services import RoutePathService
from line_route_map.domain.models import LineConfiguration, RoutingTransportError, Station
from line_route_map.main import build_line_states

LINE = LineConfiguration(
    name="L1",
    title="Bab El Had - Agdal",
    color="#dc2626",
    stations=[
        Station(name="Bab El Had", latitude=34.0209, longitude=-6.8416),
        Station(name="Hassan", latitude=34.0181, longitude=-6.8227),
        Station(name="Agdal", latitude=33.9981, longitude=-6.8483),
    ],
)


def _line_states(routing: FakeRoutingService) -> dict[str, LineRouteState]:
    path_service = RoutePathService(routing, segment_delay_seconds=0)
    return build_line_states([LINE], path_service, fit_padding=50)


@pytest.fixture
def routing() -> FakeRoutingService:
    """Routing double answering with straight pairs."""
    return FakeRoutingService()


@pytest.fixture
def client(routing: FakeRoutingService) -> Iterator[TestClient]:
    """Test client over one configured line."""
    with TestClient(create_app(_line_states(routing))) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    """Given a running app, when checking health, then ok is returned."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_lines_lists_configured_lines_without_rendering(
    client: TestClient, routing: FakeRoutingService
) -> None:
    """Given a configured line, when listing, then it is described and nothing is fetched."""
    response = client.get("/lines")

    assert response.json() == [
        {
            "name": "L1",
            "title": "Bab El Had - Agdal",
            "color": "#dc2626",
            "stations": ["Bab El Had", "Hassan", "Agdal"],
            "status": "idle",
        }
    ]
    assert routing.calls == []


def test_line_is_rendered_on_first_request(client: TestClient, routing: FakeRoutingService) -> None:
    """Given an unrendered line, when requesting it, then it is rendered and returned as GeoJSON."""
    response = client.get("/lines/L1")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "ready"
    assert body["last_update"] is not None
    assert body["fallback_segments"] == 0
    assert body["bounds"] == [[33.9981, -6.8483], [34.0209, -6.8227]]
    ids = [f["id"] for f in body["geojson"]["features"]]
    assert ids == ["station-0", "station-1", "station-2", "line"]
    line = body["geojson"]["features"][-1]
    assert line["properties"]["color"] == "#dc2626"
    assert len(routing.calls) == 2


def test_line_is_not_rerendered_without_refresh(
    client: TestClient, routing: FakeRoutingService
) -> None:
    """Given a rendered line, when requesting again, then no new fetches happen until refresh=true."""
    client.get("/lines/L1")
    client.get("/lines/L1")
    assert len(routing.calls) == 2

    client.get("/lines/L1?refresh=true")

    assert len(routing.calls) == 4


def test_unknown_line_returns_404(client: TestClient) -> None:
    """Given no such line, when requesting it, then 404 is returned."""
    response = client.get("/lines/L42")

    assert response.status_code == 404
    assert response.json() == {"error": "Unknown line: L42"}


def test_failing_routing_reports_fallback_segments() -> None:
    """Given a routing service that is down, when requesting a line, then straight segments are counted."""
    states = _line_states(FailingRoutingService(RoutingTransportError("down")))

    with TestClient(create_app(states)) as client:
        body = client.get("/lines/L1").json()

    assert body["fallback_segments"] == 2
    line = body["geojson"]["features"][-1]
    assert line["geometry"]["coordinates"] == [
        [-6.8416, 34.0209],
        [-6.8227, 34.0181],
        [-6.8483, 33.9981],
    ]
