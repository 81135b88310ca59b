"""Shared fixtures for line route map tests."""

import asyncio
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from line_route_map.adapters.api_rate_limiter import ApiRateLimiter
from line_route_map.domain.models import LatLng, RoutingError, Station


class FakeRoutingService:
    """Routing service double that records calls and replays scripted answers.

    Answers are keyed by (start, end). A missing key yields the straight pair.
    An answer may be a point list or an exception instance to raise.
    """

    def __init__(self, answers: dict[tuple[LatLng, LatLng], object] | None = None) -> None:
        self.answers = answers or {}
        self.calls: list[tuple[LatLng, LatLng]] = []
        self.gate: asyncio.Event | None = None

    async def fetch_route(self, start: LatLng, end: LatLng) -> list[LatLng]:
        self.calls.append((start, end))
        if self.gate is not None:
            await self.gate.wait()
        answer = self.answers.get((start, end), [start, end])
        if isinstance(answer, Exception):
            raise answer
        return list(answer)  # type: ignore[call-overload]


class FailingRoutingService(FakeRoutingService):
    """Routing service double whose every request fails with the given error."""

    def __init__(self, error: RoutingError) -> None:
        super().__init__()
        self.error = error

    async def fetch_route(self, start: LatLng, end: LatLng) -> list[LatLng]:
        self.calls.append((start, end))
        raise self.error


@pytest.fixture
def three_stations() -> list[Station]:
    """Stations A(0,0), B(0,1), C(0,2)."""
    return [
        Station(name="A", latitude=0.0, longitude=0.0),
        Station(name="B", latitude=0.0, longitude=1.0),
        Station(name="C", latitude=0.0, longitude=2.0),
    ]


@pytest.fixture
def rabat_stations() -> list[Station]:
    """A short line in Rabat."""
    return [
        Station(name="Bab El Had", latitude=34.0209, longitude=-6.8416),
        Station(name="Hassan", latitude=34.0181, longitude=-6.8227),
        Station(name="Agdal", latitude=33.9981, longitude=-6.8483),
    ]


@pytest.fixture
def fake_routing_service() -> FakeRoutingService:
    """A routing service that answers every request with the straight pair."""
    return FakeRoutingService()


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """Factory for an aiohttp-like session whose get() yields a canned response."""

    def _make(
        status: int = 200,
        payload: object = None,
        json_error: Exception | None = None,
        get_error: Exception | None = None,
        text: str = "",
        text_error: Exception | None = None,
    ) -> MagicMock:
        response = MagicMock()
        response.status = status
        response.json = AsyncMock(return_value=payload, side_effect=json_error)
        response.text = AsyncMock(return_value=text, side_effect=text_error)

        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        context.__aexit__ = AsyncMock(return_value=False)

        session = MagicMock()
        session.get = MagicMock(return_value=context, side_effect=get_error)
        return session

    return _make


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Give each test a fresh rate limiter registry."""
    ApiRateLimiter.reset()
