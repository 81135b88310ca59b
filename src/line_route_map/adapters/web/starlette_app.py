"""Starlette web adapter serving rendered line maps as JSON."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from line_route_map.adapters.web.rate_limit_middleware import RateLimitMiddleware
from line_route_map.domain.models.line_style import LineStyle

if TYPE_CHECKING:
    import uvicorn
    from starlette.requests import Request

    from line_route_map.adapters.config.app_config import AppConfig
    from line_route_map.adapters.web.geojson_map_display import GeoJsonMapDisplay
    from line_route_map.adapters.web.state import LineMapState
    from line_route_map.application.services.line_map_view import LineMapView
    from line_route_map.domain.models.line_configuration import LineConfiguration

logger = logging.getLogger(__name__)


@dataclass
class LineRouteState:
    """Everything the server keeps for one configured line."""

    line: LineConfiguration
    view: LineMapView
    display: GeoJsonMapDisplay
    state: LineMapState
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def ensure_rendered(self, refresh: bool = False) -> None:
        """Render the line unless a rendered path is already drawn."""
        async with self.lock:
            if self.view.path is not None and not refresh:
                return
            await self.view.update(self.line.stations, LineStyle(color=self.line.color))

    def to_payload(self) -> dict[str, Any]:
        """Serialize the line's current map for clients."""
        path = self.view.path
        bounds = self.view.bounds
        return {
            "name": self.line.name,
            "title": self.line.title or self.line.name,
            "status": self.state.status.value,
            "last_update": self.state.last_update.isoformat() if self.state.last_update else None,
            "bounds": bounds.as_list() if bounds else None,
            "distance_km": round(path.distance_km, 3) if path else None,
            "estimated_duration_minutes": path.estimated_duration_minutes if path else None,
            "fallback_segments": path.fallback_count if path else None,
            "geojson": self.display.to_feature_collection(),
        }


def create_app(
    line_states: dict[str, LineRouteState],
    rate_limit_per_minute: int = 100,
) -> Starlette:
    """Build the Starlette application for the given line states."""

    async def health(_request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    async def list_lines(_request: Request) -> JSONResponse:
        return JSONResponse(
            [
                {
                    "name": name,
                    "title": route_state.line.title or name,
                    "color": route_state.line.color,
                    "stations": [s.name for s in route_state.line.stations],
                    "status": route_state.state.status.value,
                }
                for name, route_state in line_states.items()
            ]
        )

    async def get_line(request: Request) -> JSONResponse:
        name = request.path_params["name"]
        route_state = line_states.get(name)
        if route_state is None:
            return JSONResponse({"error": f"Unknown line: {name}"}, status_code=404)

        refresh = request.query_params.get("refresh", "").lower() == "true"
        await route_state.ensure_rendered(refresh=refresh)
        return JSONResponse(route_state.to_payload())

    return Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Route("/lines", list_lines, methods=["GET"]),
            Route("/lines/{name}", get_line, methods=["GET"]),
        ],
        middleware=[
            Middleware(RateLimitMiddleware, requests_per_minute=rate_limit_per_minute),
        ],
    )


class LineMapWebAdapter:
    """Runs the line map API under uvicorn."""

    def __init__(
        self,
        line_states: dict[str, LineRouteState],
        config: AppConfig,
    ) -> None:
        """Initialize the adapter.

        Args:
            line_states: Initialized views keyed by line name.
            config: Application configuration.
        """
        self.config = config
        self.line_states = line_states
        self._server: uvicorn.Server | None = None

    async def start(self) -> None:
        """Start the web server and block until it exits."""
        import uvicorn

        app = create_app(self.line_states, self.config.rate_limit_per_minute)
        logger.info(
            f"Serving {len(self.line_states)} line(s) on http://{self.config.host}:{self.config.port}"
        )
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        await self._server.serve()

    async def stop(self) -> None:
        """Dispose every view and ask the server to exit."""
        for route_state in self.line_states.values():
            route_state.view.dispose()
        if self._server:
            self._server.should_exit = True
