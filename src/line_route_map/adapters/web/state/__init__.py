"""State management for the web adapter."""

from line_route_map.adapters.web.state.line_map_state import LineMapState
from line_route_map.adapters.web.state.status_updater import StatusUpdater

__all__ = ["LineMapState", "StatusUpdater"]
