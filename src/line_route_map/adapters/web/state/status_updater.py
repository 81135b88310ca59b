"""Updater for line map state."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from line_route_map.adapters.web.state.line_map_state import (
    LineMapState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from line_route_map.domain.contracts.status_listener import StatusListenerProtocol
from line_route_map.domain.models.render_status import RenderStatus

logger = logging.getLogger(__name__)


class StatusUpdater(StatusListenerProtocol):
    """Records render status changes on a LineMapState."""

    def __init__(self, line_map_state: LineMapState) -> None:
        """Initialize the status updater.

        Args:
            line_map_state: The LineMapState instance to update.
        """
        self.line_map_state = line_map_state

    def update_status(self, status: RenderStatus) -> None:
        """Store the status; a READY status also stamps the update time."""
        self.line_map_state.status = status
        if status is RenderStatus.READY:
            self.line_map_state.last_update = datetime.now(UTC)
        logger.debug(f"Updated render status: {status.value}")
