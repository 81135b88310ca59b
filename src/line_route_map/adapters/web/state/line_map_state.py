"""Line map state dataclass."""

from dataclasses import dataclass
from datetime import datetime

from line_route_map.domain.models.render_status import RenderStatus


@dataclass
class LineMapState:
    """Status of one line's map as seen by web clients."""

    status: RenderStatus = RenderStatus.IDLE
    last_update: datetime | None = None
