"""Protocol for render status notifications."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from line_route_map.domain.models.render_status import RenderStatus


class StatusListenerProtocol(Protocol):
    """Protocol for receiving loading/ready signals from a map view."""

    def update_status(self, status: "RenderStatus") -> None:
        """Receive the new render status.

        Args:
            status: The status the view moved to.
        """
        ...
