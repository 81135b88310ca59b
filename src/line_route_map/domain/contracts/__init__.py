"""Contracts (protocols) shared between application and adapters."""

from line_route_map.domain.contracts.status_listener import StatusListenerProtocol

__all__ = ["StatusListenerProtocol"]
