"""Domain errors for route rendering."""


class RoutingError(Exception):
    """Base error for a failed point-to-point routing request."""


class RoutingTransportError(RoutingError):
    """The routing service could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedRouteError(RoutingError):
    """The routing service answered, but the geometry payload is unusable."""


class InvalidStationListError(ValueError):
    """Fewer than two stations were supplied for rendering."""


class StaleRenderError(RuntimeError):
    """A render was superseded by a newer one before it finished."""


class ViewDisposedError(RuntimeError):
    """A map view was used after dispose()."""
