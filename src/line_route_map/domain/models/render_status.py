"""Render status domain model."""

from enum import Enum


class RenderStatus(str, Enum):
    """Loading state signalled to the UI while a path is being built."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
