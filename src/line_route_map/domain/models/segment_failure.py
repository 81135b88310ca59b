"""Segment failure domain model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class SegmentFailure(BaseModel):
    """Why a segment fell back to a straight line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["transport", "malformed"]
    reason: str
    status_code: int | None = None
