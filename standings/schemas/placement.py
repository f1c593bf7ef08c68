from collections.abc import Mapping
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

type PeakResult = Mapping[str, float]
"""Highest observed power per category. Categories without placements are absent."""


class PlacementRecord(BaseModel):
    """One historical competitive result of a subject."""

    model_config = ConfigDict(frozen=True)

    subject_id: int | str
    category: str
    power_value: float = Field(ge=0, allow_inf_nan=False)
    timestamp: datetime | None = None
    """Audit only, never used for ranking."""


class PlayerPeaks(BaseModel):
    player_id: int
    peaks: dict[str, float]
