from typing import Annotated

from fastapi import Depends
from loguru import logger

from standings.core.source import LeaderboardSource, get_source
from standings.schemas.placement import PlayerPeaks
from standings.services.ranking import compute_peaks


class PeakService:
    def __init__(self, source: Annotated[LeaderboardSource, Depends(get_source)]) -> None:
        self.source = source

    def get_player_peaks(self, player_id: int) -> PlayerPeaks:
        """Get a player's peak X Power in every ranked mode they placed in."""
        placements = self.source.player_placements(player_id)
        peaks = compute_peaks(placements)
        logger.debug(f"Player {player_id}: {len(placements)} placements, peaks {dict(peaks)}")
        return PlayerPeaks(player_id=player_id, peaks=dict(peaks))
