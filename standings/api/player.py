from typing import Annotated

from fastapi import APIRouter, Depends

from standings.schemas.common import APIResponse
from standings.schemas.placement import PlayerPeaks
from standings.services.peak import PeakService

router = APIRouter(prefix="/players", tags=["players"])


@router.get("/{player_id}/peaks")
async def get_player_peaks(
    player_id: int, service: Annotated[PeakService, Depends()]
) -> APIResponse[PlayerPeaks]:
    """Get a player's peak X Power per ranked mode. Modes without placements are omitted."""
    return APIResponse(data=service.get_player_peaks(player_id))
