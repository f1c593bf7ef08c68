from fastapi import APIRouter

from standings.schemas.common import APIResponse
from standings.schemas.placement import PlacementRecord
from standings.services.ranking import compute_peaks

router = APIRouter(prefix="/peaks", tags=["peaks"])


@router.post("/")
async def aggregate_peaks(records: list[PlacementRecord]) -> APIResponse[dict[str, float]]:
    """Compute the peak power per category of one subject's placements."""
    return APIResponse(data=dict(compute_peaks(records)))
