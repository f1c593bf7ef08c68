from typing import Annotated

from fastapi import APIRouter, Depends, Query

from standings.core.config import settings
from standings.schemas.common import APIResponse
from standings.schemas.leaderboard import (
    Leaderboard,
    LeaderboardType,
    RankedEntry,
    RankRequest,
)
from standings.services.leaderboard import LeaderboardService
from standings.services.ranking import rank

router = APIRouter(prefix="/leaderboards", tags=["leaderboards"])


@router.get("/")
async def get_leaderboard(
    service: Annotated[LeaderboardService, Depends()],
    leaderboard_type: Annotated[str | None, Query(alias="type")] = None,
    limit: Annotated[int, Query(ge=1, le=settings.max_leaderboard_limit)] = (
        settings.default_leaderboard_limit
    ),
) -> APIResponse[Leaderboard]:
    """
    Get a ranked leaderboard.

    `type` is one of `USER`, `TEAM`, `XP-ALL`, `XP-MODE-<mode>` or
    `XP-WEAPON-<weapon id>`. Unknown values fall back to `USER`.
    """
    leaderboard = service.get_leaderboard(LeaderboardType.parse(leaderboard_type), limit=limit)
    return APIResponse(data=leaderboard)


@router.get("/types")
async def get_leaderboard_types(
    service: Annotated[LeaderboardService, Depends()],
) -> APIResponse[list[str]]:
    return APIResponse(data=service.get_leaderboard_types())


@router.post("/rank")
async def rank_entries(entries: RankRequest) -> APIResponse[list[RankedEntry]]:
    """Rank arbitrary entries with standard competition ranking."""
    return APIResponse(data=rank(entries.root))
