from typing import Annotated

from fastapi import Depends
from loguru import logger

from standings.core.enums import LeaderboardKind
from standings.core.source import LeaderboardSource, get_source
from standings.schemas.leaderboard import Leaderboard, LeaderboardEntry, LeaderboardType
from standings.services.ranking import rank


class LeaderboardService:
    def __init__(self, source: Annotated[LeaderboardSource, Depends(get_source)]) -> None:
        self.source = source

    def _entries(self, leaderboard_type: LeaderboardType) -> list[LeaderboardEntry]:
        match leaderboard_type.kind:
            case LeaderboardKind.USER:
                return self.source.user_entries()
            case LeaderboardKind.TEAM:
                return self.source.team_entries()
            case LeaderboardKind.XP_ALL:
                return self.source.xp_entries()
            case LeaderboardKind.XP_MODE:
                return self.source.xp_entries(mode=leaderboard_type.mode)
            case LeaderboardKind.XP_WEAPON:
                return self.source.xp_entries(weapon_id=leaderboard_type.weapon_id)

    def get_leaderboard(
        self, leaderboard_type: LeaderboardType, limit: int | None = None
    ) -> Leaderboard:
        """Rank every entry of the type, then cut the result to ``limit`` rows.

        Ranks are assigned over the full list so the cut never changes them.
        A weapon without placements falls back to the user leaderboard.
        """
        if (
            leaderboard_type.kind == LeaderboardKind.XP_WEAPON
            and leaderboard_type.weapon_id not in self.source.weapon_ids()
        ):
            leaderboard_type = LeaderboardType()

        ranked = rank(self._entries(leaderboard_type))
        logger.debug(f"Ranked {len(ranked)} entries for leaderboard {leaderboard_type}")

        return Leaderboard(
            type=str(leaderboard_type),
            entries=ranked if limit is None else ranked[:limit],
            total_entries=len(ranked),
        )

    def get_leaderboard_types(self) -> list[str]:
        return [str(t) for t in LeaderboardType.all(self.source.weapon_ids())]
