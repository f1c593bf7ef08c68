from collections.abc import Sequence
from datetime import UTC, datetime
from functools import lru_cache
from pathlib import Path
from typing import Protocol, Self

from loguru import logger
from pydantic import ValidationError

from standings.core.config import settings
from standings.core.enums import RankedMode
from standings.schemas.leaderboard import LeaderboardEntry
from standings.schemas.placement import PlacementRecord
from standings.schemas.snapshot import Snapshot, XPPlacementRow


class SourceError(Exception):
    """Raised when the leaderboard snapshot cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load leaderboard snapshot {path}: {reason}")
        self.path = path
        self.reason = reason


class LeaderboardSource(Protocol):
    def user_entries(self) -> list[LeaderboardEntry]: ...

    def team_entries(self) -> list[LeaderboardEntry]: ...

    def xp_entries(
        self, *, mode: RankedMode | None = None, weapon_id: int | None = None
    ) -> list[LeaderboardEntry]: ...

    def player_placements(self, player_id: int) -> list[PlacementRecord]: ...

    def weapon_ids(self) -> list[int]: ...


def _best_per_player(rows: Sequence[XPPlacementRow]) -> list[XPPlacementRow]:
    """Keep each player's highest placement, the earlier one on equal power."""
    best: dict[int, XPPlacementRow] = {}
    for row in rows:
        current = best.get(row.player_id)
        if (
            current is None
            or row.power > current.power
            or (row.power == current.power and row.achieved_at < current.achieved_at)
        ):
            best[row.player_id] = row
    return list(best.values())


class JSONLeaderboardSource:
    """Serves pre-computed leaderboard data from a JSON snapshot held in memory."""

    def __init__(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot

    @classmethod
    def from_path(cls, path: Path) -> Self:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceError(path, str(e)) from e

        try:
            snapshot = Snapshot.model_validate_json(raw)
        except ValidationError as e:
            raise SourceError(path, f"{e.error_count()} validation error(s)") from e

        logger.info(
            f"Loaded snapshot {path}: {len(snapshot.users)} users, "
            f"{len(snapshot.teams)} teams, {len(snapshot.xp_placements)} XP placements"
        )
        return cls(snapshot)

    def user_entries(self) -> list[LeaderboardEntry]:
        return [
            LeaderboardEntry(
                entry_id=row.entry_id,
                subject_ref=row.model_dump(exclude={"entry_id", "power"}),
                power=row.power,
            )
            for row in self.snapshot.users
        ]

    def team_entries(self) -> list[LeaderboardEntry]:
        return [
            LeaderboardEntry(
                entry_id=row.entry_id,
                subject_ref=row.model_dump(exclude={"entry_id", "power"}),
                power=row.power,
            )
            for row in self.snapshot.teams
        ]

    def xp_entries(
        self, *, mode: RankedMode | None = None, weapon_id: int | None = None
    ) -> list[LeaderboardEntry]:
        rows = [
            row
            for row in self.snapshot.xp_placements
            if (mode is None or row.mode == mode)
            and (weapon_id is None or row.weapon_spl_id == weapon_id)
        ]

        return [
            LeaderboardEntry(
                entry_id=row.placement_id,
                subject_ref=row.model_dump(
                    mode="json", exclude={"placement_id", "power", "year", "month"}
                ),
                power=row.power,
                tiebreak_key=row.achieved_at,
            )
            for row in _best_per_player(rows)
        ]

    def player_placements(self, player_id: int) -> list[PlacementRecord]:
        return [
            PlacementRecord(
                subject_id=row.player_id,
                category=row.mode.value,
                power_value=row.power,
                timestamp=datetime(row.year, row.month, 1, tzinfo=UTC),
            )
            for row in self.snapshot.xp_placements
            if row.player_id == player_id
        ]

    def weapon_ids(self) -> list[int]:
        return sorted({row.weapon_spl_id for row in self.snapshot.xp_placements})


@lru_cache
def get_source() -> LeaderboardSource:
    return JSONLeaderboardSource.from_path(settings.data_path)
