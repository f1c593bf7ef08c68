from collections.abc import Iterable
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from standings.core.enums import LeaderboardKind, RankedMode

type TiebreakKey = int | float | str


class LeaderboardEntry(BaseModel):
    """Leaderboard candidate row before ranking."""

    model_config = ConfigDict(frozen=True)

    entry_id: int | str
    subject_ref: Any = None
    """Player, team or weapon payload. Passed through untouched."""
    power: float = Field(ge=0, allow_inf_nan=False)
    tiebreak_key: TiebreakKey | None = None
    """Compared ascending when powers are equal. Keys of one leaderboard must share a type."""


class RankedEntry(LeaderboardEntry):
    placement_rank: int = Field(ge=1)


class RankRequest(RootModel[list[LeaderboardEntry]]):
    """Entries posted for ranking. Their tie-break keys must all be numbers or all strings."""

    @model_validator(mode="after")
    def check_tiebreak_key_types(self) -> Self:
        key_is_str = {
            isinstance(entry.tiebreak_key, str)
            for entry in self.root
            if entry.tiebreak_key is not None
        }
        if len(key_is_str) > 1:
            msg = "tiebreak_key values must be all numbers or all strings"
            raise ValueError(msg)
        return self


class LeaderboardType(BaseModel):
    """Leaderboard selected by the ``type`` query parameter, e.g. ``XP-MODE-SZ``."""

    model_config = ConfigDict(frozen=True)

    kind: LeaderboardKind = LeaderboardKind.USER
    mode: RankedMode | None = None
    weapon_id: int | None = None

    def __str__(self) -> str:
        match self.kind:
            case LeaderboardKind.XP_MODE:
                return f"{self.kind}-{self.mode}"
            case LeaderboardKind.XP_WEAPON:
                return f"{self.kind}-{self.weapon_id}"
            case _:
                return str(self.kind)

    @classmethod
    def parse(cls, raw: str | None) -> Self:
        """Parse a type tag, falling back to the user leaderboard for anything unknown."""
        if raw is None:
            return cls()

        if raw in (LeaderboardKind.USER, LeaderboardKind.TEAM, LeaderboardKind.XP_ALL):
            return cls(kind=LeaderboardKind(raw))

        prefix, _, arg = raw.rpartition("-")
        match prefix:
            case LeaderboardKind.XP_MODE if arg in RankedMode:
                return cls(kind=LeaderboardKind.XP_MODE, mode=RankedMode(arg))
            case LeaderboardKind.XP_WEAPON if arg.isascii() and arg.isdigit():
                try:
                    weapon_id = int(arg)
                except ValueError:
                    # Longer than the interpreter's int conversion limit
                    return cls()
                return cls(kind=LeaderboardKind.XP_WEAPON, weapon_id=weapon_id)
            case _:
                return cls()

    @classmethod
    def all(cls, weapon_ids: Iterable[int]) -> list[Self]:
        """Every selectable type in display order: SP boards, then XP boards."""
        types = [
            cls(kind=LeaderboardKind.USER),
            cls(kind=LeaderboardKind.TEAM),
            cls(kind=LeaderboardKind.XP_ALL),
        ]
        types.extend(cls(kind=LeaderboardKind.XP_MODE, mode=mode) for mode in RankedMode)
        types.extend(
            cls(kind=LeaderboardKind.XP_WEAPON, weapon_id=weapon_id)
            for weapon_id in sorted(set(weapon_ids))
        )
        return types


class Leaderboard(BaseModel):
    """Ranked leaderboard of one type."""

    type: str
    entries: list[RankedEntry]
    total_entries: int = Field(description="Number of ranked entries before applying the limit")
