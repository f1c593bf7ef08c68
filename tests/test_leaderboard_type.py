import pytest

from standings.core.enums import LeaderboardKind, RankedMode
from standings.schemas.leaderboard import LeaderboardType


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("USER", LeaderboardType(kind=LeaderboardKind.USER)),
        ("TEAM", LeaderboardType(kind=LeaderboardKind.TEAM)),
        ("XP-ALL", LeaderboardType(kind=LeaderboardKind.XP_ALL)),
        ("XP-MODE-SZ", LeaderboardType(kind=LeaderboardKind.XP_MODE, mode=RankedMode.SPLAT_ZONES)),
        ("XP-MODE-CB", LeaderboardType(kind=LeaderboardKind.XP_MODE, mode=RankedMode.CLAM_BLITZ)),
        ("XP-WEAPON-40", LeaderboardType(kind=LeaderboardKind.XP_WEAPON, weapon_id=40)),
        ("XP-WEAPON-0", LeaderboardType(kind=LeaderboardKind.XP_WEAPON, weapon_id=0)),
    ],
)
def test_parse(raw: str, expected: LeaderboardType) -> None:
    assert LeaderboardType.parse(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "user",
        "XP",
        "XP-MODE",
        "XP-MODE-",
        "XP-MODE-TW",
        "XP-WEAPON",
        "XP-WEAPON-",
        "XP-WEAPON--1",
        "XP-WEAPON-1.5",
        "XP-WEAPON-abc",
        "XP-TEAM-1",
        "XP-WEAPON-" + "1" * 5000,
    ],
)
def test_parse_falls_back_to_user(raw: str | None) -> None:
    assert LeaderboardType.parse(raw) == LeaderboardType(kind=LeaderboardKind.USER)


def test_str_round_trips() -> None:
    for leaderboard_type in LeaderboardType.all([40, 1010]):
        assert LeaderboardType.parse(str(leaderboard_type)) == leaderboard_type


def test_all_lists_types_in_display_order() -> None:
    tags = [str(t) for t in LeaderboardType.all([1010, 40, 40])]
    assert tags == [
        "USER",
        "TEAM",
        "XP-ALL",
        "XP-MODE-SZ",
        "XP-MODE-TC",
        "XP-MODE-RM",
        "XP-MODE-CB",
        "XP-WEAPON-40",
        "XP-WEAPON-1010",
    ]
