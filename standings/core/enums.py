from enum import StrEnum


class RankedMode(StrEnum):
    SPLAT_ZONES = "SZ"
    TOWER_CONTROL = "TC"
    RAINMAKER = "RM"
    CLAM_BLITZ = "CB"


class LeaderboardKind(StrEnum):
    USER = "USER"
    TEAM = "TEAM"
    XP_ALL = "XP-ALL"
    XP_MODE = "XP-MODE"
    XP_WEAPON = "XP-WEAPON"
