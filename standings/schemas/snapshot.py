from pydantic import BaseModel, Field

from standings.core.enums import RankedMode


class TeamInfo(BaseModel):
    name: str
    custom_url: str
    avatar_img_url: str | None = None


class TeamMember(BaseModel):
    id: int
    discord_name: str


class UserSPRow(BaseModel):
    """Pre-computed seasonal power of one user."""

    entry_id: int
    user_id: int
    discord_name: str
    discord_discriminator: str | None = None
    discord_avatar: str | None = None
    custom_url: str | None = None
    power: float = Field(ge=0, allow_inf_nan=False)


class TeamSPRow(BaseModel):
    """Pre-computed seasonal power of one tournament team."""

    entry_id: int
    team: TeamInfo | None = None
    members: list[TeamMember] = Field(default_factory=list)
    power: float = Field(ge=0, allow_inf_nan=False)


class XPPlacementRow(BaseModel):
    """One Top 500 placement of a player in a ranked mode."""

    placement_id: int
    player_id: int
    name: str
    discord_id: str | None = None
    weapon_spl_id: int = Field(ge=0)
    mode: RankedMode
    power: float = Field(ge=0, allow_inf_nan=False)
    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)

    @property
    def achieved_at(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


class Snapshot(BaseModel):
    users: list[UserSPRow] = Field(default_factory=list)
    teams: list[TeamSPRow] = Field(default_factory=list)
    xp_placements: list[XPPlacementRow] = Field(default_factory=list)
