"""
Schemas for team and standings API responses.
"""

from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse
from schemas.matches import MatchItem


class TeamRecordItem(BaseModel):
    games_played: int = 0
    wins: int = 0
    losses: int = Field(0, description="Includes draws")
    draws: int = 0
    points_for: int = 0
    points_against: int = 0
    points_differential: int = 0
    win_percentage: float = Field(0.0, description="Fraction of games won (0-1)")


class TeamStandingItem(BaseModel):
    """A team row in the standings."""

    rank: Optional[int] = Field(None, description="Standing by wins, then point differential (1-based)")
    id: str
    name: str
    logo_url: Optional[str] = None
    region: Optional[str] = None
    current_rp: Optional[float] = None
    elo_rating: Optional[float] = None
    global_rank: Optional[int] = None
    leaderboard_tier: Optional[str] = None
    roster_size: int = 0
    record: TeamRecordItem


class StandingsResp(BaseResponse):
    """Response for GET /v1/teams."""

    data: list[TeamStandingItem] = Field(default_factory=list)


class RosterPlayer(BaseModel):
    id: str
    gamertag: str
    position: Optional[str] = None
    is_rookie: bool = False
    is_captain: bool = False


class TeamMatchItem(MatchItem):
    """A match from one team's point of view."""

    result: Optional[str] = Field(None, description="win | loss | draw, null when not played")


class TeamDetail(BaseModel):
    team: TeamStandingItem
    roster: list[RosterPlayer] = Field(default_factory=list)
    matches: list[TeamMatchItem] = Field(default_factory=list)


class TeamDetailResp(BaseResponse):
    """Response for GET /v1/teams/{team_id}."""

    data: Optional[TeamDetail] = None
