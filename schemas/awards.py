"""
Schemas for award races and stat leaders.
"""

from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse


class AwardCandidate(BaseModel):
    """A player in an award race. Only the rating of that race is set."""

    player_id: str
    gamertag: str
    position: str
    team_id: str
    team_name: str
    team_logo_url: Optional[str] = None
    points_per_game: float
    assists_per_game: float
    rebounds_per_game: float
    steals_per_game: float
    blocks_per_game: float
    fouls_per_game: float
    field_goal_percentage: float
    three_point_percentage: float
    free_throw_percentage: float
    games_played: int
    is_rookie: bool
    overall_rating: float
    offensive_rating: Optional[float] = None
    defensive_rating: Optional[float] = None
    rookie_rating: Optional[float] = None


class AwardsData(BaseModel):
    omvp: list[AwardCandidate] = Field(default_factory=list)
    dmvp: list[AwardCandidate] = Field(default_factory=list)
    rookie: list[AwardCandidate] = Field(default_factory=list)


class AwardsResp(BaseResponse):
    """Response for GET /v1/awards."""

    data: AwardsData = Field(default_factory=AwardsData)


class StatLeaderItem(BaseModel):
    player_id: str
    gamertag: str
    team_name: str
    position: str
    games_played: int
    value: float
    is_percentage: bool = False


class StatLeadersResp(BaseResponse):
    """Response for GET /v1/leaders, keyed by stat category."""

    data: dict[str, list[StatLeaderItem]] = Field(default_factory=dict)
