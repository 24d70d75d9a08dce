"""
Schemas for the players leaderboard.
"""

from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse


class LeaderboardPlayerItem(BaseModel):
    """Individual player in the leaderboard."""

    id: str
    gamertag: str
    position: Optional[str] = None
    team_names: list[str] = Field(default_factory=list)
    player_rank_score: float = 0.0
    games_played: int = 0
    points_per_game: float = 0.0
    rebounds_per_game: float = 0.0
    assists_per_game: float = 0.0
    steals_per_game: float = 0.0
    blocks_per_game: float = 0.0
    field_goal_percentage: float = Field(0.0, description="Fraction (0-1)")
    three_point_percentage: float = Field(0.0, description="Fraction (0-1)")
    free_throw_percentage: float = Field(0.0, description="Fraction (0-1)")


class PlayersListData(BaseModel):
    """One page of the filtered, sorted leaderboard."""

    players: list[LeaderboardPlayerItem] = Field(default_factory=list)
    total: int = Field(..., description="Players matching the filters")
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PlayersListResp(BaseResponse):
    """Response for GET /v1/players."""

    data: Optional[PlayersListData] = None


class PlayerTeam(BaseModel):
    id: str
    name: str
    logo_url: Optional[str] = None


class PlayerProfile(BaseModel):
    """One player's teams and per-game averages. Zeroed when no games are on record."""

    id: str
    gamertag: str
    position: str
    is_rookie: bool = False
    player_rank_score: float = 0.0
    teams: list[PlayerTeam] = Field(default_factory=list)
    games_played: int = 0
    points_per_game: float = 0.0
    assists_per_game: float = 0.0
    rebounds_per_game: float = 0.0
    steals_per_game: float = 0.0
    blocks_per_game: float = 0.0
    fouls_per_game: float = 0.0
    field_goal_percentage: float = Field(0.0, description="Fraction (0-1)")
    three_point_percentage: float = Field(0.0, description="Fraction (0-1)")
    free_throw_percentage: float = Field(0.0, description="Fraction (0-1)")
    overall_rating: float = 0.0


class PlayerProfileResp(BaseResponse):
    """Response for GET /v1/players/{player_id}."""

    data: Optional[PlayerProfile] = None
