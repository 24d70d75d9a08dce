"""
Tournament Records

Immutable value types the analytics functions consume and produce.
Rows coming from the database are turned into these by
analytics.normalizer; nothing downstream sees a missing field.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


FREE_AGENT = "Free Agent"
UNKNOWN_POSITION = "Unknown"
UNKNOWN_TEAM = "Unknown Team"


@dataclass(frozen=True)
class Team:
    """A tournament team as stored by the data source."""

    id: str
    name: str = UNKNOWN_TEAM
    logo_url: Optional[str] = None
    region: Optional[str] = None
    current_rp: Optional[float] = None  # ranking points, never computed here
    elo_rating: Optional[float] = None
    global_rank: Optional[int] = None
    leaderboard_tier: Optional[str] = None
    roster_size: int = 0


@dataclass(frozen=True)
class Match:
    """
    A scheduled or played match between two teams.

    Either side may be None (TBD). Scores are both set or both None;
    None means the match has not been played.
    """

    id: str
    team_a_id: Optional[str] = None
    team_b_id: Optional[str] = None
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    played_at: Optional[datetime] = None
    team_a_name: Optional[str] = None
    team_b_name: Optional[str] = None
    team_a_logo_url: Optional[str] = None
    team_b_logo_url: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.score_a is not None and self.score_b is not None

    def involves(self, team_id: str) -> bool:
        return team_id in (self.team_a_id, self.team_b_id)


@dataclass(frozen=True)
class PlayerStatLine:
    """
    Per-game averages for one player.

    Shooting percentages are fractions in [0, 1]; scaling to 0-100 is a
    display concern.
    """

    player_id: str
    gamertag: str = ""
    position: str = UNKNOWN_POSITION
    team_id: str = ""
    team_name: str = FREE_AGENT
    team_logo_url: Optional[str] = None
    points_per_game: float = 0.0
    assists_per_game: float = 0.0
    rebounds_per_game: float = 0.0
    steals_per_game: float = 0.0
    blocks_per_game: float = 0.0
    fouls_per_game: float = 0.0
    field_goal_percentage: float = 0.0
    three_point_percentage: float = 0.0
    free_throw_percentage: float = 0.0
    games_played: int = 0
    is_rookie: bool = False
    overall_rating: float = 0.0


@dataclass(frozen=True)
class AwardRating(PlayerStatLine):
    """A stat line carrying the rating of the award race it was ranked in."""

    offensive_rating: Optional[float] = None
    defensive_rating: Optional[float] = None
    rookie_rating: Optional[float] = None


@dataclass(frozen=True)
class TeamRecord:
    """Win/loss and scoring totals over a team's completed matches."""

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    points_for: int = 0
    points_against: int = 0
    draws: int = 0

    @property
    def points_differential(self) -> int:
        return self.points_for - self.points_against


@dataclass(frozen=True)
class TeamStanding:
    """A team paired with its record, the unit the standings are sorted in."""

    team: Team
    record: TeamRecord

    @property
    def wins(self) -> int:
        return self.record.wins

    @property
    def points_differential(self) -> int:
        return self.record.points_differential


@dataclass(frozen=True)
class LeaderboardPlayer:
    """A row of the players leaderboard."""

    id: str
    gamertag: str = ""
    position: Optional[str] = None
    team_names: tuple[str, ...] = ()
    player_rank_score: float = 0.0
    games_played: int = 0
    points_per_game: float = 0.0
    rebounds_per_game: float = 0.0
    assists_per_game: float = 0.0
    steals_per_game: float = 0.0
    blocks_per_game: float = 0.0
    field_goal_percentage: float = 0.0
    three_point_percentage: float = 0.0
    free_throw_percentage: float = 0.0

    @property
    def primary_team_name(self) -> str:
        return self.team_names[0] if self.team_names else ""
