"""
Stat Leaders

Top players per individual stat category among players with enough
games on record.
"""

from dataclasses import dataclass
from typing import Iterable

from analytics.awards import MIN_GAMES_FOR_AWARDS
from analytics.records import PlayerStatLine


STAT_LEADER_LIMIT = 5

# category -> PlayerStatLine field
STAT_LEADER_CATEGORIES: dict[str, str] = {
    "points": "points_per_game",
    "assists": "assists_per_game",
    "rebounds": "rebounds_per_game",
    "steals": "steals_per_game",
    "field_goal_percentage": "field_goal_percentage",
    "three_point_percentage": "three_point_percentage",
}


@dataclass(frozen=True)
class StatLeader:
    player_id: str
    gamertag: str
    team_name: str
    position: str
    games_played: int
    value: float
    is_percentage: bool = False


def compute_stat_leaders(
    players: Iterable[PlayerStatLine],
    min_games: int = MIN_GAMES_FOR_AWARDS,
    limit: int = STAT_LEADER_LIMIT,
) -> dict[str, list[StatLeader]]:
    """
    Leaders for each category in STAT_LEADER_CATEGORIES, highest first.

    Ties keep input order. Percentages stay fractions.
    """
    qualified = [player for player in players if player.games_played >= min_games]

    leaders: dict[str, list[StatLeader]] = {}
    for category, field in STAT_LEADER_CATEGORIES.items():
        ordered = sorted(qualified, key=lambda player: getattr(player, field), reverse=True)
        leaders[category] = [
            StatLeader(
                player_id=player.player_id,
                gamertag=player.gamertag,
                team_name=player.team_name,
                position=player.position,
                games_played=player.games_played,
                value=getattr(player, field),
                is_percentage=field.endswith("_percentage"),
            )
            for player in ordered[:max(limit, 0)]
        ]
    return leaders
