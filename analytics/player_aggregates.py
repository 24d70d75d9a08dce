"""
Player Game Aggregator

Collapses a player's per-game box score rows (one row per game played)
into the per-game averages the award and leaderboard views rank on.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from analytics.normalizer import normalize_stat_line, to_float
from analytics.records import PlayerStatLine


# Per-game "overall" contribution
OVERALL_RATING_WEIGHTS: dict[str, float] = {
    "points": 1.0,
    "assists": 1.5,
    "rebounds": 1.2,
    "steals": 2.0,
    "blocks": 2.0,
    "turnovers": -1.5,
}

_COUNTING_STATS: dict[str, str] = {
    "points": "points_per_game",
    "assists": "assists_per_game",
    "rebounds": "rebounds_per_game",
    "steals": "steals_per_game",
    "blocks": "blocks_per_game",
    "fouls": "fouls_per_game",
}

# (made column, attempted column) -> average field
_SHOOTING_STATS: dict[tuple[str, str], str] = {
    ("fgm", "fga"): "field_goal_percentage",
    ("three_points_made", "three_points_attempted"): "three_point_percentage",
    ("ftm", "fta"): "free_throw_percentage",
}


def shooting_fraction(made: Any, attempted: Any) -> float:
    """made / attempted as a fraction; no attempts gives 0.0."""
    attempts = to_float(attempted)
    if attempts <= 0:
        return 0.0
    return to_float(made) / attempts


def game_overall_rating(row: Mapping) -> float:
    return sum(to_float(row.get(stat)) * weight for stat, weight in OVERALL_RATING_WEIGHTS.items())


def group_rows_by_player(rows: Iterable[Mapping]) -> dict[str, list[Mapping]]:
    """Bucket stat rows by player_id, keeping first-seen player order."""
    grouped: dict[str, list[Mapping]] = {}
    for row in rows:
        player_id = row.get("player_id")
        if player_id is None:
            continue
        grouped.setdefault(str(player_id), []).append(row)
    return grouped


def aggregate_player_games(
    player_row: Mapping,
    game_rows: Sequence[Mapping],
) -> Optional[PlayerStatLine]:
    """
    Average a player's game rows into a PlayerStatLine.

    Shooting percentages are averaged per game over all games played; a
    game with no attempts contributes 0 to the average.

    Args:
        player_row: Player row (id, gamertag, position, is_rookie, team relation)
        game_rows: The player's stat rows, one per game

    Returns:
        The stat line, or None if the player has no games on record.
    """
    games = len(game_rows)
    if games == 0:
        return None

    averages: dict[str, float] = {}
    for column, field in _COUNTING_STATS.items():
        averages[field] = sum(to_float(row.get(column)) for row in game_rows) / games
    for (made, attempted), field in _SHOOTING_STATS.items():
        averages[field] = sum(shooting_fraction(row.get(made), row.get(attempted)) for row in game_rows) / games
    averages["overall_rating"] = sum(game_overall_rating(row) for row in game_rows) / games

    return normalize_stat_line({
        **player_row,
        "player_id": player_row.get("id"),
        "games_played": games,
        **averages,
    })
