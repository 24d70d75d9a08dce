"""
Award Ratings

Weighted composite ratings for the three award races (Offensive MVP,
Defensive MVP, Rookie of the Tournament) and the top-N candidate lists.

Weights apply to per-game averages and to shooting percentages as
fractions (0.47, not 47.0). Feeding scaled percentages in would let the
shooting terms swamp the rest of the formula.
"""

from dataclasses import dataclass, fields
from typing import Iterable

from analytics.records import AwardRating, PlayerStatLine


# One eligibility gate for every award race
MIN_GAMES_FOR_AWARDS = 3
AWARD_LIST_SIZE = 5

OFFENSIVE_WEIGHTS: dict[str, float] = {
    "points_per_game": 0.4,
    "assists_per_game": 0.3,
    "field_goal_percentage": 0.2,
    "three_point_percentage": 0.1,
}

DEFENSIVE_WEIGHTS: dict[str, float] = {
    "steals_per_game": 0.4,
    "blocks_per_game": 0.3,
    "rebounds_per_game": 0.3,
}

ROOKIE_WEIGHTS: dict[str, float] = {
    "points_per_game": 0.3,
    "assists_per_game": 0.2,
    "steals_per_game": 0.2,
    "field_goal_percentage": 0.15,
    "overall_rating": 0.15,
}

_STAT_FIELDS = tuple(f.name for f in fields(PlayerStatLine))


@dataclass(frozen=True)
class AwardsRace:
    """Top candidates per award category, best first."""

    omvp: list[AwardRating]
    dmvp: list[AwardRating]
    rookie: list[AwardRating]


def weighted_rating(player: PlayerStatLine, weights: dict[str, float]) -> float:
    return sum(getattr(player, stat) * weight for stat, weight in weights.items())


def offensive_rating(player: PlayerStatLine) -> float:
    return weighted_rating(player, OFFENSIVE_WEIGHTS)


def defensive_rating(player: PlayerStatLine) -> float:
    return weighted_rating(player, DEFENSIVE_WEIGHTS)


def rookie_rating(player: PlayerStatLine) -> float:
    return weighted_rating(player, ROOKIE_WEIGHTS)


def is_eligible(player: PlayerStatLine, min_games: int = MIN_GAMES_FOR_AWARDS) -> bool:
    return player.games_played >= min_games


def _with_rating(player: PlayerStatLine, **rating: float) -> AwardRating:
    stats = {name: getattr(player, name) for name in _STAT_FIELDS}
    return AwardRating(**stats, **rating)


def _top(candidates: list[PlayerStatLine], rating_field: str, rate, limit: int) -> list[AwardRating]:
    rated = [_with_rating(player, **{rating_field: rate(player)}) for player in candidates]
    # stable: equal ratings keep candidate order
    rated.sort(key=lambda item: getattr(item, rating_field), reverse=True)
    return rated[:max(limit, 0)]


def compute_awards(
    players: Iterable[PlayerStatLine],
    min_games: int = MIN_GAMES_FOR_AWARDS,
    limit: int = AWARD_LIST_SIZE,
) -> AwardsRace:
    """
    Rank the award races.

    Args:
        players: Normalized stat lines
        min_games: Minimum games played to be a candidate in any category
        limit: Candidates kept per category

    Returns:
        AwardsRace with at most `limit` entries per list. Lists are never
        padded; an empty pool gives empty lists. Each entry carries only
        the rating of its own category.
    """
    candidates = [player for player in players if is_eligible(player, min_games)]
    rookies = [player for player in candidates if player.is_rookie]

    return AwardsRace(
        omvp=_top(candidates, "offensive_rating", offensive_rating, limit),
        dmvp=_top(candidates, "defensive_rating", defensive_rating, limit),
        rookie=_top(rookies, "rookie_rating", rookie_rating, limit),
    )
