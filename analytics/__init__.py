"""
Tournament Analytics

Pure functions over already-fetched rows: normalization, team records
and standings, award races, leaderboards, and match result slices.
"""

from analytics.awards import (
    AWARD_LIST_SIZE,
    MIN_GAMES_FOR_AWARDS,
    AwardsRace,
    compute_awards,
    defensive_rating,
    offensive_rating,
    rookie_rating,
)
from analytics.leaderboard import SortDirection, SortField, filter_and_sort
from analytics.match_results import (
    MatchResult,
    MatchStatus,
    match_result,
    match_status,
    recent_results,
    team_match_history,
    upcoming_matches,
)
from analytics.normalizer import (
    first_or_default,
    normalize_leaderboard_player,
    normalize_match,
    normalize_stat_line,
    normalize_team,
)
from analytics.player_aggregates import aggregate_player_games, group_rows_by_player
from analytics.rankings import TeamSortField, compare_teams, rank_teams, sort_teams
from analytics.stat_leaders import compute_stat_leaders
from analytics.team_records import DRAW_COUNTS_AS_LOSS, aggregate_record, build_standings, win_percentage

__all__ = [
    "AWARD_LIST_SIZE",
    "MIN_GAMES_FOR_AWARDS",
    "DRAW_COUNTS_AS_LOSS",
    "AwardsRace",
    "MatchResult",
    "MatchStatus",
    "SortDirection",
    "SortField",
    "TeamSortField",
    "aggregate_player_games",
    "aggregate_record",
    "build_standings",
    "compare_teams",
    "compute_awards",
    "compute_stat_leaders",
    "defensive_rating",
    "filter_and_sort",
    "first_or_default",
    "group_rows_by_player",
    "match_result",
    "match_status",
    "normalize_leaderboard_player",
    "normalize_match",
    "normalize_stat_line",
    "normalize_team",
    "offensive_rating",
    "rank_teams",
    "recent_results",
    "rookie_rating",
    "sort_teams",
    "team_match_history",
    "upcoming_matches",
    "win_percentage",
]
