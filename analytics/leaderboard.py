"""
Player Leaderboard

Search, position filter and column sort for the players table.
Pagination is left to the caller.
"""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Optional, Union

from analytics.records import LeaderboardPlayer


ALL_POSITIONS = "all"

POSITIONS = ("Point Guard", "Shooting Guard", "Lock", "Power Forward", "Center")


class SortField(str, Enum):
    RANK = "rank"
    NAME = "name"
    TEAM = "team"
    PPG = "ppg"
    RPG = "rpg"
    APG = "apg"
    SPG = "spg"
    BPG = "bpg"
    FG = "fg"
    THREE_PT = "threePt"
    FT = "ft"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


SORT_KEYS: dict[SortField, Callable[[LeaderboardPlayer], Any]] = {
    SortField.RANK: lambda p: p.player_rank_score,
    SortField.NAME: lambda p: p.gamertag.casefold(),
    SortField.TEAM: lambda p: p.primary_team_name.casefold(),
    SortField.PPG: lambda p: p.points_per_game,
    SortField.RPG: lambda p: p.rebounds_per_game,
    SortField.APG: lambda p: p.assists_per_game,
    SortField.SPG: lambda p: p.steals_per_game,
    SortField.BPG: lambda p: p.blocks_per_game,
    SortField.FG: lambda p: p.field_goal_percentage,
    SortField.THREE_PT: lambda p: p.three_point_percentage,
    SortField.FT: lambda p: p.free_throw_percentage,
}


def matches_search(player: LeaderboardPlayer, search_term: str) -> bool:
    """Case-insensitive substring match on gamertag or any of the player's teams."""
    needle = (search_term or "").casefold()
    if not needle:
        return True
    if needle in player.gamertag.casefold():
        return True
    return any(needle in name.casefold() for name in player.team_names)


def matches_position(player: LeaderboardPlayer, position_filter: Optional[str]) -> bool:
    if not position_filter or position_filter == ALL_POSITIONS:
        return True
    return player.position == position_filter


def filter_and_sort(
    players: Iterable[LeaderboardPlayer],
    search_term: str = "",
    position_filter: Optional[str] = ALL_POSITIONS,
    sort_field: Union[SortField, str] = SortField.RANK,
    sort_direction: Union[SortDirection, str] = SortDirection.DESC,
) -> list[LeaderboardPlayer]:
    """
    Filter and order leaderboard rows.

    Sorting is stable in both directions, so players tied on the sort
    column stay in input order.

    Raises:
        ValueError: If sort_field or sort_direction is not a known value
    """
    key = SORT_KEYS[SortField(sort_field)]
    descending = SortDirection(sort_direction) is SortDirection.DESC

    filtered = [
        player
        for player in players
        if matches_search(player, search_term) and matches_position(player, position_filter)
    ]
    return sorted(filtered, key=key, reverse=descending)
