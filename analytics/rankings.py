"""
Team Ranking

Standings order: most wins first, point differential breaks ties.
Teams equal on both keep their input order.
"""

from enum import Enum
from functools import cmp_to_key
from typing import Iterable, Protocol, Union

from analytics.records import TeamStanding


class Rankable(Protocol):
    wins: int
    points_differential: int


class TeamSortField(str, Enum):
    """Orderings offered on the teams listing."""

    WINS = "wins"
    POINTS_DIFFERENTIAL = "points_differential"
    NAME = "name"
    ROSTER_SIZE = "roster_size"


def compare_teams(a: Rankable, b: Rankable) -> int:
    """
    Standings comparator.

    Returns -1 when `a` ranks above `b`, 1 when below, 0 when tied on both
    wins and point differential.
    """
    if a.wins != b.wins:
        return -1 if a.wins > b.wins else 1
    if a.points_differential != b.points_differential:
        return -1 if a.points_differential > b.points_differential else 1
    return 0


def rank_teams(standings: Iterable[TeamStanding]) -> list[TeamStanding]:
    """Sort standings with compare_teams. sorted() is stable, so exact ties keep input order."""
    return sorted(standings, key=cmp_to_key(compare_teams))


def sort_teams(
    standings: Iterable[TeamStanding],
    sort_by: Union[TeamSortField, str] = TeamSortField.WINS,
    search: str = "",
) -> list[TeamStanding]:
    """
    Filter the teams listing by name and order it.

    Args:
        standings: Teams with their records
        sort_by: One of TeamSortField
        search: Case-insensitive substring of the team name; empty keeps all

    Raises:
        ValueError: If sort_by is not a TeamSortField value
    """
    sort_by = TeamSortField(sort_by)
    needle = (search or "").casefold()
    filtered = [s for s in standings if needle in s.team.name.casefold()]

    if sort_by is TeamSortField.WINS:
        return rank_teams(filtered)
    if sort_by is TeamSortField.POINTS_DIFFERENTIAL:
        return sorted(filtered, key=lambda s: s.points_differential, reverse=True)
    if sort_by is TeamSortField.NAME:
        return sorted(filtered, key=lambda s: s.team.name.casefold())
    return sorted(filtered, key=lambda s: s.team.roster_size, reverse=True)
