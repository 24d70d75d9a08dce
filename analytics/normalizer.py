"""
Row Normalizer

Turns loosely-shaped rows from the data source (nulls, missing keys,
relations that come back as a list or a single object) into the fully
defaulted records in analytics.records.

Every function here is total: any input, including None or a non-dict,
produces a record instead of raising.
"""

import math
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

import pytz

from analytics.records import (
    FREE_AGENT,
    UNKNOWN_POSITION,
    UNKNOWN_TEAM,
    LeaderboardPlayer,
    Match,
    PlayerStatLine,
    Team,
)


_TRUTHY = {"1", "true", "t", "yes", "y"}


def first_or_default(value: Any, default: Any = None) -> Any:
    """
    Resolve a relation that may be a list, a single object, or missing.

    Examples:
        >>> first_or_default([{"name": "Ballers"}])
        {'name': 'Ballers'}
        >>> first_or_default([], "n/a")
        'n/a'
        >>> first_or_default({"name": "Ballers"})
        {'name': 'Ballers'}
    """
    if isinstance(value, (list, tuple)):
        if value and value[0] is not None:
            return value[0]
        return default
    if isinstance(value, Mapping):
        return value
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce a numeric-ish value to float; None, junk, NaN and inf become default."""
    if value is None:
        return default
    try:
        if isinstance(value, (bool, int, float, Decimal)):
            number = float(value)
        else:
            number = float(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        # OverflowError: ints beyond float range
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_int(value: Any, default: int = 0) -> int:
    """Coerce to int, truncating fractional values."""
    return int(to_float(value, float(default)))


def to_optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    number = to_float(value, math.nan)
    return None if math.isnan(number) else number


def to_optional_int(value: Any) -> Optional[int]:
    number = to_optional_float(value)
    return None if number is None else int(number)


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float, Decimal)):
        return bool(value)
    return str(value).strip().lower() in _TRUTHY


def to_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def to_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp into an aware datetime.

    Naive values are taken to be UTC. Unparseable values become None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = pytz.utc.localize(parsed)
    return parsed


def _as_mapping(raw: Any) -> Mapping:
    return raw if isinstance(raw, Mapping) else {}


def team_identity(raw: Any) -> tuple[str, str, Optional[str]]:
    """
    Resolve (team_id, team_name, logo_url) for a player row.

    Accepts flat team columns, a `team_rosters -> teams` relation (first
    roster entry wins), or a direct `teams` / `team` relation. Players
    without a team are free agents.
    """
    row = _as_mapping(raw)

    if row.get("team_name") is not None:
        return (
            str(row.get("team_id") or ""),
            str(row["team_name"]),
            to_optional_str(row.get("team_logo_url")),
        )

    team = None
    roster = first_or_default(row.get("team_rosters"))
    if roster is not None:
        team = first_or_default(_as_mapping(roster).get("teams"))
    if team is None:
        team = first_or_default(row.get("teams")) or first_or_default(row.get("team"))

    if team is None:
        return "", FREE_AGENT, None

    team = _as_mapping(team)
    return (
        str(team.get("id") or ""),
        str(team.get("name") or FREE_AGENT),
        to_optional_str(team.get("logo_url")),
    )


def team_names(raw: Any) -> tuple[str, ...]:
    """All team names a player is associated with, in source order."""
    row = _as_mapping(raw)

    related = row.get("teams")
    if related is None and row.get("team_rosters") is not None:
        rosters = row["team_rosters"]
        rosters = rosters if isinstance(rosters, (list, tuple)) else [rosters]
        related = [first_or_default(_as_mapping(r).get("teams")) for r in rosters]
    if isinstance(related, Mapping):
        related = [related]
    if not isinstance(related, (list, tuple)):
        related = []

    names = []
    for team in related:
        name = _as_mapping(team).get("name")
        if name:
            names.append(str(name))

    if not names and row.get("team_name"):
        names.append(str(row["team_name"]))
    return tuple(names)


def normalize_team(raw: Any) -> Team:
    row = _as_mapping(raw)

    roster = row.get("players", row.get("team_rosters"))
    if isinstance(roster, (list, tuple)):
        roster_size = len(roster)
    else:
        roster_size = to_int(row.get("roster_size"))

    return Team(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or UNKNOWN_TEAM),
        logo_url=to_optional_str(row.get("logo_url")),
        region=to_optional_str(row.get("region")),
        current_rp=to_optional_float(row.get("current_rp")),
        elo_rating=to_optional_float(row.get("elo_rating")),
        global_rank=to_optional_int(row.get("global_rank")),
        leaderboard_tier=to_optional_str(row.get("leaderboard_tier")),
        roster_size=roster_size,
    )


def _side(row: Mapping, side: str) -> tuple[Optional[str], Optional[str], Optional[str]]:
    relation = _as_mapping(first_or_default(row.get(f"team_{side}")))
    team_id = row.get(f"team_{side}_id") or relation.get("id")
    return (
        str(team_id) if team_id else None,
        to_optional_str(relation.get("name") or row.get(f"team_{side}_name")),
        to_optional_str(relation.get("logo_url") or row.get(f"team_{side}_logo_url")),
    )


def normalize_match(raw: Any) -> Match:
    row = _as_mapping(raw)

    team_a_id, team_a_name, team_a_logo = _side(row, "a")
    team_b_id, team_b_name, team_b_logo = _side(row, "b")

    score_a = to_optional_int(row.get("score_a"))
    score_b = to_optional_int(row.get("score_b"))
    if score_a is None or score_b is None:
        # a half-entered result is still an unplayed match
        score_a = score_b = None

    return Match(
        id=str(row.get("id") or ""),
        team_a_id=team_a_id,
        team_b_id=team_b_id,
        score_a=score_a,
        score_b=score_b,
        played_at=to_datetime(row.get("played_at")),
        team_a_name=team_a_name,
        team_b_name=team_b_name,
        team_a_logo_url=team_a_logo,
        team_b_logo_url=team_b_logo,
    )


def normalize_stat_line(raw: Any) -> PlayerStatLine:
    row = _as_mapping(raw)
    team_id, team_name, team_logo_url = team_identity(row)

    return PlayerStatLine(
        player_id=str(row.get("player_id") or row.get("id") or ""),
        gamertag=str(row.get("gamertag") or ""),
        position=str(row.get("position") or UNKNOWN_POSITION),
        team_id=team_id,
        team_name=team_name,
        team_logo_url=team_logo_url,
        points_per_game=to_float(row.get("points_per_game")),
        assists_per_game=to_float(row.get("assists_per_game")),
        rebounds_per_game=to_float(row.get("rebounds_per_game")),
        steals_per_game=to_float(row.get("steals_per_game")),
        blocks_per_game=to_float(row.get("blocks_per_game")),
        fouls_per_game=to_float(row.get("fouls_per_game")),
        field_goal_percentage=to_float(row.get("field_goal_percentage")),
        three_point_percentage=to_float(row.get("three_point_percentage")),
        free_throw_percentage=to_float(row.get("free_throw_percentage")),
        games_played=max(to_int(row.get("games_played")), 0),
        is_rookie=to_bool(row.get("is_rookie")),
        overall_rating=to_float(row.get("overall_rating")),
    )


def normalize_leaderboard_player(raw: Any) -> LeaderboardPlayer:
    row = _as_mapping(raw)
    stats = row.get("stats")
    stats = stats if isinstance(stats, Mapping) else row

    return LeaderboardPlayer(
        id=str(row.get("id") or row.get("player_id") or ""),
        gamertag=str(row.get("gamertag") or ""),
        position=to_optional_str(row.get("position")),
        team_names=team_names(row),
        player_rank_score=to_float(row.get("player_rank_score")),
        games_played=max(to_int(stats.get("games_played")), 0),
        points_per_game=to_float(stats.get("points_per_game")),
        rebounds_per_game=to_float(stats.get("rebounds_per_game")),
        assists_per_game=to_float(stats.get("assists_per_game")),
        steals_per_game=to_float(stats.get("steals_per_game")),
        blocks_per_game=to_float(stats.get("blocks_per_game")),
        field_goal_percentage=to_float(stats.get("field_goal_percentage")),
        three_point_percentage=to_float(stats.get("three_point_percentage")),
        free_throw_percentage=to_float(stats.get("free_throw_percentage")),
    )
