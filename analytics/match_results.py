"""
Match Results

Per-team result labels, match status, and the recent/upcoming/history
slices the pages show. The current time is always passed in.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from analytics.records import Match
from analytics.team_records import own_and_opponent_score


DEFAULT_LIVE_WINDOW = timedelta(hours=4)


class MatchResult(str, Enum):
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class MatchStatus(str, Enum):
    COMPLETED = "completed"
    UPCOMING = "upcoming"
    LIVE = "live"
    UNREPORTED = "unreported"  # tipped off a while ago, no score entered yet


def match_result(match: Match, team_id: str) -> Optional[MatchResult]:
    """Result for `team_id`, or None if it did not play or there is no score."""
    scores = own_and_opponent_score(team_id, match)
    if scores is None:
        return None
    own, opponent = scores
    if own > opponent:
        return MatchResult.WIN
    if own < opponent:
        return MatchResult.LOSS
    return MatchResult.DRAW


def match_status(
    match: Match,
    now: datetime,
    live_window: timedelta = DEFAULT_LIVE_WINDOW,
) -> MatchStatus:
    if match.is_completed:
        return MatchStatus.COMPLETED
    if match.played_at is None or match.played_at > now:
        return MatchStatus.UPCOMING
    if match.played_at > now - live_window:
        return MatchStatus.LIVE
    return MatchStatus.UNREPORTED


def _newest_first(match: Match) -> tuple[bool, float]:
    if match.played_at is None:
        return True, 0.0
    return False, -match.played_at.timestamp()


def _soonest_first(match: Match) -> tuple[bool, float]:
    if match.played_at is None:
        return True, 0.0
    return False, match.played_at.timestamp()


def _limited(matches: list[Match], limit: Optional[int]) -> list[Match]:
    return matches if limit is None else matches[:max(limit, 0)]


def recent_results(matches: Iterable[Match], limit: Optional[int] = 5) -> list[Match]:
    """Completed matches, most recent first."""
    completed = [match for match in matches if match.is_completed]
    return _limited(sorted(completed, key=_newest_first), limit)


def upcoming_matches(matches: Iterable[Match], limit: Optional[int] = 5) -> list[Match]:
    """Matches without a result, soonest first; undated (TBD) ones last."""
    pending = [match for match in matches if not match.is_completed]
    return _limited(sorted(pending, key=_soonest_first), limit)


def team_match_history(
    team_id: str,
    matches: Iterable[Match],
    limit: Optional[int] = None,
) -> list[Match]:
    """Every match the team is scheduled in or played, most recent first."""
    involved = [match for match in matches if match.involves(team_id)]
    return _limited(sorted(involved, key=_newest_first), limit)
