"""
Service for match listings.
"""

from datetime import datetime, timedelta
from typing import Optional

import pytz
from peewee import PeeweeException

from analytics.match_results import match_status, recent_results, upcoming_matches
from analytics.normalizer import normalize_match
from analytics.records import Match
from core.logging import get_logger
from core.settings import settings
from db import queries
from schemas.common import ApiStatus
from schemas.matches import MatchItem, MatchListResp


def current_time() -> datetime:
    """Now, in the dashboard's display timezone."""
    return datetime.now(pytz.timezone(settings.display_timezone))


def live_window() -> timedelta:
    return timedelta(hours=settings.live_match_window_hours)


def to_match_item(match: Match, now: datetime) -> MatchItem:
    return MatchItem(
        id=match.id,
        team_a_id=match.team_a_id,
        team_a_name=match.team_a_name,
        team_a_logo_url=match.team_a_logo_url,
        team_b_id=match.team_b_id,
        team_b_name=match.team_b_name,
        team_b_logo_url=match.team_b_logo_url,
        score_a=match.score_a,
        score_b=match.score_b,
        played_at=match.played_at,
        status=match_status(match, now, live_window()).value,
    )


class MatchesService:
    """Recent results and upcoming schedule."""

    @staticmethod
    def get_recent(limit: Optional[int] = None, now: Optional[datetime] = None) -> MatchListResp:
        """
        Completed matches, most recent first.

        Args:
            limit: Maximum matches (defaults to settings.recent_matches_limit)
            now: Reference time for status labels (defaults to the current time)
        """
        return MatchesService._list(recent_results, "recent", limit, now)

    @staticmethod
    def get_upcoming(limit: Optional[int] = None, now: Optional[datetime] = None) -> MatchListResp:
        """Matches without a result, soonest first."""
        return MatchesService._list(upcoming_matches, "upcoming", limit, now)

    @staticmethod
    def _list(select, kind: str, limit: Optional[int], now: Optional[datetime]) -> MatchListResp:
        log = get_logger("matches_service")
        limit = settings.recent_matches_limit if limit is None else limit
        now = now or current_time()

        try:
            matches = [normalize_match(row) for row in queries.fetch_matches()]
        except PeeweeException as e:
            log.error("matches_fetch_failed", kind=kind, error=str(e))
            return MatchListResp(status=ApiStatus.ERROR, message="Failed to fetch matches", data=[])

        items = [to_match_item(match, now) for match in select(matches, limit)]
        log.info("matches_listed", kind=kind, count=len(items))

        return MatchListResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {len(items)} {kind} matches",
            data=items,
        )
