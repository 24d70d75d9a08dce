"""
Service for team standings and team pages.
"""

from datetime import datetime
from typing import Optional, Union

from peewee import PeeweeException

from analytics.match_results import match_result, team_match_history
from analytics.normalizer import normalize_match, normalize_team, to_bool
from analytics.rankings import TeamSortField, rank_teams, sort_teams
from analytics.records import TeamStanding
from analytics.team_records import aggregate_record, build_standings, win_percentage
from core.logging import get_logger
from core.settings import settings
from db import queries
from schemas.common import ApiStatus
from schemas.teams import (
    RosterPlayer,
    StandingsResp,
    TeamDetail,
    TeamDetailResp,
    TeamMatchItem,
    TeamRecordItem,
    TeamStandingItem,
)
from services.matches_service import current_time, to_match_item


def to_standing_item(standing: TeamStanding, rank: Optional[int] = None) -> TeamStandingItem:
    team, record = standing.team, standing.record
    return TeamStandingItem(
        rank=rank,
        id=team.id,
        name=team.name,
        logo_url=team.logo_url,
        region=team.region,
        current_rp=team.current_rp,
        elo_rating=team.elo_rating,
        global_rank=team.global_rank,
        leaderboard_tier=team.leaderboard_tier,
        roster_size=team.roster_size,
        record=TeamRecordItem(
            games_played=record.games_played,
            wins=record.wins,
            losses=record.losses,
            draws=record.draws,
            points_for=record.points_for,
            points_against=record.points_against,
            points_differential=record.points_differential,
            win_percentage=win_percentage(record),
        ),
    )


class StandingsService:

    @staticmethod
    def get_standings(
        sort_by: Union[TeamSortField, str] = TeamSortField.WINS,
        search: str = "",
    ) -> StandingsResp:
        """
        Teams with their records, ordered for the standings table.

        Args:
            sort_by: wins (ties on point differential), points_differential, name or roster_size
            search: Case-insensitive team name filter
        """
        log = get_logger("standings_service")

        try:
            team_rows = queries.fetch_teams()
            match_rows = queries.fetch_matches()
        except PeeweeException as e:
            log.error("standings_fetch_failed", error=str(e))
            return StandingsResp(status=ApiStatus.ERROR, message="Failed to fetch standings", data=[])

        teams = [normalize_team(row) for row in team_rows]
        matches = [normalize_match(row) for row in match_rows]
        standings = build_standings(teams, matches)
        # rank is the standing (wins, then differential) over every team,
        # whatever order or search the listing uses
        ranks = {id(standing): rank for rank, standing in enumerate(rank_teams(standings), start=1)}
        ordered = sort_teams(standings, sort_by, search)

        log.info("standings_built", teams=len(teams), matches=len(matches), shown=len(ordered))

        return StandingsResp(
            status=ApiStatus.SUCCESS,
            message="Standings fetched successfully" if ordered else "No teams found",
            data=[to_standing_item(standing, ranks[id(standing)]) for standing in ordered],
        )

    @staticmethod
    def get_team(team_id: str, now: Optional[datetime] = None) -> TeamDetailResp:
        """
        A team's record, roster and match history.

        Returns a NOT_FOUND response when the team does not exist.
        """
        log = get_logger("standings_service").bind(team_id=team_id)
        now = now or current_time()

        try:
            team_row = queries.fetch_team(team_id)
            match_rows = queries.fetch_matches(team_id=team_id) if team_row else []
        except PeeweeException as e:
            log.error("team_fetch_failed", error=str(e))
            return TeamDetailResp(status=ApiStatus.ERROR, message="Failed to fetch team")

        if team_row is None:
            return TeamDetailResp(status=ApiStatus.NOT_FOUND, message="Team not found")

        team = normalize_team(team_row)
        matches = [normalize_match(row) for row in match_rows]
        standing = TeamStanding(team=team, record=aggregate_record(team.id, matches))

        history = [
            TeamMatchItem(
                **to_match_item(match, now).model_dump(),
                result=result.value if (result := match_result(match, team.id)) else None,
            )
            for match in team_match_history(team.id, matches, settings.match_history_limit)
        ]
        roster = [
            RosterPlayer(
                id=str(row.get("id") or ""),
                gamertag=str(row.get("gamertag") or ""),
                position=row.get("position"),
                is_rookie=to_bool(row.get("is_rookie")),
                is_captain=to_bool(row.get("is_captain")),
            )
            for row in team_row.get("players") or []
        ]

        return TeamDetailResp(
            status=ApiStatus.SUCCESS,
            message="Team fetched successfully",
            data=TeamDetail(team=to_standing_item(standing), roster=roster, matches=history),
        )
