"""
Service for the players leaderboard and player profiles.
"""

from dataclasses import asdict
from typing import Optional, Union

from peewee import PeeweeException

from analytics.leaderboard import ALL_POSITIONS, SortDirection, SortField, filter_and_sort
from analytics.normalizer import normalize_leaderboard_player, normalize_stat_line, to_float
from analytics.player_aggregates import aggregate_player_games, group_rows_by_player
from analytics.records import LeaderboardPlayer, PlayerStatLine
from core.logging import get_logger
from core.settings import settings
from db import queries
from schemas.common import ApiStatus, paginate
from schemas.players import (
    LeaderboardPlayerItem,
    PlayerProfile,
    PlayerProfileResp,
    PlayersListData,
    PlayersListResp,
    PlayerTeam,
)


def build_stat_lines(player_rows: list[dict], stat_rows: list[dict]) -> list[PlayerStatLine]:
    """Per-game averages for every player with at least one game on record, in player order."""
    games_by_player = group_rows_by_player(stat_rows)
    lines = []
    for player in player_rows:
        line = aggregate_player_games(player, games_by_player.get(str(player.get("id")), []))
        if line is not None:
            lines.append(line)
    return lines


def build_leaderboard(player_rows: list[dict], stat_rows: list[dict]) -> list[LeaderboardPlayer]:
    """Every player, with zeroed stats for those who have not played yet."""
    lines = {line.player_id: line for line in build_stat_lines(player_rows, stat_rows)}
    leaderboard = []
    for player in player_rows:
        line = lines.get(str(player.get("id")))
        leaderboard.append(
            normalize_leaderboard_player({**player, "stats": asdict(line) if line else {}})
        )
    return leaderboard


def load_player_rows() -> tuple[list[dict], list[dict]]:
    """Players and their per-game stat rows."""
    return queries.fetch_players(), queries.fetch_player_stat_rows()


class PlayersService:
    """Service for listing, searching and sorting players."""

    @staticmethod
    def list_players(
        search: str = "",
        position: Optional[str] = ALL_POSITIONS,
        sort_field: Union[SortField, str] = SortField.RANK,
        sort_direction: Union[SortDirection, str] = SortDirection.DESC,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> PlayersListResp:
        """
        List players with search, position filter and sorting.

        Args:
            search: Substring of gamertag or team name (case-insensitive)
            position: Exact position label, or "all"
            sort_field: Leaderboard column to sort on
            sort_direction: "asc" or "desc"
            page: 1-based page number
            limit: Page size (defaults to settings.players_page_size, clamped to 1-100)

        Returns:
            PlayersListResp with one page of players
        """
        log = get_logger("players_service")
        limit = min(max(1, limit or settings.players_page_size), 100)
        page = max(1, page)

        try:
            player_rows, stat_rows = load_player_rows()
        except PeeweeException as e:
            log.error("players_list_error", error=str(e))
            return PlayersListResp(status=ApiStatus.ERROR, message="Failed to fetch players", data=None)

        ordered = filter_and_sort(
            build_leaderboard(player_rows, stat_rows),
            search_term=search,
            position_filter=position,
            sort_field=sort_field,
            sort_direction=sort_direction,
        )
        result = paginate(ordered, page, limit)

        return PlayersListResp(
            status=ApiStatus.SUCCESS,
            message=f"Found {result.total} players",
            data=PlayersListData(
                players=[LeaderboardPlayerItem.model_validate(p, from_attributes=True) for p in result.items],
                total=result.total,
                page=result.page,
                limit=result.limit,
                total_pages=result.total_pages,
                has_next=result.has_next,
                has_prev=result.has_prev,
            ),
        )

    @staticmethod
    def get_player(player_id: str) -> PlayerProfileResp:
        """
        A player's teams and per-game averages.

        Returns a NOT_FOUND response when the player does not exist.
        """
        log = get_logger("players_service").bind(player_id=player_id)

        try:
            player_row = queries.fetch_player(player_id)
            stat_rows = queries.fetch_player_stat_rows(player_id=player_id) if player_row else []
        except PeeweeException as e:
            log.error("player_fetch_failed", error=str(e))
            return PlayerProfileResp(status=ApiStatus.ERROR, message="Failed to fetch player")

        if player_row is None:
            return PlayerProfileResp(status=ApiStatus.NOT_FOUND, message="Player not found")

        line = aggregate_player_games(player_row, stat_rows) or normalize_stat_line(
            {**player_row, "player_id": player_row.get("id")}
        )
        log.info("player_profile_built", games=line.games_played)

        return PlayerProfileResp(
            status=ApiStatus.SUCCESS,
            message="Player fetched successfully",
            data=PlayerProfile(
                id=line.player_id,
                gamertag=line.gamertag,
                position=line.position,
                is_rookie=line.is_rookie,
                player_rank_score=to_float(player_row.get("player_rank_score")),
                teams=[
                    PlayerTeam(
                        id=str(team.get("id") or ""),
                        name=str(team.get("name") or ""),
                        logo_url=team.get("logo_url"),
                    )
                    for team in player_row.get("teams") or []
                ],
                games_played=line.games_played,
                points_per_game=line.points_per_game,
                assists_per_game=line.assists_per_game,
                rebounds_per_game=line.rebounds_per_game,
                steals_per_game=line.steals_per_game,
                blocks_per_game=line.blocks_per_game,
                fouls_per_game=line.fouls_per_game,
                field_goal_percentage=line.field_goal_percentage,
                three_point_percentage=line.three_point_percentage,
                free_throw_percentage=line.free_throw_percentage,
                overall_rating=line.overall_rating,
            ),
        )
