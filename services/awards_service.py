"""
Service for the awards race and stat leaders.
"""

from peewee import PeeweeException

from analytics.awards import compute_awards
from analytics.stat_leaders import compute_stat_leaders
from core.logging import get_logger
from schemas.awards import AwardCandidate, AwardsData, AwardsResp, StatLeaderItem, StatLeadersResp
from schemas.common import ApiStatus
from services.players_service import build_stat_lines, load_player_rows


class AwardsService:

    @staticmethod
    def get_awards() -> AwardsResp:
        """
        Top Offensive MVP, Defensive MVP and Rookie candidates.

        Candidates need MIN_GAMES_FOR_AWARDS games; a failed fetch returns
        empty lists so the page can show its empty state.
        """
        log = get_logger("awards_service")

        try:
            player_rows, stat_rows = load_player_rows()
        except PeeweeException as e:
            log.error("awards_fetch_failed", error=str(e))
            return AwardsResp(status=ApiStatus.ERROR, message="Failed to fetch awards data")

        lines = build_stat_lines(player_rows, stat_rows)
        race = compute_awards(lines)
        log.info(
            "awards_computed",
            players=len(player_rows),
            with_stats=len(lines),
            omvp=len(race.omvp),
            dmvp=len(race.dmvp),
            rookie=len(race.rookie),
        )

        def candidates(items):
            return [AwardCandidate.model_validate(item, from_attributes=True) for item in items]

        return AwardsResp(
            status=ApiStatus.SUCCESS,
            message="Awards race computed successfully",
            data=AwardsData(
                omvp=candidates(race.omvp),
                dmvp=candidates(race.dmvp),
                rookie=candidates(race.rookie),
            ),
        )

    @staticmethod
    def get_stat_leaders() -> StatLeadersResp:
        """Top five players per stat category."""
        log = get_logger("awards_service")

        try:
            player_rows, stat_rows = load_player_rows()
        except PeeweeException as e:
            log.error("stat_leaders_fetch_failed", error=str(e))
            return StatLeadersResp(status=ApiStatus.ERROR, message="Failed to fetch stat leaders")

        leaders = compute_stat_leaders(build_stat_lines(player_rows, stat_rows))

        return StatLeadersResp(
            status=ApiStatus.SUCCESS,
            message="Stat leaders fetched successfully",
            data={
                category: [StatLeaderItem.model_validate(leader, from_attributes=True) for leader in items]
                for category, items in leaders.items()
            },
        )
