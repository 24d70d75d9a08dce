"""
Team Record Aggregator

Builds a team's win/loss record and scoring totals from the match list.
Only completed matches (both scores present) count.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

from analytics.records import Match, Team, TeamRecord, TeamStanding


# A tied match adds to games_played but not to wins, so with this policy it
# lands in losses (losses = games_played - wins). Draws are still reported
# separately on the record for display.
DRAW_COUNTS_AS_LOSS = True


def own_and_opponent_score(team_id: str, match: Match) -> Optional[tuple[int, int]]:
    """
    Scores from the point of view of `team_id`.

    Returns None when the team did not play in the match or the match has
    no result yet.
    """
    if not match.is_completed or not match.involves(team_id):
        return None
    if match.team_a_id == team_id:
        return match.score_a, match.score_b
    return match.score_b, match.score_a


def aggregate_record(
    team_id: str,
    matches: Iterable[Match],
    draw_counts_as_loss: bool = DRAW_COUNTS_AS_LOSS,
) -> TeamRecord:
    """
    Compute a team's record over its completed matches.

    Args:
        team_id: Team to aggregate for
        matches: Any matches; ones the team did not play in are ignored
        draw_counts_as_loss: Fold ties into losses (default) or leave them
            only in `draws`

    Returns:
        A new TeamRecord. An empty match list gives an all-zero record.
    """
    games_played = wins = draws = defeats = 0
    points_for = points_against = 0

    for match in matches:
        scores = own_and_opponent_score(team_id, match)
        if scores is None:
            continue
        own, opponent = scores

        games_played += 1
        points_for += own
        points_against += opponent
        if own > opponent:
            wins += 1
        elif own == opponent:
            draws += 1
        else:
            defeats += 1

    losses = games_played - wins if draw_counts_as_loss else defeats

    return TeamRecord(
        games_played=games_played,
        wins=wins,
        losses=losses,
        points_for=points_for,
        points_against=points_against,
        draws=draws,
    )


def win_percentage(record: TeamRecord) -> float:
    """Share of games won, as a fraction. Zero games played gives 0.0."""
    if record.games_played == 0:
        return 0.0
    return record.wins / record.games_played


def build_standings(teams: Iterable[Team], matches: Sequence[Match]) -> list[TeamStanding]:
    """Pair every team with its record, keeping the input team order."""
    return [TeamStanding(team=team, record=aggregate_record(team.id, matches)) for team in teams]
