"""
Tournament Queries

Read queries against the hosted database. Every function returns plain
dict rows (the shapes analytics.normalizer accepts) and manages its own
connection, since callers run these in worker threads via
asyncio.to_thread and Peewee connections are thread-local.
"""

import uuid
from typing import Optional

from peewee import JOIN, fn

from db.base import db
from db.models.tournament import Match, Player, PlayerMatchStat, Team, TeamRoster


def _valid_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def fetch_teams() -> list[dict]:
    """All teams, by name, with a `roster_size` count."""
    with db.connection_context():
        teams = list(Team.select().order_by(Team.name).dicts())
        roster_counts = {
            row["team"]: row["roster_size"]
            for row in (
                TeamRoster.select(TeamRoster.team, fn.COUNT(TeamRoster.id).alias("roster_size"))
                .group_by(TeamRoster.team)
                .dicts()
            )
        }

    for team in teams:
        team["roster_size"] = roster_counts.get(team["id"], 0)
    return teams


def fetch_team(team_id: str) -> Optional[dict]:
    """
    A single team with its roster under `players`.

    Returns None for unknown (or malformed) IDs.
    """
    if not _valid_uuid(team_id):
        return None

    with db.connection_context():
        team = Team.select().where(Team.id == team_id).dicts().first()
        if team is None:
            return None

        team["players"] = list(
            TeamRoster.select(
                Player.id,
                Player.gamertag,
                Player.position,
                Player.is_rookie,
                TeamRoster.is_captain,
            )
            .join(Player, on=(TeamRoster.player == Player.id))
            .where(TeamRoster.team == team_id)
            .order_by(Player.gamertag)
            .dicts()
        )

    team["roster_size"] = len(team["players"])
    return team


def fetch_matches(team_id: Optional[str] = None) -> list[dict]:
    """
    Matches with both sides' names and logos, newest first.

    Args:
        team_id: Only matches this team is scheduled in
    """
    if team_id is not None and not _valid_uuid(team_id):
        return []

    TeamA = Team.alias()
    TeamB = Team.alias()

    query = (
        Match.select(
            Match.id,
            Match.team_a.alias("team_a_id"),
            Match.team_b.alias("team_b_id"),
            Match.score_a,
            Match.score_b,
            Match.played_at,
            TeamA.name.alias("team_a_name"),
            TeamA.logo_url.alias("team_a_logo_url"),
            TeamB.name.alias("team_b_name"),
            TeamB.logo_url.alias("team_b_logo_url"),
        )
        .join(TeamA, JOIN.LEFT_OUTER, on=(Match.team_a == TeamA.id))
        .switch(Match)
        .join(TeamB, JOIN.LEFT_OUTER, on=(Match.team_b == TeamB.id))
    )
    if team_id is not None:
        query = query.where((Match.team_a == team_id) | (Match.team_b == team_id))

    with db.connection_context():
        return list(query.order_by(Match.played_at.desc(nulls="last")).dicts())


def fetch_players() -> list[dict]:
    """All players by gamertag, each with the teams they are rostered on under `teams`."""
    with db.connection_context():
        players = list(Player.select().order_by(Player.gamertag).dicts())
        memberships = list(
            TeamRoster.select(
                TeamRoster.player.alias("player_id"),
                Team.id,
                Team.name,
                Team.logo_url,
            )
            .join(Team, on=(TeamRoster.team == Team.id))
            .order_by(TeamRoster.id)
            .dicts()
        )

    teams_by_player: dict = {}
    for row in memberships:
        teams_by_player.setdefault(row.pop("player_id"), []).append(row)

    for player in players:
        player["teams"] = teams_by_player.get(player["id"], [])
    return players


def fetch_player(player_id: str) -> Optional[dict]:
    """
    A single player with the teams they are rostered on under `teams`.

    Returns None for unknown (or malformed) IDs.
    """
    if not _valid_uuid(player_id):
        return None

    with db.connection_context():
        player = Player.select().where(Player.id == player_id).dicts().first()
        if player is None:
            return None

        player["teams"] = list(
            TeamRoster.select(Team.id, Team.name, Team.logo_url)
            .join(Team, on=(TeamRoster.team == Team.id))
            .where(TeamRoster.player == player_id)
            .order_by(TeamRoster.id)
            .dicts()
        )
    return player


def fetch_player_stat_rows(player_id: Optional[str] = None) -> list[dict]:
    """
    Per-game box score rows.

    Args:
        player_id: Only this player's rows
    """
    if player_id is not None and not _valid_uuid(player_id):
        return []

    query = PlayerMatchStat.select(
        PlayerMatchStat.player.alias("player_id"),
        PlayerMatchStat.match.alias("match_id"),
        PlayerMatchStat.points,
        PlayerMatchStat.assists,
        PlayerMatchStat.rebounds,
        PlayerMatchStat.steals,
        PlayerMatchStat.blocks,
        PlayerMatchStat.turnovers,
        PlayerMatchStat.fouls,
        PlayerMatchStat.fgm,
        PlayerMatchStat.fga,
        PlayerMatchStat.three_points_made,
        PlayerMatchStat.three_points_attempted,
        PlayerMatchStat.ftm,
        PlayerMatchStat.fta,
    )
    if player_id is not None:
        query = query.where(PlayerMatchStat.player == player_id)

    with db.connection_context():
        return list(query.order_by(PlayerMatchStat.id).dicts())
