"""
Tournament Schema Models

Read-only models over the hosted tournament database.
"""

from db.models.tournament.teams import Team
from db.models.tournament.players import Player
from db.models.tournament.team_rosters import TeamRoster
from db.models.tournament.matches import Match
from db.models.tournament.player_stats import PlayerMatchStat

__all__ = [
    "Team",
    "Player",
    "TeamRoster",
    "Match",
    "PlayerMatchStat",
]
