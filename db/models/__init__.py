# Import all models to ensure they are registered with the database
from .tournament import Match, Player, PlayerMatchStat, Team, TeamRoster

__all__ = ['Team', 'Player', 'TeamRoster', 'Match', 'PlayerMatchStat']
