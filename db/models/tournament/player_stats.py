"""
Player Stats Table

Box score line for one player in one match. A player has one row per
game played.
"""

from peewee import (
    AutoField,
    ForeignKeyField,
    SmallIntegerField,
)

from db.base import BaseModel
from db.models.tournament.matches import Match
from db.models.tournament.players import Player


class PlayerMatchStat(BaseModel):
    id = AutoField(primary_key=True)
    player = ForeignKeyField(Player, backref="match_stats", on_delete="CASCADE", column_name="player_id")
    match = ForeignKeyField(Match, backref="player_stats", on_delete="CASCADE", column_name="match_id")

    # Counting stats
    points = SmallIntegerField(null=True)
    assists = SmallIntegerField(null=True)
    rebounds = SmallIntegerField(null=True)
    steals = SmallIntegerField(null=True)
    blocks = SmallIntegerField(null=True)
    turnovers = SmallIntegerField(null=True)
    fouls = SmallIntegerField(null=True)

    # Shooting
    fgm = SmallIntegerField(null=True)
    fga = SmallIntegerField(null=True)
    three_points_made = SmallIntegerField(null=True)
    three_points_attempted = SmallIntegerField(null=True)
    ftm = SmallIntegerField(null=True)
    fta = SmallIntegerField(null=True)

    class Meta:
        table_name = "player_stats"
        schema = "public"

    def __repr__(self) -> str:
        return f"<PlayerMatchStat(player={self.player_id}, match={self.match_id})>"
