"""
Team Rosters Table

Player-to-team membership.
"""

from peewee import (
    AutoField,
    BooleanField,
    ForeignKeyField,
)

from db.base import BaseModel
from db.models.tournament.players import Player
from db.models.tournament.teams import Team


class TeamRoster(BaseModel):
    id = AutoField(primary_key=True)
    team = ForeignKeyField(Team, backref="roster", on_delete="CASCADE", column_name="team_id")
    player = ForeignKeyField(Player, backref="rosters", on_delete="CASCADE", column_name="player_id")
    is_captain = BooleanField(default=False)

    class Meta:
        table_name = "team_rosters"
        schema = "public"

    def __repr__(self) -> str:
        return f"<TeamRoster(team={self.team_id}, player={self.player_id})>"
