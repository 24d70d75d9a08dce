"""
Teams Table

Tournament teams with their leaderboard placement data.
"""

from peewee import (
    CharField,
    DecimalField,
    IntegerField,
    TextField,
    UUIDField,
)

from db.base import BaseModel


class Team(BaseModel):
    """
    A tournament team.

    Attributes:
        id: Team UUID
        name: Display name
        logo_url: Logo image URL (optional)
        region: Region label (optional)
        current_rp: Accumulated ranking points
        elo_rating: Elo rating
        global_rank: Position on the global leaderboard (1 = best)
        leaderboard_tier: Tier label (e.g., 'S', 'A')
    """

    id = UUIDField(primary_key=True)
    name = CharField(max_length=100)
    logo_url = TextField(null=True)
    region = CharField(max_length=50, null=True)
    current_rp = DecimalField(max_digits=10, decimal_places=2, null=True)
    elo_rating = DecimalField(max_digits=8, decimal_places=2, null=True)
    global_rank = IntegerField(null=True)
    leaderboard_tier = CharField(max_length=20, null=True)

    class Meta:
        table_name = "teams"
        schema = "public"

    def __repr__(self) -> str:
        return f"<Team(id='{self.id}', name='{self.name}')>"
