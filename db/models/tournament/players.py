"""
Players Table

Registered tournament players.
"""

from peewee import (
    BooleanField,
    CharField,
    DecimalField,
    TextField,
    UUIDField,
)

from db.base import BaseModel


class Player(BaseModel):
    """
    A tournament player.

    Attributes:
        id: Player UUID
        gamertag: In-game name, shown everywhere the player appears
        position: Position label (e.g., 'Point Guard', 'Lock')
        is_rookie: First tournament for this player
        player_rank_score: Score the leaderboard "rank" column sorts on
        avatar_url: Avatar image URL (optional)
    """

    id = UUIDField(primary_key=True)
    gamertag = CharField(max_length=50)
    position = CharField(max_length=30, null=True)
    is_rookie = BooleanField(null=True)
    player_rank_score = DecimalField(max_digits=10, decimal_places=2, null=True)
    avatar_url = TextField(null=True)

    class Meta:
        table_name = "players"
        schema = "public"

    def __repr__(self) -> str:
        return f"<Player(id='{self.id}', gamertag='{self.gamertag}')>"
