"""
Matches Table

Scheduled and played matches. Either team may still be TBD, and scores
stay null until the result is entered.
"""

from peewee import (
    DateTimeField,
    ForeignKeyField,
    IntegerField,
    UUIDField,
)

from db.base import BaseModel
from db.models.tournament.teams import Team


class Match(BaseModel):
    """
    A match between two teams.

    Attributes:
        id: Match UUID
        team_a: First (home) team, null while TBD
        team_b: Second (away) team, null while TBD
        score_a: Team A final score (null if not yet played)
        score_b: Team B final score (null if not yet played)
        played_at: Tip-off time (null if not yet scheduled)
    """

    id = UUIDField(primary_key=True)
    team_a = ForeignKeyField(
        Team,
        backref="matches_as_a",
        null=True,
        on_delete="SET NULL",
        column_name="team_a_id",
    )
    team_b = ForeignKeyField(
        Team,
        backref="matches_as_b",
        null=True,
        on_delete="SET NULL",
        column_name="team_b_id",
    )
    score_a = IntegerField(null=True)
    score_b = IntegerField(null=True)
    played_at = DateTimeField(null=True, index=True)

    class Meta:
        table_name = "matches"
        schema = "public"

    def __repr__(self) -> str:
        return f"<Match(id={self.id}, {self.team_a_id} vs {self.team_b_id})>"

    @property
    def is_completed(self) -> bool:
        return self.score_a is not None and self.score_b is not None
