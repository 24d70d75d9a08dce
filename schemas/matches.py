"""
Schemas for match API responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import BaseResponse


class MatchItem(BaseModel):
    """A scheduled or played match."""

    id: str
    team_a_id: Optional[str] = Field(None, description="Team A ID, null while TBD")
    team_a_name: Optional[str] = None
    team_a_logo_url: Optional[str] = None
    team_b_id: Optional[str] = Field(None, description="Team B ID, null while TBD")
    team_b_name: Optional[str] = None
    team_b_logo_url: Optional[str] = None
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    played_at: Optional[datetime] = Field(None, description="Tip-off time, null while unscheduled")
    status: str = Field(..., description="completed | upcoming | live | unreported")


class MatchListResp(BaseResponse):
    """Response for GET /v1/matches/recent and /v1/matches/upcoming."""

    data: list[MatchItem] = Field(default_factory=list)
