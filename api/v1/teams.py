import asyncio

from fastapi import APIRouter, HTTPException, Query

from analytics.rankings import TeamSortField
from schemas.common import ApiStatus
from schemas.teams import StandingsResp, TeamDetailResp
from services.standings_service import StandingsService

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.get("", response_model=StandingsResp)
async def get_standings(
    sort_by: TeamSortField = Query(TeamSortField.WINS, description="Ordering of the standings"),
    search: str = Query("", description="Case-insensitive team name filter"),
) -> StandingsResp:
    """Team standings: wins first, point differential breaks ties."""
    return await asyncio.to_thread(StandingsService.get_standings, sort_by, search)


@router.get("/{team_id}", response_model=TeamDetailResp)
async def get_team(team_id: str) -> TeamDetailResp:
    """Team record, roster and match history."""
    resp = await asyncio.to_thread(StandingsService.get_team, team_id)
    if resp.status == ApiStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Team not found")
    return resp
