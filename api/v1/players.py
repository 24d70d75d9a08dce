import asyncio
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from analytics.leaderboard import ALL_POSITIONS, SortDirection, SortField
from schemas.common import ApiStatus
from schemas.players import PlayerProfileResp, PlayersListResp
from services.players_service import PlayersService

router = APIRouter(prefix="/players", tags=["Players"])


@router.get("", response_model=PlayersListResp)
async def list_players(
    search: str = Query("", description="Gamertag or team name substring"),
    position: str = Query(ALL_POSITIONS, description="Exact position label, or 'all'"),
    sort_field: SortField = Query(SortField.RANK, description="Column to sort on"),
    sort_direction: SortDirection = Query(SortDirection.DESC, description="asc or desc"),
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, ge=1, le=100, description="Players per page"),
) -> PlayersListResp:
    """Players leaderboard with search, position filter, sorting and pagination."""
    return await asyncio.to_thread(
        PlayersService.list_players,
        search,
        position,
        sort_field,
        sort_direction,
        page,
        limit,
    )


@router.get("/{player_id}", response_model=PlayerProfileResp)
async def get_player(player_id: str) -> PlayerProfileResp:
    """A player's teams and per-game averages."""
    resp = await asyncio.to_thread(PlayersService.get_player, player_id)
    if resp.status == ApiStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Player not found")
    return resp
