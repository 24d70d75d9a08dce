import asyncio
from typing import Optional

from fastapi import APIRouter, Query

from schemas.matches import MatchListResp
from services.matches_service import MatchesService

router = APIRouter(prefix="/matches", tags=["Matches"])


@router.get("/recent", response_model=MatchListResp)
async def get_recent_matches(
    limit: Optional[int] = Query(None, ge=1, le=50, description="Maximum matches"),
) -> MatchListResp:
    """Latest results."""
    return await asyncio.to_thread(MatchesService.get_recent, limit)


@router.get("/upcoming", response_model=MatchListResp)
async def get_upcoming_matches(
    limit: Optional[int] = Query(None, ge=1, le=50, description="Maximum matches"),
) -> MatchListResp:
    """Unplayed matches, soonest first."""
    return await asyncio.to_thread(MatchesService.get_upcoming, limit)
