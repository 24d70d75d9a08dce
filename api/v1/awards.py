import asyncio

from fastapi import APIRouter

from schemas.awards import AwardsResp, StatLeadersResp
from services.awards_service import AwardsService

router = APIRouter(tags=["Awards"])


@router.get("/awards", response_model=AwardsResp)
async def get_awards() -> AwardsResp:
    """Offensive MVP, Defensive MVP and Rookie award races (top 5 each)."""
    return await asyncio.to_thread(AwardsService.get_awards)


@router.get("/leaders", response_model=StatLeadersResp)
async def get_stat_leaders() -> StatLeadersResp:
    """Top five players in each stat category."""
    return await asyncio.to_thread(AwardsService.get_stat_leaders)
