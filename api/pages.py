"""
Dashboard Pages

Server-rendered HTML views of the tournament. Each page calls the same
services as the JSON API and renders an empty state when a fetch fails
or returns nothing.

Routes:
    GET  /                  - recent results and upcoming schedule
    GET  /teams             - standings
    GET  /teams/{team_id}   - team record, roster and match history
    GET  /players           - players leaderboard (paginated)
    GET  /players/{player_id} - player profile
    GET  /awards            - award races
    GET  /leaders           - stat leaders
"""

import asyncio
from datetime import datetime
from typing import Optional

import pytz
from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from analytics.leaderboard import ALL_POSITIONS, POSITIONS, SortDirection, SortField
from analytics.rankings import TeamSortField
from core.logging import get_logger
from core.settings import settings
from schemas.common import ApiStatus
from services.awards_service import AwardsService
from services.matches_service import MatchesService
from services.players_service import PlayersService
from services.standings_service import StandingsService

router = APIRouter(tags=["Pages"], include_in_schema=False)
log = get_logger("pages")

# Lazy-initialized templates (set by main.py after app creation)
_templates: Optional[Jinja2Templates] = None


def set_templates(templates: Jinja2Templates) -> None:
    global _templates
    _templates = templates
    templates.env.filters["pct"] = format_percentage
    templates.env.filters["signed"] = format_signed
    templates.env.filters["one_decimal"] = format_one_decimal
    templates.env.filters["local_time"] = format_local_time


def format_percentage(fraction: Optional[float]) -> str:
    """0.456 -> '45.6%'"""
    return f"{(fraction or 0.0) * 100:.1f}%"


def format_signed(value: Optional[int]) -> str:
    value = value or 0
    return f"+{value}" if value > 0 else str(value)


def format_one_decimal(value: Optional[float]) -> str:
    return f"{(value or 0.0):.1f}"


def format_local_time(value: Optional[datetime]) -> str:
    if value is None:
        return "TBD"
    local = value.astimezone(pytz.timezone(settings.display_timezone))
    return local.strftime("%b %d, %I:%M %p")


def _render(request: Request, name: str, context: dict) -> HTMLResponse:
    if _templates is None:
        log.error("templates_not_configured", template=name)
        return HTMLResponse("<h1>Templates not configured</h1>", status_code=500)
    context = {"tournament_name": settings.tournament_name, **context}
    return _templates.TemplateResponse(request, name, context)


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    recent, upcoming = await asyncio.gather(
        asyncio.to_thread(MatchesService.get_recent),
        asyncio.to_thread(MatchesService.get_upcoming),
    )
    return _render(request, "home.html", {"recent": recent.data, "upcoming": upcoming.data})


@router.get("/teams", response_class=HTMLResponse)
async def teams_page(
    request: Request,
    sort_by: TeamSortField = Query(TeamSortField.WINS),
    search: str = Query(""),
) -> HTMLResponse:
    resp = await asyncio.to_thread(StandingsService.get_standings, sort_by, search)
    return _render(
        request,
        "teams.html",
        {
            "standings": resp.data,
            "sort_by": sort_by.value,
            "sort_options": [option.value for option in TeamSortField],
            "search": search,
            "failed": resp.status == ApiStatus.ERROR,
        },
    )


@router.get("/teams/{team_id}", response_class=HTMLResponse)
async def team_page(request: Request, team_id: str) -> HTMLResponse:
    resp = await asyncio.to_thread(StandingsService.get_team, team_id)
    if resp.status == ApiStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Team not found")
    return _render(request, "team_detail.html", {"detail": resp.data})


@router.get("/players", response_class=HTMLResponse)
async def players_page(
    request: Request,
    search: str = Query(""),
    position: str = Query(ALL_POSITIONS),
    sort_field: SortField = Query(SortField.RANK),
    sort_direction: SortDirection = Query(SortDirection.DESC),
    page: int = Query(1, ge=1),
) -> HTMLResponse:
    resp = await asyncio.to_thread(
        PlayersService.list_players,
        search,
        position,
        sort_field,
        sort_direction,
        page,
        settings.players_page_size,
    )
    return _render(
        request,
        "players.html",
        {
            "result": resp.data,
            "search": search,
            "position": position,
            "positions": POSITIONS,
            "sort_field": sort_field.value,
            "sort_direction": sort_direction.value,
            "sort_fields": [field.value for field in SortField],
        },
    )


@router.get("/players/{player_id}", response_class=HTMLResponse)
async def player_page(request: Request, player_id: str) -> HTMLResponse:
    resp = await asyncio.to_thread(PlayersService.get_player, player_id)
    if resp.status == ApiStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Player not found")
    return _render(request, "player_detail.html", {"profile": resp.data})


@router.get("/awards", response_class=HTMLResponse)
async def awards_page(request: Request) -> HTMLResponse:
    resp = await asyncio.to_thread(AwardsService.get_awards)
    return _render(request, "awards.html", {"awards": resp.data})


@router.get("/leaders", response_class=HTMLResponse)
async def leaders_page(request: Request) -> HTMLResponse:
    resp = await asyncio.to_thread(AwardsService.get_stat_leaders)
    return _render(request, "leaders.html", {"leaders": resp.data})
