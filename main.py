"""
UPA Tournament Dashboard

Serves the tournament pages (standings, team pages, players leaderboard,
player profiles, awards race, stat leaders) and the read-only JSON API under /v1.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000

Environment Variables:
    DATABASE_URL - PostgreSQL connection for the tournament schema
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from api import pages
from api.v1 import awards, matches, players, teams
from core.correlation_middleware import CorrelationMiddleware
from core.logging import get_logger, setup_logging
from core.middleware import setup_middleware
from core.settings import settings
from db.base import close_db, init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
        tournament=settings.tournament_name,
    )
    log = get_logger()
    log.info("dashboard_starting", development_mode=settings.development_mode)

    init_db()
    log.info("database_initialized")

    yield

    close_db()
    log.info("dashboard_stopped")


app = FastAPI(
    title="UPA Tournament Dashboard",
    description="Standings, leaderboards and awards for the tournament",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.development_mode else None,
    redoc_url=None,
)

# Middlewares (first added = outermost)
app.add_middleware(CorrelationMiddleware)
setup_middleware(app)

# Templates
_templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
pages.set_templates(_templates)

app.include_router(teams.router, prefix="/v1")
app.include_router(players.router, prefix="/v1")
app.include_router(awards.router, prefix="/v1")
app.include_router(matches.router, prefix="/v1")
app.include_router(pages.router)


@app.get("/ping")
async def ping():
    return {"message": "Pong!"}
