from playhouse.pool import PooledPostgresqlDatabase
from playhouse.db_url import parse
from peewee import Model

from core.settings import settings

# Hosted Postgres; tables are owned by the tournament admin tooling
parsed_url = parse(settings.database_url)
db_name = parsed_url.pop('database')

db = PooledPostgresqlDatabase(
    db_name,
    max_connections=settings.db_max_connections,
    stale_timeout=settings.db_stale_timeout,
    **parsed_url
)

class BaseModel(Model):
    class Meta:
        database = db

# Function to initialize database connection
def init_db():
    """Verify the database is reachable and register the tournament models."""
    db.connect(reuse_if_open=True)

    # Read-only: the schema is managed upstream, so no create_tables here
    from .models.tournament import Team, Player, TeamRoster, Match, PlayerMatchStat  # noqa: F401

    db.close()

# Function to close database connection
def close_db():
    """Close database connection and drain the pool."""
    if not db.is_closed():
        db.close()
    db.close_all()
