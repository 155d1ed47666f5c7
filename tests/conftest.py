"""Shared pytest fixtures: in-memory database, seeded MLB data, fake MLB client, test app."""

from datetime import date, datetime, timezone
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from spreadsontoast.api.deps import get_mlb_client, get_today
from spreadsontoast.config import settings
from spreadsontoast.database import Database, get_db
from spreadsontoast.main import create_app
from spreadsontoast.models import Game, Team
from spreadsontoast.services.catalog import seed_mlb_reference_data
from spreadsontoast.services.mlb.mlb_api import (
    MLBAPIError,
    MLBScheduleGame,
    MLBScheduleTeam,
    MLBStandingRecord,
    MLBTeamSchedule,
)

TODAY = date(2025, 6, 1)
AL_EAST_DIVISION_ID = 201

CRON_SECRET = "test-cron-secret"
API_KEY = "test-api-key"


class FakeMLBClient:
    """Stands in for MLBStatsAPIClient; returns canned data and records calls."""

    def __init__(self):
        self.standings: list[MLBStandingRecord] = []
        self.schedules: dict[int, list[MLBScheduleGame]] = {}
        self.failing_teams: set[int] = set()
        self.parse_failures: dict[int, list[tuple[int | None, str]]] = {}
        self.standings_calls: list[tuple[str, str | None]] = []
        self.schedule_calls: list[int] = []

    async def get_standings(self, season: str, standings_date: str | None = None) -> list[MLBStandingRecord]:
        self.standings_calls.append((season, standings_date))
        return list(self.standings)

    async def get_team_schedule(self, team_mlb_id: int, season: str) -> MLBTeamSchedule:
        self.schedule_calls.append(team_mlb_id)
        if team_mlb_id in self.failing_teams:
            raise MLBAPIError("MLB API error: 503 Service Unavailable")
        return MLBTeamSchedule(
            games=list(self.schedules.get(team_mlb_id, [])),
            failures=list(self.parse_failures.get(team_mlb_id, [])),
        )


def standing_record(
    external_id: int,
    wins: int,
    losses: int,
    runs_scored: int = 0,
    runs_allowed: int = 0,
    division_id: int = AL_EAST_DIVISION_ID,
    division_rank: int | None = None,
    name: str = "",
) -> MLBStandingRecord:
    return MLBStandingRecord(
        external_id=external_id,
        name=name,
        division_id=division_id,
        league_id=103,
        wins=wins,
        losses=losses,
        games_played=wins + losses,
        runs_scored=runs_scored,
        runs_allowed=runs_allowed,
        run_differential=runs_scored - runs_allowed,
        division_rank=division_rank,
    )


def schedule_game(
    game_pk: int,
    home_mlb_id: int,
    away_mlb_id: int,
    official_date: date | None,
    state: str = "Preview",
    home_score: int | None = None,
    away_score: int | None = None,
) -> MLBScheduleGame:
    return MLBScheduleGame(
        game_pk=game_pk,
        season="2025",
        official_date=official_date,
        game_date=datetime(2025, 6, 1, 23, 5, tzinfo=timezone.utc),
        game_type="RegularSeason",
        home=MLBScheduleTeam(mlb_id=home_mlb_id, name=f"Team {home_mlb_id}", score=home_score),
        away=MLBScheduleTeam(mlb_id=away_mlb_id, name=f"Team {away_mlb_id}", score=away_score),
        abstract_game_state=state,
    )


def game_row(
    game_pk: int,
    home: Team,
    away: Team,
    official_date: date,
    state: str = "Preview",
    game_type: str = "RegularSeason",
    **fields,
) -> Game:
    return Game(
        game_pk=game_pk,
        season=str(official_date.year),
        sport="MLB",
        official_date=official_date,
        game_date=datetime(official_date.year, official_date.month, official_date.day, 23, 5, tzinfo=timezone.utc),
        game_type=game_type,
        home_team_id=home.id,
        away_team_id=away.id,
        home_team_mlb_id=home.external_id,
        away_team_mlb_id=away.external_id,
        home_team_name=home.full_name,
        away_team_name=away.full_name,
        abstract_game_state=state,
        **fields,
    )


@pytest.fixture
async def db() -> AsyncGenerator[Database, None]:
    """Fresh in-memory SQLite database per test."""
    database = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite's own transaction handling breaks SAVEPOINT; emit BEGIN ourselves
    @event.listens_for(database.engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(database.engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def session(db: Database) -> AsyncGenerator[AsyncSession, None]:
    async with db.session() as session:
        yield session


@pytest.fixture
async def seeded(session: AsyncSession) -> AsyncSession:
    """Session with the 30 teams, the 2025 season and 2025 lines."""
    await seed_mlb_reference_data(session, "2025", today=TODAY)
    return session


@pytest.fixture
async def teams(seeded: AsyncSession) -> dict[str, Team]:
    result = await seeded.scalars(select(Team))
    return {team.abbreviation: team for team in result.all()}


@pytest.fixture
def mlb_client() -> FakeMLBClient:
    return FakeMLBClient()


@pytest.fixture
def today() -> list[date]:
    """Mutable holder so a test can move the app's clock."""
    return [TODAY]


@pytest.fixture
def secrets(monkeypatch):
    monkeypatch.setattr(settings, "cron_secret", CRON_SECRET)
    monkeypatch.setattr(settings, "external_api_key", API_KEY)


@pytest.fixture
async def client(
    seeded: AsyncSession,
    mlb_client: FakeMLBClient,
    today: list[date],
    secrets,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, bound to the seeded test session."""
    app = create_app()

    async def override_get_db():
        yield seeded

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mlb_client] = lambda: mlb_client
    app.dependency_overrides[get_today] = lambda: today[0]

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
