"""Tests for the sync jobs, Celery wiring and CLI helpers."""

from datetime import date

import pytest
from sqlalchemy import func, select

from spreadsontoast.celery_app import celery_app
from spreadsontoast.models import Game, Season, Team, TeamLine, TeamStanding
from spreadsontoast.services.mlb.ingest import MLBDataIngestor
from spreadsontoast.tasks.backfill import backfill_schedule, backfill_standings, date_range, main as backfill_main
from spreadsontoast.tasks.seed import seed
from spreadsontoast.tasks.sync import check_season_window
from tests.conftest import schedule_game, standing_record


class TestSeasonWindow:
    @pytest.mark.parametrize(
        "today,message",
        [
            (date(2025, 3, 26), "Season has not started yet"),
            (date(2025, 9, 29), "Season has ended"),
            (date(2024, 6, 1), "No MLB season found for current year"),
        ],
    )
    async def test_skips_outside_window(self, seeded, today, message):
        season, skipped = await check_season_window(seeded, today)

        assert season == str(today.year)
        assert skipped["message"] == message
        assert skipped["skipped"] is True

    @pytest.mark.parametrize("today", [date(2025, 3, 27), date(2025, 9, 28)])
    async def test_window_is_inclusive(self, seeded, today):
        assert await check_season_window(seeded, today) == ("2025", None)


class TestCelery:
    def test_beat_runs_both_syncs_daily(self):
        schedule = celery_app.conf.beat_schedule

        assert schedule["sync-standings"]["task"] == "spreadsontoast.tasks.sync.sync_standings"
        assert schedule["sync-schedule"]["task"] == "spreadsontoast.tasks.sync.sync_schedule"
        for entry in schedule.values():
            assert entry["schedule"].hour == {10}
            assert entry["schedule"].minute == {0}

    def test_tasks_registered(self):
        import spreadsontoast.tasks.sync  # noqa: F401

        assert "spreadsontoast.tasks.sync.sync_standings" in celery_app.tasks
        assert "spreadsontoast.tasks.sync.sync_schedule" in celery_app.tasks


class TestSeed:
    async def test_seed_is_idempotent(self, db):
        first = await seed("2025", db=db)
        second = await seed("2025", db=db)

        assert first.errors == []
        assert first.created == 30 + 30 + 30  # teams, lines, ballparks
        assert (second.created, second.updated) == (0, 90)

        async with db.session() as session:
            assert await session.scalar(select(func.count()).select_from(Team)) == 30
            assert await session.scalar(select(func.count()).select_from(TeamLine)) == 30
            assert await session.scalar(select(func.count()).select_from(Season)) == 1

    async def test_unknown_season_is_reported(self, db):
        result = await seed("1999", include_ballparks=False, db=db)

        assert result.errors == ["No season dates known for 1999"]
        assert result.created == 30


class TestBackfill:
    def test_date_range_is_inclusive(self):
        assert list(date_range(date(2025, 4, 1), date(2025, 4, 3))) == [
            date(2025, 4, 1),
            date(2025, 4, 2),
            date(2025, 4, 3),
        ]

    async def test_standings_day_by_day(self, seeded, mlb_client):
        mlb_client.standings = [standing_record(147, 3, 1), standing_record(111, 2, 2)]
        ingestor = MLBDataIngestor(seeded, mlb_client)

        result = await backfill_standings(ingestor, "2025", date(2025, 4, 1), date(2025, 4, 3), delay=0)

        assert (result.created, result.updated, result.errors) == (6, 0, [])
        assert [label for _, label in mlb_client.standings_calls] == [
            "2025-04-01",
            "2025-04-02",
            "2025-04-03",
        ]
        dates = (await seeded.scalars(select(TeamStanding.date).distinct())).all()
        assert sorted(dates) == [date(2025, 4, 1), date(2025, 4, 2), date(2025, 4, 3)]

    def test_rejects_reversed_range(self):
        with pytest.raises(SystemExit):
            backfill_main(["standings", "--season", "2025", "--start", "2025-05-01", "--end", "2025-04-01"])

    def test_rejects_bad_date(self):
        with pytest.raises(SystemExit):
            backfill_main(["standings", "--season", "2025", "--start", "2025-13-01", "--end", "2025-04-01"])

    async def test_single_team_schedule(self, seeded, mlb_client):
        mlb_client.schedules = {147: [schedule_game(5001, 147, 111, date(2025, 4, 1))]}

        result = await backfill_schedule(MLBDataIngestor(seeded, mlb_client), "2025", "nyy")

        assert (result.created, result.errors) == (1, [])
        assert mlb_client.schedule_calls == [147]
        assert await seeded.scalar(select(func.count()).select_from(Game)) == 1

    async def test_single_team_unknown(self, seeded, mlb_client):
        result = await backfill_schedule(MLBDataIngestor(seeded, mlb_client), "2025", "XYZ")

        assert result.errors == ["No team found for XYZ"]
        assert mlb_client.schedule_calls == []
