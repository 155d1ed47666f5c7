"""Season-gated sync jobs shared by the cron endpoints and Celery beat."""

import asyncio
from datetime import date

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.celery_app import celery_app
from spreadsontoast.database import Database
from spreadsontoast.services.ballparks import seed_ballparks
from spreadsontoast.services.catalog import get_season
from spreadsontoast.services.mlb.ingest import MLBDataIngestor
from spreadsontoast.services.mlb.mlb_api import MLBStatsAPIClient

logger = structlog.get_logger()


async def check_season_window(session: AsyncSession, today: date) -> tuple[str, dict | None]:
    """
    Resolve the current season and decide whether syncing should run.

    Returns:
        (season, skip_response); skip_response is None when today is in season
    """
    season = str(today.year)
    season_row = await get_season(session, season)

    if season_row is None:
        return season, {"message": "No MLB season found for current year", "skipped": True, "season": season}
    if today < season_row.start_date:
        return season, {
            "message": "Season has not started yet",
            "skipped": True,
            "season": season,
            "startDate": season_row.start_date.isoformat(),
        }
    if today > season_row.end_date:
        return season, {
            "message": "Season has ended",
            "skipped": True,
            "season": season,
            "endDate": season_row.end_date.isoformat(),
        }
    return season, None


async def run_standings_sync(
    session: AsyncSession,
    mlb_client: MLBStatsAPIClient,
    today: date,
) -> dict:
    """Sync today's standings snapshot when today is inside the season window."""
    season, skipped = await check_season_window(session, today)
    if skipped:
        logger.info("Skipping standings sync", **skipped)
        return skipped

    result = await MLBDataIngestor(session, mlb_client).sync_mlb_standings(season, as_of_date=today)
    return {"message": "Standings synced successfully", "season": season, **result.to_dict()}


async def run_schedule_sync(
    session: AsyncSession,
    mlb_client: MLBStatsAPIClient,
    today: date,
) -> dict:
    """Sync every team's schedule when today is inside the season window."""
    season, skipped = await check_season_window(session, today)
    if skipped:
        logger.info("Skipping schedule sync", **skipped)
        return skipped

    result = await MLBDataIngestor(session, mlb_client).sync_all_schedules(season)
    return {"message": "Schedule synced successfully", "season": season, **result.to_dict()}


async def run_seed_ballparks(session: AsyncSession) -> dict:
    result = await seed_ballparks(session)
    return {"message": "Ballparks seeded successfully", **result.to_dict()}


async def _run_with_database(job) -> dict:
    db = Database()
    try:
        async with db.session() as session:
            return await job(session, MLBStatsAPIClient(), date.today())
    finally:
        await db.dispose()


@celery_app.task(name="spreadsontoast.tasks.sync.sync_standings")
def sync_standings() -> dict:
    """Daily standings snapshot."""
    logger.info("Starting standings sync")
    result = asyncio.run(_run_with_database(run_standings_sync))
    logger.info("Completed standings sync", message=result.get("message"))
    return result


@celery_app.task(name="spreadsontoast.tasks.sync.sync_schedule")
def sync_schedule() -> dict:
    """Daily schedule refresh."""
    logger.info("Starting schedule sync")
    result = asyncio.run(_run_with_database(run_schedule_sync))
    logger.info("Completed schedule sync", message=result.get("message"))
    return result
