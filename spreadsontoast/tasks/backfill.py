"""Backfill historical standings snapshots or a season's schedule.

Usage:
    python -m spreadsontoast.tasks.backfill standings --season 2025 --start 2025-03-27 --end 2025-09-28
    python -m spreadsontoast.tasks.backfill schedule --season 2025 [--team NYY]
"""

import argparse
import asyncio
from datetime import date, datetime, timedelta

import structlog
from sqlalchemy import select

from spreadsontoast.config import settings
from spreadsontoast.database import Database
from spreadsontoast.logging import configure_logging
from spreadsontoast.models import Team
from spreadsontoast.services.mlb.ingest import MLBDataIngestor, SyncResult
from spreadsontoast.services.mlb.mlb_api import MLBAPIError, MLBStatsAPIClient

logger = structlog.get_logger()


def date_range(start: date, end: date):
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


async def backfill_standings(
    ingestor: MLBDataIngestor,
    season: str,
    start: date,
    end: date,
    delay: float | None = None,
) -> SyncResult:
    """
    Sync standings one day at a time, oldest first.

    A day whose fetch fails is recorded in the result and skipped; the
    remaining days still run.
    """
    delay = settings.schedule_request_delay if delay is None else delay
    total = SyncResult()

    for day in date_range(start, end):
        label = day.isoformat()
        try:
            result = await ingestor.sync_mlb_standings(season, as_of_date=day, date_label=label)
        except MLBAPIError as e:
            logger.warning("Standings backfill day failed", date=label, error=str(e))
            total.errors.append(f"Error fetching standings for {label}: {e}")
            continue

        total.merge(result)
        logger.info("Backfilled standings", date=label, created=result.created, updated=result.updated)
        if delay and day < end:
            await asyncio.sleep(delay)

    return total


async def run_standings(season: str, start: date, end: date) -> SyncResult:
    db = Database()
    try:
        async with db.session() as session:
            return await backfill_standings(MLBDataIngestor(session, MLBStatsAPIClient()), season, start, end)
    finally:
        await db.dispose()


async def backfill_schedule(
    ingestor: MLBDataIngestor,
    season: str,
    team_abbreviation: str | None = None,
) -> SyncResult:
    """Sync every team's schedule, or only one team's when an abbreviation is given."""
    if team_abbreviation is None:
        return await ingestor.sync_all_schedules(season)

    team = await ingestor.session.scalar(
        select(Team).where(Team.abbreviation == team_abbreviation.upper())
    )
    if team is None or team.external_id is None:
        return SyncResult(errors=[f"No team found for {team_abbreviation}"])
    return await ingestor.sync_team_schedule(team, season)


async def run_schedule(season: str, team_abbreviation: str | None = None) -> SyncResult:
    db = Database()
    try:
        async with db.session() as session:
            return await backfill_schedule(MLBDataIngestor(session, MLBStatsAPIClient()), season, team_abbreviation)
    finally:
        await db.dispose()


def _iso_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a YYYY-MM-DD date") from None


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Backfill MLB standings snapshots or schedules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Every day of the 2025 regular season
  python -m spreadsontoast.tasks.backfill standings --season 2025 --start 2025-03-27 --end 2025-09-28

  # Full 2025 schedule for all teams
  python -m spreadsontoast.tasks.backfill schedule --season 2025

  # Only the Yankees
  python -m spreadsontoast.tasks.backfill schedule --season 2025 --team NYY
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    standings = subparsers.add_parser("standings", help="Day-by-day standings snapshots")
    standings.add_argument("--season", type=str, required=True, help="Season year, e.g. 2025")
    standings.add_argument("--start", type=_iso_date, required=True, help="First day (YYYY-MM-DD)")
    standings.add_argument("--end", type=_iso_date, required=True, help="Last day (YYYY-MM-DD)")

    schedule = subparsers.add_parser("schedule", help="Every team's season schedule")
    schedule.add_argument("--season", type=str, required=True, help="Season year, e.g. 2025")
    schedule.add_argument("--team", type=str, default=None, metavar="ABBR", help="Only this team, e.g. NYY")

    args = parser.parse_args(argv)
    if args.command == "standings" and args.start > args.end:
        parser.error("--start must be on or before --end")

    configure_logging()
    if args.command == "standings":
        result = asyncio.run(run_standings(args.season, args.start, args.end))
    else:
        result = asyncio.run(run_schedule(args.season, args.team))

    for error in result.errors:
        logger.warning("Backfill error", error=error)
    print(f"\nResults: {result.to_dict()}")


if __name__ == "__main__":
    main()
