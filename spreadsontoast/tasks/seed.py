"""Seed reference data: teams, the season row, win-total lines and ballparks.

Usage:
    python -m spreadsontoast.tasks.seed --season 2026
"""

import argparse
import asyncio
from datetime import date

import structlog

from spreadsontoast.database import Database
from spreadsontoast.logging import configure_logging
from spreadsontoast.services.ballparks import seed_ballparks
from spreadsontoast.services.catalog import seed_mlb_reference_data
from spreadsontoast.services.mlb.ingest import SyncResult

logger = structlog.get_logger()


async def seed(season: str, include_ballparks: bool = True, db: Database | None = None) -> SyncResult:
    owns_db = db is None
    db = db or Database()
    try:
        async with db.session() as session:
            result = await seed_mlb_reference_data(session, season)
            if include_ballparks:
                result.merge(await seed_ballparks(session))
        return result
    finally:
        if owns_db:
            await db.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed MLB teams, season, lines and ballparks")
    parser.add_argument(
        "--season",
        type=str,
        default=str(date.today().year),
        help="Season year (default: current year)",
    )
    parser.add_argument(
        "--skip-ballparks",
        action="store_true",
        help="Only seed teams, the season row and lines",
    )
    args = parser.parse_args(argv)

    configure_logging()
    result = asyncio.run(seed(args.season, include_ballparks=not args.skip_ballparks))

    for error in result.errors:
        logger.warning("Seed error", error=error)
    print(f"\nResults: {result.to_dict()}")


if __name__ == "__main__":
    main()
