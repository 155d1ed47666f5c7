"""Ballpark seeding."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.database import upsert, utcnow
from spreadsontoast.models import Ballpark, Team
from spreadsontoast.services.mlb.ingest import SyncResult
from spreadsontoast.static_data import BALLPARKS

logger = structlog.get_logger()


async def seed_ballparks(session: AsyncSession) -> SyncResult:
    """Upsert all 30 ballparks by MLB venue ID, matching teams by abbreviation."""
    teams = {
        team.abbreviation: team
        for team in (await session.scalars(select(Team).where(Team.sport == "MLB"))).all()
    }
    existing = set((await session.scalars(select(Ballpark.mlb_venue_id))).all())

    result = SyncResult()
    for park in BALLPARKS:
        team = teams.get(park["team"])
        if team is None:
            result.errors.append(f"No team found for abbreviation {park['team']} ({park['name']})")
            continue

        values = {key: value for key, value in park.items() if key != "team"}
        values.update(team_id=team.id, sport="MLB")

        try:
            async with session.begin_nested():
                stmt = upsert(session, Ballpark).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=["mlb_venue_id"],
                    set_={**values, "updated_at": utcnow()},
                )
                await session.execute(stmt)
        except Exception as e:
            logger.warning("Ballpark seed failed", venue=park["name"], error=str(e))
            result.errors.append(f"Error seeding ballpark {park['name']}: {e}")
            continue

        if park["mlb_venue_id"] in existing:
            result.updated += 1
        else:
            result.created += 1

    await session.commit()

    logger.info(
        "Seeded ballparks",
        created=result.created,
        updated=result.updated,
        errors=len(result.errors),
    )
    return result
