"""Teams, seasons and lines: lookups plus the reference-data seed."""

from datetime import date

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.database import upsert, utcnow
from spreadsontoast.models import Season, Team, TeamLine
from spreadsontoast.models.enums import SeasonStatus
from spreadsontoast.services.mlb.ingest import SyncResult
from spreadsontoast.static_data import MLB_LINES, MLB_SEASONS, MLB_TEAMS

logger = structlog.get_logger()


async def get_teams_by_sport(session: AsyncSession, sport: str) -> list[Team]:
    result = await session.scalars(select(Team).where(Team.sport == sport).order_by(Team.name))
    return list(result.all())


async def get_available_seasons(session: AsyncSession, sport: str) -> list[Season]:
    """Seasons still open for picks or in progress."""
    result = await session.scalars(
        select(Season)
        .where(
            Season.sport == sport,
            Season.status.in_([SeasonStatus.UPCOMING.value, SeasonStatus.ACTIVE.value]),
        )
        .order_by(Season.start_date)
    )
    return list(result.all())


async def get_season(session: AsyncSession, season: str, sport: str = "MLB") -> Season | None:
    return await session.scalar(
        select(Season).where(Season.season == season, Season.sport == sport)
    )


def season_status(start_date: date, end_date: date, today: date) -> SeasonStatus:
    if today < start_date:
        return SeasonStatus.UPCOMING
    if today > end_date:
        return SeasonStatus.COMPLETED
    return SeasonStatus.ACTIVE


async def seed_mlb_reference_data(
    session: AsyncSession,
    season: str,
    today: date | None = None,
) -> SyncResult:
    """
    Upsert the 30 MLB teams, the season row and the season's lines.

    Counts in the result cover teams and lines; the season row is
    upserted but not counted.
    """
    result = SyncResult()
    today = today or date.today()

    existing = set((await session.scalars(select(Team.abbreviation))).all())
    for abbreviation, city, name, conference, division, external_id, primary, secondary in MLB_TEAMS:
        values = {
            "sport": "MLB",
            "abbreviation": abbreviation,
            "city": city,
            "name": name,
            "conference": conference,
            "division": division,
            "external_id": external_id,
            "primary_color": primary,
            "secondary_color": secondary,
        }
        stmt = upsert(session, Team).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["abbreviation"],
            set_={**values, "updated_at": utcnow()},
        )
        await session.execute(stmt)
        if abbreviation in existing:
            result.updated += 1
        else:
            result.created += 1

    if season in MLB_SEASONS:
        name, start_date, lock_date, end_date = MLB_SEASONS[season]
        values = {
            "season": season,
            "sport": "MLB",
            "name": name,
            "start_date": start_date,
            "lock_date": lock_date,
            "end_date": end_date,
            "status": season_status(start_date, end_date, today).value,
        }
        stmt = upsert(session, Season).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["season", "sport"],
            set_={**values, "updated_at": utcnow()},
        )
        await session.execute(stmt)
    else:
        result.errors.append(f"No season dates known for {season}")

    team_ids = {
        abbreviation: team_id
        for abbreviation, team_id in (
            await session.execute(select(Team.abbreviation, Team.id))
        ).all()
    }
    existing_lines = set(
        (await session.scalars(select(TeamLine.team_id).where(TeamLine.season == season))).all()
    )
    for abbreviation, line in MLB_LINES.get(season, {}).items():
        team_id = team_ids.get(abbreviation)
        if team_id is None:
            result.errors.append(f"No team found for {abbreviation}")
            continue
        stmt = upsert(session, TeamLine).values(season=season, sport="MLB", team_id=team_id, line=line)
        stmt = stmt.on_conflict_do_update(
            index_elements=["season", "sport", "team_id"],
            set_={"line": line, "updated_at": utcnow()},
        )
        await session.execute(stmt)
        if team_id in existing_lines:
            result.updated += 1
        else:
            result.created += 1

    await session.commit()

    logger.info(
        "Seeded MLB reference data",
        season=season,
        created=result.created,
        updated=result.updated,
        errors=len(result.errors),
    )
    return result
