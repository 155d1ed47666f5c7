"""Cron endpoints: scheduled syncs triggered over HTTP.

All routes require `Authorization: Bearer <CRON_SECRET>`.
"""

from datetime import date

import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.api.deps import get_mlb_client, get_today, require_cron_secret
from spreadsontoast.database import get_db
from spreadsontoast.services.mlb.mlb_api import MLBStatsAPIClient
from spreadsontoast.tasks.sync import run_schedule_sync, run_seed_ballparks, run_standings_sync

logger = structlog.get_logger()

router = APIRouter(prefix="/cron", dependencies=[Depends(require_cron_secret)])


@router.get("/sync-schedule")
async def sync_schedule(
    db: AsyncSession = Depends(get_db),
    mlb_client: MLBStatsAPIClient = Depends(get_mlb_client),
    today: date = Depends(get_today),
) -> dict:
    """Refresh every team's season schedule while the season is running."""
    try:
        return await run_schedule_sync(db, mlb_client, today)
    except Exception as e:
        logger.error("Schedule sync failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/sync-standings")
async def sync_standings(
    db: AsyncSession = Depends(get_db),
    mlb_client: MLBStatsAPIClient = Depends(get_mlb_client),
    today: date = Depends(get_today),
) -> dict:
    """Store today's standings snapshot while the season is running."""
    try:
        return await run_standings_sync(db, mlb_client, today)
    except Exception as e:
        logger.error("Standings sync failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/seed-ballparks")
async def seed_ballparks(db: AsyncSession = Depends(get_db)) -> dict:
    try:
        return await run_seed_ballparks(db)
    except Exception as e:
        logger.error("Ballpark seed failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))
