"""Standings board endpoints for the web UI."""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.api.deps import get_today, parse_date
from spreadsontoast.api.errors import BadRequestError
from spreadsontoast.database import get_db
from spreadsontoast.schemas.standings import SeasonWithDates, StandingsBoardResponse
from spreadsontoast.services.standings import get_standings_board_data, get_started_seasons_with_dates

router = APIRouter(prefix="/standings")


@router.get("", response_model=StandingsBoardResponse, response_model_by_alias=True)
async def standings_board(
    season: str | None = Query(default=None, description="Season year, e.g. 2025"),
    date_str: str | None = Query(default=None, alias="date", description="YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db),
) -> StandingsBoardResponse:
    if not season:
        raise BadRequestError("Season is required")
    if not date_str:
        raise BadRequestError("Date is required")

    return await get_standings_board_data(db, season, parse_date(date_str))


@router.get("/seasons", response_model=list[SeasonWithDates], response_model_by_alias=True)
async def started_seasons(
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> list[SeasonWithDates]:
    """Seasons that have started, with the dates that have snapshots."""
    return await get_started_seasons_with_dates(db, today)
