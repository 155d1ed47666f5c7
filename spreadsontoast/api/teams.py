"""Team listing, detail and strength-of-schedule endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.api.deps import date_query, get_today, validate_sport
from spreadsontoast.api.errors import NotFoundError
from spreadsontoast.database import get_db
from spreadsontoast.schemas.catalog import TeamResponse
from spreadsontoast.schemas.schedule_difficulty import ScheduleDifficultyData
from spreadsontoast.schemas.standings import TeamDetailResponse
from spreadsontoast.services.catalog import get_teams_by_sport
from spreadsontoast.services.mlb.schedule_difficulty import get_schedule_difficulty
from spreadsontoast.services.standings import get_team_detail_data

router = APIRouter(prefix="/teams")


@router.get("", response_model=list[TeamResponse], response_model_by_alias=True)
async def list_teams(
    sport: str = Depends(validate_sport),
    db: AsyncSession = Depends(get_db),
) -> list[TeamResponse]:
    teams = await get_teams_by_sport(db, sport)
    return [TeamResponse.model_validate(team) for team in teams]


@router.get("/{team_id}/detail", response_model=TeamDetailResponse, response_model_by_alias=True)
async def team_detail(
    team_id: int = Path(..., description="Team ID"),
    season: str | None = Query(default=None, description="Season year; defaults to the current year"),
    selected_date: date | None = Depends(date_query),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> TeamDetailResponse:
    """Current snapshot plus the team's season history."""
    detail = await get_team_detail_data(db, team_id, season or str(today.year), selected_date)
    if detail is None:
        raise NotFoundError("Team standings not found")
    return detail


@router.get(
    "/{team_id}/schedule-difficulty",
    response_model=ScheduleDifficultyData,
    response_model_by_alias=True,
)
async def schedule_difficulty(
    team_id: int = Path(..., description="Team ID"),
    season: str | None = Query(default=None, description="Season year; defaults to the current year"),
    as_of_date: date | None = Depends(date_query),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> ScheduleDifficultyData:
    """Opponent strength of played and remaining games, ranked league-wide."""
    data = await get_schedule_difficulty(
        db,
        team_id,
        season or str(today.year),
        as_of_date or today,
    )
    if data is None:
        raise NotFoundError("Team not found")
    return data
