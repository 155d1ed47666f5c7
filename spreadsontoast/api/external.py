"""External endpoints consumed by display signs and partner sites.

Every route requires `X-Api-Key`; sign routes also require `X-Sign-Id`.
"""

from datetime import date
from typing import Union

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.api.deps import date_query, get_today, require_api_key, require_sign_id
from spreadsontoast.api.errors import NotFoundError
from spreadsontoast.database import get_db
from spreadsontoast.schemas.sign import SignConfigResponse
from spreadsontoast.schemas.slides import SlidesResponse
from spreadsontoast.schemas.standings import DivisionStandingsResponse, NoStandingsResponse
from spreadsontoast.services.slides import get_sign, get_sign_config, get_sign_slides
from spreadsontoast.services.standings import get_division_standings

router = APIRouter(prefix="/external", dependencies=[Depends(require_api_key)])


def _no_data_suffix(requested: date | None) -> str:
    return requested.isoformat() if requested else "current season"


@router.get(
    "/mlb-standings",
    response_model=Union[DivisionStandingsResponse, NoStandingsResponse],
    response_model_by_alias=True,
)
async def mlb_standings(
    standings_date: date | None = Depends(date_query),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """
    Division standings, most recent snapshot on or before `date`.

    Without a date the current season's latest snapshot is returned.
    """
    standings = await get_division_standings(db, standings_date, today)
    if standings is None:
        return NoStandingsResponse(
            season=str((standings_date or today).year),
            message=f"No standings data available for {_no_data_suffix(standings_date)}",
        )
    return standings


@router.get("/sign/config", response_model=SignConfigResponse, response_model_by_alias=True)
async def sign_config(
    sign_id: str = Depends(require_sign_id),
    db: AsyncSession = Depends(get_db),
) -> SignConfigResponse:
    sign = await get_sign(db, sign_id)
    if sign is None:
        raise NotFoundError("Sign not found")
    return SignConfigResponse(config=get_sign_config(sign))


@router.get("/sign/slides", response_model=SlidesResponse, response_model_by_alias=True)
async def sign_slides(
    sign_id: str = Depends(require_sign_id),
    slide_date: date | None = Depends(date_query),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> SlidesResponse:
    """Slides for the sign's configured content, standings first."""
    sign = await get_sign(db, sign_id)
    if sign is None:
        raise NotFoundError("Sign not found")

    config = get_sign_config(sign)
    response = await get_sign_slides(db, config.content, slide_date=slide_date, today=today)
    if not response.slides:
        response.message = f"No data available for {_no_data_suffix(slide_date)}"
    return response
