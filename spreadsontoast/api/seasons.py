"""Season listing endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.api.deps import validate_sport
from spreadsontoast.database import get_db
from spreadsontoast.schemas.catalog import SeasonResponse
from spreadsontoast.services.catalog import get_available_seasons

router = APIRouter(prefix="/seasons")


@router.get("", response_model=list[SeasonResponse], response_model_by_alias=True)
async def list_seasons(
    sport: str = Depends(validate_sport),
    db: AsyncSession = Depends(get_db),
) -> list[SeasonResponse]:
    """Upcoming and active seasons for a sport."""
    seasons = await get_available_seasons(db, sport)
    return [SeasonResponse.model_validate(season) for season in seasons]
