"""Season and team listing schemas."""

from datetime import date

from spreadsontoast.schemas.base import CamelModel
from spreadsontoast.schemas.standings import TeamColors


class SeasonResponse(CamelModel):
    id: int
    season: str
    sport: str
    name: str
    start_date: date
    lock_date: date
    end_date: date
    status: str


class TeamResponse(CamelModel):
    id: int
    sport: str
    abbreviation: str
    city: str
    name: str
    conference: str
    division: str
    external_id: int | None = None
    colors: TeamColors | None = None
