"""Sign slide schemas."""

from typing import Literal, Union

from spreadsontoast.schemas.base import CamelModel
from spreadsontoast.schemas.standings import TeamColors


class StandingsSlideTeam(CamelModel):
    abbreviation: str
    colors: TeamColors | None = None
    games_back: str
    losses: int
    name: str
    rank: int
    wins: int


class StandingsSlide(CamelModel):
    slide_type: Literal["standings"] = "standings"
    title: str
    teams: list[StandingsSlideTeam]


class BoxScoreTeam(CamelModel):
    abbreviation: str
    colors: TeamColors | None = None
    name: str
    runs: int
    hits: int
    errors: int


class LastGameSlide(CamelModel):
    """Box score of a finished game; away team listed first."""

    slide_type: Literal["lastGame"] = "lastGame"
    game_date: str
    away_team: BoxScoreTeam
    home_team: BoxScoreTeam


class SlideTeam(CamelModel):
    abbreviation: str
    colors: TeamColors | None = None
    name: str


class NextGameSlide(CamelModel):
    slide_type: Literal["nextGame"] = "nextGame"
    game_date: str  # ISO datetime, sign converts to local time
    is_home: bool
    team: SlideTeam
    opponent: SlideTeam
    venue: str


class OpenerCountdownSlide(CamelModel):
    slide_type: Literal["openerCountdown"] = "openerCountdown"
    days_until: int
    game_date: str
    team: SlideTeam
    opponent: SlideTeam
    venue: str


Slide = Union[StandingsSlide, LastGameSlide, NextGameSlide, OpenerCountdownSlide]


class SlidesResponse(CamelModel):
    generated_at: str
    slides: list[Slide]
    message: str | None = None
