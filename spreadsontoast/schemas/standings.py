"""Standings view-model schemas."""

from pydantic import BaseModel

from spreadsontoast.schemas.base import CamelModel


class TeamColors(BaseModel):
    primary: str
    secondary: str


class DivisionStandingsTeam(CamelModel):
    abbreviation: str
    colors: TeamColors | None = None
    games_back: str
    losses: int
    name: str
    rank: int
    wins: int


class DivisionStandingsEntry(CamelModel):
    league: str  # "National League"
    name: str  # "NL East"
    teams: list[DivisionStandingsTeam]


class DivisionStandingsResponse(CamelModel):
    season: str
    as_of_date: str
    divisions: list[DivisionStandingsEntry]


class NoStandingsResponse(CamelModel):
    season: str
    divisions: list[DivisionStandingsEntry] = []
    message: str


class StandingsBoardRow(CamelModel):
    """One team on the over/under standings board."""

    team_id: int
    abbreviation: str
    name: str
    conference: str
    division: str
    wins: int
    losses: int
    line: float
    pythagorean_wins: float  # full-season pythagorean pace, or projected wins


class StandingsBoardResponse(CamelModel):
    season: str
    as_of_date: str | None
    standings: list[StandingsBoardRow]


class SeasonWithDates(CamelModel):
    id: int
    name: str
    season: str
    dates: list[str]
    latest_date: str | None


class Streak(CamelModel):
    code: str
    count: int
    type: str


class SituationalRecord(CamelModel):
    label: str
    wins: int
    losses: int
    pct: float


class WinProfile(CamelModel):
    offense_contribution: float
    pitching_contribution: float
    situational: list[SituationalRecord]


class TeamDetail(CamelModel):
    id: int
    abbreviation: str
    city: str
    name: str
    conference: str
    division: str
    season: str
    line: float
    wins: int
    losses: int
    games_played: int
    projected_wins: float
    pythagorean_wins: float | None = None
    division_rank: int | None = None
    league_rank: int | None = None
    games_back: str | None = None
    wild_card_rank: int | None = None
    wild_card_games_back: str | None = None
    runs_scored: int | None = None
    runs_allowed: int | None = None
    run_differential: int | None = None
    streak: Streak | None = None
    win_profile: WinProfile | None = None


class TeamHistoryPoint(CamelModel):
    date: str
    wins: int
    losses: int
    games_played: int
    projected_wins: float
    pythagorean_wins: float | None = None
    run_differential: int | None = None


class TeamDetailResponse(CamelModel):
    current: TeamDetail
    history: list[TeamHistoryPoint]
