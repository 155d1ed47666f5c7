"""MLB Stats API client for fetching standings and team schedules."""

import httpx
import structlog
from datetime import datetime, date
from dataclasses import dataclass, field
from typing import Any

from spreadsontoast.config import settings
from spreadsontoast.models.enums import GameState, GameType

logger = structlog.get_logger()

# League IDs
AL_LEAGUE_ID = 103
NL_LEAGUE_ID = 104

# Regular season plus every postseason round
SCHEDULE_GAME_TYPES = "R,F,D,L,W"


class MLBAPIError(Exception):
    """The MLB Stats API could not be reached or answered with an error."""


@dataclass
class MLBStandingRecord:
    """One team's row from the standings endpoint."""
    external_id: int
    name: str
    division_id: int | None
    league_id: int | None
    wins: int
    losses: int
    games_played: int
    runs_scored: int
    runs_allowed: int
    run_differential: int
    division_rank: int | None = None
    league_rank: int | None = None
    sport_rank: int | None = None
    wild_card_rank: int | None = None
    games_back: str | None = None
    division_games_back: str | None = None
    league_games_back: str | None = None
    sport_games_back: str | None = None
    wild_card_games_back: str | None = None
    streak_code: str | None = None
    streak_count: int | None = None
    streak_type: str | None = None
    clinched: bool = False
    clinch_indicator: str | None = None
    division_champ: bool | None = None
    division_leader: bool | None = None
    eliminated: bool = False
    has_wildcard: bool | None = None
    wild_card_leader: bool | None = None
    splits: dict[str, dict[str, Any]] | None = None
    expected_record: dict[str, Any] | None = None
    league_record: dict[str, Any] | None = None


@dataclass
class MLBScheduleTeam:
    """One side of a scheduled game."""
    mlb_id: int
    name: str
    score: int | None = None
    hits: int | None = None
    errors: int | None = None
    is_winner: bool | None = None
    wins: int | None = None
    losses: int | None = None
    win_pct: str | None = None


@dataclass
class MLBScheduleGame:
    """Parsed game from the schedule endpoint."""
    game_pk: int
    season: str
    official_date: date
    game_date: datetime
    game_type: str  # GameType value
    home: MLBScheduleTeam
    away: MLBScheduleTeam
    abstract_game_state: str  # GameState value
    detailed_state: str | None = None
    status_code: str | None = None
    series_description: str | None = None
    series_game_number: int | None = None
    games_in_series: int | None = None
    venue_mlb_id: int | None = None
    venue_name: str | None = None
    day_night: str = "day"
    double_header: str = "N"
    game_number: int = 1
    scheduled_innings: int = 9
    public_facing: bool = True
    tiebreaker: bool = False
    if_necessary: bool = False


@dataclass
class MLBTeamSchedule:
    """A team's parsed games plus the (game_pk, message) pairs that failed to parse."""
    games: list[MLBScheduleGame] = field(default_factory=list)
    failures: list[tuple[int | None, str]] = field(default_factory=list)


# Split record types kept from standings responses
SPLIT_TYPES = {
    "away", "day", "extraInning", "grass", "home", "lastTen", "left",
    "leftAway", "leftHome", "night", "oneRun", "right", "rightAway",
    "rightHome", "turf", "winners",
}

GAME_TYPE_MAP = {
    "S": GameType.SPRING_TRAINING,
    "R": GameType.REGULAR_SEASON,
    "E": GameType.EXHIBITION,
    "F": GameType.WILD_CARD,
    "D": GameType.DIVISION_SERIES,
    "L": GameType.LEAGUE_CHAMPIONSHIP,
    "W": GameType.WORLD_SERIES,
    "P": GameType.POSTSEASON,
}

GAME_STATE_MAP = {
    "Final": GameState.FINAL,
    "Live": GameState.LIVE,
    "Preview": GameState.PREVIEW,
}


class MLBStatsAPIClient:
    """Client for MLB Stats API (free, no key required)."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.mlb_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.mlb_api_timeout

    async def _get(self, path: str, params: dict[str, Any]) -> dict:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}{path}",
                    params=params,
                    timeout=self.timeout,
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise MLBAPIError(
                f"MLB API error: {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise MLBAPIError(f"MLB API request failed: {e}") from e

    async def get_standings(
        self,
        season: str,
        standings_date: str | None = None,
    ) -> list[MLBStandingRecord]:
        """
        Fetch division standings for both leagues.

        Args:
            season: Season year, e.g. "2026"
            standings_date: Optional YYYY-MM-DD for historical standings

        Returns:
            One MLBStandingRecord per team
        """
        params: dict[str, Any] = {
            "leagueId": f"{AL_LEAGUE_ID},{NL_LEAGUE_ID}",
            "season": season,
        }
        if standings_date:
            params["date"] = standings_date

        data = await self._get("/standings", params)

        records = []
        for division in data.get("records", []):
            division_id = division.get("division", {}).get("id")
            league_id = division.get("league", {}).get("id")
            for team_record in division.get("teamRecords", []):
                records.append(self._parse_team_record(team_record, division_id, league_id))

        logger.info(
            "Fetched MLB standings",
            season=season,
            date=standings_date,
            teams_count=len(records),
        )

        return records

    def _parse_team_record(
        self,
        record: dict,
        division_id: int | None,
        league_id: int | None,
    ) -> MLBStandingRecord:
        team = record.get("team", {})
        streak = record.get("streak") or {}
        nested = record.get("records") or {}
        league_record = record.get("leagueRecord")

        return MLBStandingRecord(
            external_id=team.get("id"),
            name=team.get("name", ""),
            division_id=division_id,
            league_id=league_id,
            wins=record.get("wins", 0),
            losses=record.get("losses", 0),
            games_played=record.get("gamesPlayed", 0),
            runs_scored=record.get("runsScored", 0),
            runs_allowed=record.get("runsAllowed", 0),
            run_differential=record.get("runDifferential", 0),
            division_rank=self._safe_int(record.get("divisionRank")),
            league_rank=self._safe_int(record.get("leagueRank")),
            sport_rank=self._safe_int(record.get("sportRank")),
            wild_card_rank=self._safe_int(record.get("wildCardRank")),
            games_back=record.get("gamesBack"),
            division_games_back=record.get("divisionGamesBack"),
            league_games_back=record.get("leagueGamesBack"),
            sport_games_back=record.get("sportGamesBack"),
            wild_card_games_back=record.get("wildCardGamesBack"),
            streak_code=streak.get("streakCode"),
            streak_count=streak.get("streakNumber"),
            streak_type=streak.get("streakType"),
            clinched=bool(record.get("clinched", False)),
            clinch_indicator=record.get("clinchIndicator"),
            division_champ=record.get("divisionChamp"),
            division_leader=record.get("divisionLeader"),
            eliminated=record.get("eliminationNumber") == "0",
            has_wildcard=record.get("hasWildcard"),
            wild_card_leader=record.get("wildCardLeader"),
            splits=self._parse_splits(nested.get("splitRecords")),
            expected_record=self._parse_expected_record(nested.get("expectedRecords")),
            league_record=(
                {
                    "wins": league_record.get("wins"),
                    "losses": league_record.get("losses"),
                    "pct": league_record.get("pct"),
                }
                if league_record
                else None
            ),
        )

    @staticmethod
    def _parse_splits(split_records: list[dict] | None) -> dict[str, dict[str, Any]] | None:
        if not split_records:
            return None
        splits = {
            split["type"]: {
                "wins": split.get("wins", 0),
                "losses": split.get("losses", 0),
                "pct": split.get("pct"),
            }
            for split in split_records
            if split.get("type") in SPLIT_TYPES
        }
        return splits or None

    @staticmethod
    def _parse_expected_record(expected_records: list[dict] | None) -> dict[str, Any] | None:
        if not expected_records:
            return None
        # Prefer xWinLoss, otherwise the first entry
        chosen = next(
            (r for r in expected_records if r.get("type") == "xWinLoss"),
            expected_records[0],
        )
        return {
            "wins": chosen.get("wins"),
            "losses": chosen.get("losses"),
            "pct": chosen.get("pct"),
            "type": chosen.get("type"),
            "source": "mlb",
        }

    async def get_team_schedule(
        self,
        team_mlb_id: int,
        season: str,
    ) -> MLBTeamSchedule:
        """
        Fetch a team's full regular season and postseason schedule.

        Args:
            team_mlb_id: MLB team ID (e.g. 113 for the Reds)
            season: Season year

        Returns:
            MLBTeamSchedule with parsed games and per-game parse failures
        """
        params = {
            "sportId": 1,  # MLB
            "teamId": team_mlb_id,
            "season": season,
            "startDate": f"{season}-01-01",
            "endDate": f"{season}-12-31",
            "gameType": SCHEDULE_GAME_TYPES,
            "hydrate": "linescore",
        }

        data = await self._get("/schedule", params)

        schedule = MLBTeamSchedule()
        for game_date in data.get("dates", []):
            for game in game_date.get("games", []):
                try:
                    schedule.games.append(self._parse_game(game))
                except (KeyError, TypeError, ValueError) as e:
                    message = f"missing field {e}" if isinstance(e, KeyError) else str(e)
                    logger.warning("Failed to parse game", error=message, game_pk=game.get("gamePk"))
                    schedule.failures.append((game.get("gamePk"), message))

        logger.info(
            "Fetched MLB team schedule",
            team_mlb_id=team_mlb_id,
            season=season,
            games_count=len(schedule.games),
            failures=len(schedule.failures),
        )

        return schedule

    def _parse_game(self, game: dict) -> MLBScheduleGame:
        """Parse a single game from the schedule response; raises on malformed payloads."""
        status = game.get("status", {})
        venue = game.get("venue", {})
        linescore_teams = game.get("linescore", {}).get("teams", {})

        return MLBScheduleGame(
            game_pk=int(game["gamePk"]),
            season=str(game.get("season", "")),
            official_date=datetime.strptime(game["officialDate"], "%Y-%m-%d").date(),
            game_date=datetime.fromisoformat(game["gameDate"].replace("Z", "+00:00")),
            game_type=GAME_TYPE_MAP.get(game.get("gameType", "R"), GameType.REGULAR_SEASON).value,
            home=self._parse_side(game["teams"]["home"], linescore_teams.get("home", {})),
            away=self._parse_side(game["teams"]["away"], linescore_teams.get("away", {})),
            abstract_game_state=GAME_STATE_MAP.get(
                status.get("abstractGameState"), GameState.PREVIEW
            ).value,
            detailed_state=status.get("detailedState"),
            status_code=status.get("statusCode"),
            series_description=game.get("seriesDescription"),
            series_game_number=game.get("seriesGameNumber"),
            games_in_series=game.get("gamesInSeries"),
            venue_mlb_id=venue.get("id"),
            venue_name=venue.get("name"),
            day_night="night" if game.get("dayNight") == "night" else "day",
            double_header=game.get("doubleHeader", "N"),
            game_number=game.get("gameNumber", 1),
            scheduled_innings=game.get("scheduledInnings", 9),
            public_facing=game.get("publicFacing", True),
            tiebreaker=game.get("tiebreaker") == "Y",
            if_necessary=game.get("ifNecessary") == "Y",
        )

    def _parse_side(self, side: dict, linescore: dict) -> MLBScheduleTeam:
        team = side["team"]
        record = side.get("leagueRecord") or {}
        return MLBScheduleTeam(
            mlb_id=team["id"],
            name=team.get("name", ""),
            score=side.get("score"),
            hits=linescore.get("hits"),
            errors=linescore.get("errors"),
            is_winner=side.get("isWinner"),
            wins=record.get("wins"),
            losses=record.get("losses"),
            win_pct=record.get("pct"),
        )

    @staticmethod
    def _safe_int(value: Any) -> int | None:
        """Safely convert value to int."""
        if value is None or value == "" or value == "-":
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            return None
