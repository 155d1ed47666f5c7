"""MLB data ingestion: schedule and standings reconciliation."""

import asyncio
from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.config import settings
from spreadsontoast.database import upsert, utcnow
from spreadsontoast.models import Game, Team, TeamLine, TeamStanding
from spreadsontoast.services.mlb.mlb_api import (
    MLBScheduleGame,
    MLBStandingRecord,
    MLBStatsAPIClient,
)
from spreadsontoast.services.mlb.projections import (
    assign_games_back,
    calculate_projected_wins,
    calculate_pythagorean_win_pct,
    calculate_pythagorean_wins,
)

logger = structlog.get_logger()

PROGRESS_LOG_EVERY = 100


def error_message(exc: Exception) -> str:
    """Short, single-line error text; SQLAlchemy errors are unwrapped to the driver message."""
    original = getattr(exc, "orig", None)
    text = str(original if original is not None else exc)
    return text.splitlines()[0] if text else type(exc).__name__


@dataclass
class SyncResult:
    """Outcome of a batch sync: per-record failures never abort the batch."""
    created: int = 0
    updated: int = 0
    errors: list[str] = field(default_factory=list)

    def merge(self, other: "SyncResult") -> None:
        self.created += other.created
        self.updated += other.updated
        self.errors.extend(other.errors)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class MLBDataIngestor:
    """Reconciles MLB Stats API data into games and standing snapshots."""

    def __init__(
        self,
        session: AsyncSession,
        mlb_client: MLBStatsAPIClient | None = None,
        request_delay: float | None = None,
    ):
        self.session = session
        self.mlb_client = mlb_client or MLBStatsAPIClient()
        self.request_delay = (
            request_delay if request_delay is not None else settings.schedule_request_delay
        )

    async def _teams_by_external_id(self) -> dict[int, Team]:
        result = await self.session.execute(
            select(Team).where(Team.external_id.is_not(None)).order_by(Team.abbreviation)
        )
        return {team.external_id: team for team in result.scalars().all()}

    # Schedule

    async def sync_all_schedules(self, season: str) -> SyncResult:
        """
        Fetch every team's schedule and upsert each unique game once.

        Games appear in both teams' schedules; the first copy wins and the
        second is skipped by game pk.
        """
        teams = await self._teams_by_external_id()
        result = SyncResult()
        seen: set[int] = set()

        logger.info("Syncing MLB schedules", season=season, teams=len(teams))

        for index, team in enumerate(teams.values()):
            if index > 0 and self.request_delay:
                await asyncio.sleep(self.request_delay)
            team_result = await self._sync_schedule_for(team, season, teams, seen)
            result.merge(team_result)

        await self.session.commit()

        logger.info(
            "Synced MLB schedules",
            season=season,
            games=len(seen),
            created=result.created,
            updated=result.updated,
            errors=len(result.errors),
        )
        return result

    async def sync_team_schedule(self, team: Team, season: str) -> SyncResult:
        """Upsert one team's schedule."""
        teams = await self._teams_by_external_id()
        result = await self._sync_schedule_for(team, season, teams, set())
        await self.session.commit()
        return result

    async def _sync_schedule_for(
        self,
        team: Team,
        season: str,
        teams: dict[int, Team],
        seen: set[int],
    ) -> SyncResult:
        result = SyncResult()
        try:
            schedule = await self.mlb_client.get_team_schedule(team.external_id, season)
        except Exception as e:
            message = f"Error fetching schedule for team {team.full_name} ({team.external_id}): {e}"
            logger.warning("Schedule fetch failed", team=team.abbreviation, error=str(e))
            result.errors.append(message)
            return result

        for game_pk, message in schedule.failures:
            if game_pk is not None:
                if game_pk in seen:
                    continue
                seen.add(game_pk)
            result.errors.append(f"Error parsing game {game_pk}: {message}")

        for game in schedule.games:
            if game.game_pk in seen:
                continue
            seen.add(game.game_pk)

            try:
                async with self.session.begin_nested():
                    created = await self._upsert_game(game, season, teams)
            except Exception as e:
                logger.warning("Game sync failed", game_pk=game.game_pk, error=error_message(e))
                result.errors.append(f"Error syncing game {game.game_pk}: {error_message(e)}")
                continue

            if created:
                result.created += 1
            else:
                result.updated += 1

            if len(seen) % PROGRESS_LOG_EVERY == 0:
                logger.info("Schedule sync progress", processed=len(seen))

        return result

    async def _upsert_game(
        self,
        game: MLBScheduleGame,
        season: str,
        teams: dict[int, Team],
    ) -> bool:
        """Read-if-exists then update or insert. Returns True when created."""
        home_team = teams.get(game.home.mlb_id)
        away_team = teams.get(game.away.mlb_id)

        values = {
            "season": game.season or season,
            "official_date": game.official_date,
            "game_date": game.game_date,
            "game_type": game.game_type,
            "series_description": game.series_description,
            "series_game_number": game.series_game_number,
            "games_in_series": game.games_in_series,
            "home_team_id": home_team.id if home_team else None,
            "away_team_id": away_team.id if away_team else None,
            "home_team_mlb_id": game.home.mlb_id,
            "away_team_mlb_id": game.away.mlb_id,
            "home_team_name": game.home.name,
            "away_team_name": game.away.name,
            "home_wins": game.home.wins,
            "home_losses": game.home.losses,
            "home_win_pct": game.home.win_pct,
            "away_wins": game.away.wins,
            "away_losses": game.away.losses,
            "away_win_pct": game.away.win_pct,
            "home_score": game.home.score,
            "away_score": game.away.score,
            "home_hits": game.home.hits,
            "away_hits": game.away.hits,
            "home_errors": game.home.errors,
            "away_errors": game.away.errors,
            "home_is_winner": game.home.is_winner,
            "away_is_winner": game.away.is_winner,
            "abstract_game_state": game.abstract_game_state,
            "detailed_state": game.detailed_state,
            "status_code": game.status_code,
            "venue_mlb_id": game.venue_mlb_id,
            "venue_name": game.venue_name,
            "day_night": game.day_night,
            "double_header": game.double_header,
            "game_number": game.game_number,
            "scheduled_innings": game.scheduled_innings,
            "public_facing": game.public_facing,
            "tiebreaker": game.tiebreaker,
            "if_necessary": game.if_necessary,
        }

        existing = await self.session.scalar(select(Game).where(Game.game_pk == game.game_pk))
        if existing is not None:
            for key, value in values.items():
                setattr(existing, key, value)
            await self.session.flush()
            return False

        self.session.add(Game(game_pk=game.game_pk, **values))
        await self.session.flush()
        return True

    # Standings

    async def sync_mlb_standings(
        self,
        season: str,
        as_of_date: date | None = None,
        date_label: str | None = None,
    ) -> SyncResult:
        """
        Fetch standings and upsert one snapshot per team for as_of_date.

        Args:
            season: Season year
            as_of_date: Snapshot date (defaults to today)
            date_label: YYYY-MM-DD passed to the API for historical standings
        """
        snapshot_date = as_of_date or date.today()
        records = await self.mlb_client.get_standings(season, date_label)

        teams = await self._teams_by_external_id()
        lines = await self._lines_by_team(season)
        existing = set(
            (
                await self.session.scalars(
                    select(TeamStanding.team_id).where(
                        TeamStanding.date == snapshot_date,
                        TeamStanding.season == season,
                    )
                )
            ).all()
        )

        # Records missing wins or losses cannot be ranked; they fail individually below
        ranked = [r for r in records if r.wins is not None and r.losses is not None]
        games_back = dict(
            zip(
                (r.external_id for r in ranked),
                assign_games_back(ranked, lambda r: r.division_id),
            )
        )

        result = SyncResult()
        for record in records:
            team = teams.get(record.external_id)
            if team is None:
                result.errors.append(f"No team found for MLB ID {record.external_id} ({record.name})")
                continue

            try:
                values = self._standing_values(
                    record,
                    team,
                    season,
                    snapshot_date,
                    games_back.get(record.external_id, "-"),
                    lines.get(team.id),
                )
                async with self.session.begin_nested():
                    stmt = upsert(self.session, TeamStanding).values(**values)
                    stmt = stmt.on_conflict_do_update(
                        index_elements=["date", "season", "team_id"],
                        set_={
                            key: value
                            for key, value in values.items()
                            if key not in ("date", "season", "team_id")
                        } | {"updated_at": utcnow()},
                    )
                    await self.session.execute(stmt)
            except Exception as e:
                logger.warning("Standing sync failed", team=team.abbreviation, error=error_message(e))
                result.errors.append(f"Error syncing standing for {team.abbreviation}: {error_message(e)}")
                continue

            if team.id in existing:
                result.updated += 1
            else:
                existing.add(team.id)
                result.created += 1

        await self.session.commit()

        logger.info(
            "Synced MLB standings",
            season=season,
            date=snapshot_date.isoformat(),
            created=result.created,
            updated=result.updated,
            errors=len(result.errors),
        )
        return result

    async def _lines_by_team(self, season: str) -> dict[int, float]:
        result = await self.session.execute(
            select(TeamLine.team_id, TeamLine.line).where(TeamLine.season == season)
        )
        return {team_id: line for team_id, line in result.all()}

    def _standing_values(
        self,
        record: MLBStandingRecord,
        team: Team,
        season: str,
        snapshot_date: date,
        division_games_back: str,
        line: float | None,
    ) -> dict[str, Any]:
        return {
            "date": snapshot_date,
            "season": season,
            "sport": team.sport,
            "team_id": team.id,
            "games_played": record.games_played,
            "wins": record.wins,
            "losses": record.losses,
            "projected_wins": calculate_projected_wins(
                record.wins,
                record.games_played,
                total_games=settings.season_games,
                fallback=line if line is not None else 0.0,
            ),
            "pythagorean_wins": calculate_pythagorean_wins(
                record.runs_scored, record.runs_allowed, record.games_played
            ),
            "pythagorean_win_pct": calculate_pythagorean_win_pct(
                record.runs_scored, record.runs_allowed
            ),
            "division_rank": record.division_rank,
            "league_rank": record.league_rank,
            "sport_rank": record.sport_rank,
            "wild_card_rank": record.wild_card_rank,
            "games_back": record.games_back,
            "division_games_back": division_games_back,
            "league_games_back": record.league_games_back,
            "sport_games_back": record.sport_games_back,
            "wild_card_games_back": record.wild_card_games_back,
            "runs_scored": record.runs_scored,
            "runs_allowed": record.runs_allowed,
            "run_differential": record.run_differential,
            "streak_code": record.streak_code,
            "streak_count": record.streak_count,
            "streak_type": record.streak_type,
            "clinched": record.clinched,
            "clinch_indicator": record.clinch_indicator,
            "division_champ": record.division_champ,
            "division_leader": record.division_leader,
            "eliminated": record.eliminated,
            "has_wildcard": record.has_wildcard,
            "wild_card_leader": record.wild_card_leader,
            "splits": record.splits,
            "expected_record": record.expected_record,
            "league_record": record.league_record,
        }
