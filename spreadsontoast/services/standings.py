"""Read-only standings views built from snapshots, teams and lines."""

from collections import defaultdict
from datetime import date
from typing import Literal

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from spreadsontoast.config import settings
from spreadsontoast.models import Season, Team, TeamLine, TeamStanding
from spreadsontoast.models.enums import (
    CONFERENCE_DISPLAY_NAMES,
    DIVISION_DISPLAY_NAMES,
    DIVISION_ORDER,
    Conference,
)
from spreadsontoast.schemas.standings import (
    DivisionStandingsEntry,
    DivisionStandingsResponse,
    DivisionStandingsTeam,
    SeasonWithDates,
    SituationalRecord,
    StandingsBoardResponse,
    StandingsBoardRow,
    Streak,
    TeamDetail,
    TeamDetailResponse,
    TeamHistoryPoint,
    WinProfile,
)

PickResult = Literal["win", "loss", "push"]

# (split key, label) in display order
SITUATIONAL_SPLITS = [
    ("oneRun", "One-Run Games"),
    ("extraInning", "Extra Innings"),
    ("winners", "vs Winning Teams"),
    ("home", "Home"),
    ("away", "Away"),
    ("lastTen", "Last 10 Games"),
]


async def get_latest_snapshots(
    session: AsyncSession,
    season: str,
    on_or_before: date | None = None,
) -> list[TeamStanding]:
    """Each team's most recent snapshot in season, optionally capped at a date."""
    latest = select(
        TeamStanding.team_id,
        func.max(TeamStanding.date).label("max_date"),
    ).where(TeamStanding.season == season)
    if on_or_before is not None:
        latest = latest.where(TeamStanding.date <= on_or_before)
    latest = latest.group_by(TeamStanding.team_id).subquery()

    stmt = (
        select(TeamStanding)
        .join(
            latest,
            and_(
                TeamStanding.team_id == latest.c.team_id,
                TeamStanding.date == latest.c.max_date,
            ),
        )
        .where(TeamStanding.season == season)
        .options(selectinload(TeamStanding.team))
    )
    result = await session.scalars(stmt)
    return list(result.all())


async def get_lines_by_team(session: AsyncSession, season: str) -> dict[int, float]:
    result = await session.execute(
        select(TeamLine.team_id, TeamLine.line).where(TeamLine.season == season)
    )
    return {team_id: line for team_id, line in result.all()}


async def get_division_standings(
    session: AsyncSession,
    standings_date: date | None,
    today: date,
) -> DivisionStandingsResponse | None:
    """
    Division-grouped standings for external consumers.

    The season is the requested date's year, or the current year. Returns
    None when no snapshot exists on or before the date.
    """
    season = str((standings_date or today).year)
    snapshots = await get_latest_snapshots(session, season, standings_date)
    if not snapshots:
        return None

    by_division: dict[str, list[DivisionStandingsTeam]] = defaultdict(list)
    for standing in snapshots:
        team = standing.team
        by_division[team.division].append(
            DivisionStandingsTeam(
                abbreviation=team.abbreviation,
                colors=team.colors,
                games_back=standing.division_games_back or "-",
                losses=standing.losses,
                name=team.name,
                rank=standing.division_rank or 0,
                wins=standing.wins,
            )
        )

    divisions = []
    for division in DIVISION_ORDER:
        teams = by_division.get(division.value)
        if not teams:
            continue
        teams.sort(key=lambda t: (t.rank == 0, t.rank))
        conference = Conference(division.value.split("_")[0])
        divisions.append(
            DivisionStandingsEntry(
                league=CONFERENCE_DISPLAY_NAMES[conference],
                name=DIVISION_DISPLAY_NAMES[division],
                teams=teams,
            )
        )

    return DivisionStandingsResponse(
        season=season,
        as_of_date=max(s.date for s in snapshots).isoformat(),
        divisions=divisions,
    )


def full_season_pythagorean_wins(standing: TeamStanding) -> float:
    """Pythagorean pace over a full season, falling back to projected wins."""
    if standing.pythagorean_win_pct is None or standing.games_played == 0:
        return standing.projected_wins
    return round(standing.pythagorean_win_pct * settings.season_games, 1)


async def get_standings_board_data(
    session: AsyncSession,
    season: str,
    standings_date: date | None = None,
) -> StandingsBoardResponse:
    """Standings board rows: record, line and pythagorean pace per team."""
    snapshots = await get_latest_snapshots(session, season, standings_date)
    lines = await get_lines_by_team(session, season)

    rows = [
        StandingsBoardRow(
            team_id=standing.team.id,
            abbreviation=standing.team.abbreviation,
            name=standing.team.name,
            conference=standing.team.conference,
            division=standing.team.division,
            wins=standing.wins,
            losses=standing.losses,
            line=lines.get(standing.team_id, settings.default_line),
            pythagorean_wins=full_season_pythagorean_wins(standing),
        )
        for standing in snapshots
    ]
    rows.sort(key=lambda r: (r.division, r.abbreviation))

    return StandingsBoardResponse(
        season=season,
        as_of_date=max(s.date for s in snapshots).isoformat() if snapshots else None,
        standings=rows,
    )


def calculate_win_profile(standing: TeamStanding) -> WinProfile | None:
    """Offense/pitching share of run production plus situational records."""
    offense = 0.5
    runs_scored = standing.runs_scored or 0
    runs_allowed = standing.runs_allowed or 0
    if runs_scored and runs_allowed:
        offense = runs_scored / (runs_scored + runs_allowed)

    situational = []
    splits = standing.splits or {}
    for key, label in SITUATIONAL_SPLITS:
        split = splits.get(key)
        if not split:
            continue
        try:
            pct = float(split.get("pct") or 0)
        except ValueError:
            pct = 0.0
        situational.append(
            SituationalRecord(
                label=label,
                wins=split.get("wins", 0),
                losses=split.get("losses", 0),
                pct=pct,
            )
        )

    if not situational and offense == 0.5:
        return None

    return WinProfile(
        offense_contribution=offense,
        pitching_contribution=1 - offense,
        situational=situational,
    )


async def get_team_detail_data(
    session: AsyncSession,
    team_id: int,
    season: str,
    selected_date: date | None = None,
) -> TeamDetailResponse | None:
    """Current snapshot (selected date or latest) plus the season history."""
    team = await session.get(Team, team_id)
    if team is None:
        return None

    standings = (
        await session.scalars(
            select(TeamStanding)
            .where(TeamStanding.team_id == team_id, TeamStanding.season == season)
            .order_by(TeamStanding.date)
        )
    ).all()
    if not standings:
        return None

    target = standings[-1]
    if selected_date is not None:
        target = next((s for s in standings if s.date == selected_date), target)

    line = await session.scalar(
        select(TeamLine.line).where(TeamLine.team_id == team_id, TeamLine.season == season)
    )

    current = TeamDetail(
        id=team.id,
        abbreviation=team.abbreviation,
        city=team.city,
        name=team.name,
        conference=team.conference,
        division=team.division,
        season=season,
        line=line if line is not None else settings.default_line,
        wins=target.wins,
        losses=target.losses,
        games_played=target.games_played,
        projected_wins=target.projected_wins,
        pythagorean_wins=target.pythagorean_wins,
        division_rank=target.division_rank,
        league_rank=target.league_rank,
        games_back=target.division_games_back,
        wild_card_rank=target.wild_card_rank,
        wild_card_games_back=target.wild_card_games_back,
        runs_scored=target.runs_scored,
        runs_allowed=target.runs_allowed,
        run_differential=target.run_differential,
        streak=(
            Streak(code=target.streak_code, count=target.streak_count or 0, type=target.streak_type or "")
            if target.streak_code
            else None
        ),
        win_profile=calculate_win_profile(target),
    )

    history = [
        TeamHistoryPoint(
            date=s.date.isoformat(),
            wins=s.wins,
            losses=s.losses,
            games_played=s.games_played,
            projected_wins=s.projected_wins,
            pythagorean_wins=s.pythagorean_wins,
            run_differential=s.run_differential,
        )
        for s in standings
    ]

    return TeamDetailResponse(current=current, history=history)


async def get_started_seasons_with_dates(
    session: AsyncSession,
    today: date,
    sport: str = "MLB",
) -> list[SeasonWithDates]:
    """Seasons that have started, each with its snapshot dates, newest first."""
    seasons = (
        await session.scalars(
            select(Season)
            .where(Season.sport == sport, Season.start_date <= today)
            .order_by(Season.season.desc())
        )
    ).all()

    rows = await session.execute(
        select(TeamStanding.season, TeamStanding.date)
        .where(TeamStanding.sport == sport)
        .distinct()
        .order_by(TeamStanding.date.desc())
    )
    dates_by_season: dict[str, list[str]] = defaultdict(list)
    for season, snapshot_date in rows.all():
        dates_by_season[season].append(snapshot_date.isoformat())

    return [
        SeasonWithDates(
            id=season.id,
            name=season.name,
            season=season.season,
            dates=dates_by_season.get(season.season, []),
            latest_date=(dates_by_season.get(season.season) or [None])[0],
        )
        for season in seasons
    ]


def calculate_pick_result(
    pick: Literal["over", "under"],
    line: float,
    final_wins: int,
) -> PickResult:
    """Grade an over/under pick against a team's final win total."""
    if final_wins > line:
        return "win" if pick == "over" else "loss"
    if final_wins < line:
        return "win" if pick == "under" else "loss"
    return "push"
