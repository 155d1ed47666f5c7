"""Strength of schedule from opponents' win percentages."""

from collections.abc import Iterable, Sequence
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spreadsontoast.models import Game, Team
from spreadsontoast.models.enums import GameType
from spreadsontoast.schemas.schedule_difficulty import (
    DifficultyLabel,
    ScheduleDifficultyData,
    ScheduleDifficultyMetric,
)

# Teams with fewer qualifying games are left out of the league-wide ranking
MIN_GAMES_FOR_CONFIDENCE = 5

HARD_PERCENTILE = 67
EASY_PERCENTILE = 33


def opponent_win_pct(game: Game, team_mlb_id: int) -> float | None:
    """Opponent's league record pct going into the game, if parseable."""
    if game.home_team_mlb_id == team_mlb_id:
        pct = game.away_win_pct
    elif game.away_team_mlb_id == team_mlb_id:
        pct = game.home_win_pct
    else:
        return None
    if pct is None:
        return None
    try:
        return float(pct)
    except ValueError:
        return None


def split_played_remaining(
    games: Iterable[Game],
    team_mlb_id: int,
    as_of_date: date,
) -> tuple[list[Game], list[Game]]:
    """Played = final on or before as_of_date; remaining = later or not final."""
    played: list[Game] = []
    remaining: list[Game] = []
    for game in games:
        if team_mlb_id not in (game.home_team_mlb_id, game.away_team_mlb_id):
            continue
        if game.is_final and game.official_date <= as_of_date:
            played.append(game)
        elif game.official_date > as_of_date or not game.is_final:
            remaining.append(game)
    return played, remaining


def average_opponent_win_pct(games: Iterable[Game], team_mlb_id: int) -> tuple[float, int] | None:
    pcts = [
        pct
        for pct in (opponent_win_pct(game, team_mlb_id) for game in games)
        if pct is not None
    ]
    if not pcts:
        return None
    return sum(pcts) / len(pcts), len(pcts)


def calculate_rank(value: float, values: Sequence[float]) -> int:
    """1-based position in descending order; tied values share a rank."""
    ordered = sorted(values, reverse=True)
    return ordered.index(value) + 1


def calculate_percentile(value: float, values: Sequence[float]) -> float:
    """Share of values below, counting ties as half, scaled to 0-100."""
    if not values:
        return 50.0
    below = sum(1 for v in values if v < value)
    equal = sum(1 for v in values if v == value)
    return (below + equal / 2) / len(values) * 100


def difficulty_label(percentile: float) -> DifficultyLabel:
    if percentile >= HARD_PERCENTILE:
        return "Hard"
    if percentile <= EASY_PERCENTILE:
        return "Easy"
    return "Average"


def _build_metric(
    team_mlb_id: int,
    averages: dict[int, tuple[float, int] | None],
) -> ScheduleDifficultyMetric | None:
    target = averages.get(team_mlb_id)
    if target is None:
        return None

    peers: list[float] = []
    for mlb_id, entry in averages.items():
        if entry is None:
            continue
        peer_avg, peer_count = entry
        if peer_count >= MIN_GAMES_FOR_CONFIDENCE or mlb_id == team_mlb_id:
            peers.append(peer_avg)

    avg, count = target
    percentile = calculate_percentile(avg, peers)
    return ScheduleDifficultyMetric(
        avg_opponent_win_pct=round(avg, 3),
        games=count,
        rank=calculate_rank(avg, peers),
        percentile=round(percentile, 1),
        label=difficulty_label(percentile),
    )


def compute_schedule_difficulty(
    team_mlb_id: int,
    games: Sequence[Game],
    team_mlb_ids: Sequence[int],
    as_of_date: date,
) -> ScheduleDifficultyData:
    """
    Rank a team's played and remaining schedule against the league.

    Args:
        team_mlb_id: MLB ID of the team being rated
        games: Every qualifying game of the season
        team_mlb_ids: MLB IDs of all teams in the league
        as_of_date: Games final on or before this date count as played

    Returns:
        ScheduleDifficultyData; a direction with no qualifying games is None
    """
    played_avgs: dict[int, tuple[float, int] | None] = {}
    remaining_avgs: dict[int, tuple[float, int] | None] = {}

    for mlb_id in team_mlb_ids:
        played, remaining = split_played_remaining(games, mlb_id, as_of_date)
        played_avgs[mlb_id] = average_opponent_win_pct(played, mlb_id)
        remaining_avgs[mlb_id] = average_opponent_win_pct(remaining, mlb_id)

    if team_mlb_id not in played_avgs:
        played, remaining = split_played_remaining(games, team_mlb_id, as_of_date)
        played_avgs[team_mlb_id] = average_opponent_win_pct(played, team_mlb_id)
        remaining_avgs[team_mlb_id] = average_opponent_win_pct(remaining, team_mlb_id)

    return ScheduleDifficultyData(
        played=_build_metric(team_mlb_id, played_avgs),
        remaining=_build_metric(team_mlb_id, remaining_avgs),
        team_count=len(team_mlb_ids),
    )


async def get_schedule_difficulty(
    session: AsyncSession,
    team_id: int,
    season: str,
    as_of_date: date,
) -> ScheduleDifficultyData | None:
    """Load the season's regular-season games and rate team_id's schedule."""
    team = await session.get(Team, team_id)
    if team is None or team.external_id is None:
        return None

    team_mlb_ids = (
        await session.scalars(
            select(Team.external_id).where(
                Team.sport == team.sport,
                Team.external_id.is_not(None),
            )
        )
    ).all()

    games = (
        await session.scalars(
            select(Game).where(
                Game.season == season,
                Game.game_type == GameType.REGULAR_SEASON.value,
                Game.public_facing.is_(True),
                Game.tiebreaker.is_(False),
            )
        )
    ).all()

    return compute_schedule_difficulty(team.external_id, games, team_mlb_ids, as_of_date)
