"""Slide feed for external display signs."""

from datetime import date, datetime, timezone

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from spreadsontoast.models import Game, Sign, Team
from spreadsontoast.models.enums import DIVISION_DISPLAY_NAMES, DIVISION_ORDER, GameState, GameType
from spreadsontoast.schemas.sign import SignConfig, SignContentConfig
from spreadsontoast.schemas.slides import (
    BoxScoreTeam,
    LastGameSlide,
    NextGameSlide,
    OpenerCountdownSlide,
    Slide,
    SlidesResponse,
    SlideTeam,
    StandingsSlide,
    StandingsSlideTeam,
)
from spreadsontoast.services.standings import get_division_standings

# Sign panels are small: keep slides short
MAX_TEAMS_PER_SLIDE = 5
MAX_NAME_LENGTH = 12


def _cap(name: str) -> str:
    return name[:MAX_NAME_LENGTH]


async def get_sign(session: AsyncSession, sign_id: str) -> Sign | None:
    return await session.get(Sign, sign_id)


def get_sign_config(sign: Sign) -> SignConfig:
    """Validate the stored JSON config, filling defaults for missing keys."""
    return SignConfig.model_validate(sign.config or {})


async def build_standings_slides(
    session: AsyncSession,
    content: SignContentConfig,
    slide_date: date | None,
    today: date,
) -> list[StandingsSlide]:
    standings = await get_division_standings(session, slide_date, today)
    if standings is None:
        return []

    wanted = content.standings_divisions or DIVISION_ORDER
    wanted_names = {DIVISION_DISPLAY_NAMES[division] for division in wanted}

    return [
        StandingsSlide(
            title=division.name,
            teams=[
                StandingsSlideTeam(
                    abbreviation=team.abbreviation,
                    colors=team.colors,
                    games_back=team.games_back,
                    losses=team.losses,
                    name=_cap(team.name),
                    rank=team.rank,
                    wins=team.wins,
                )
                for team in division.teams[:MAX_TEAMS_PER_SLIDE]
            ],
        )
        for division in standings.divisions
        if division.name in wanted_names
    ]


def _slide_team(team: Team | None, fallback_name: str | None) -> SlideTeam:
    if team is None:
        name = fallback_name or "TBD"
        return SlideTeam(abbreviation=name[:3].upper(), name=_cap(name))
    return SlideTeam(abbreviation=team.abbreviation, colors=team.colors, name=_cap(team.name))


def _box_score_team(
    team: Team | None,
    fallback_name: str | None,
    runs_hits_errors: tuple[int, int, int],
) -> BoxScoreTeam:
    slide_team = _slide_team(team, fallback_name)
    runs, hits, errors = runs_hits_errors
    return BoxScoreTeam(
        abbreviation=slide_team.abbreviation,
        colors=slide_team.colors,
        name=slide_team.name,
        runs=runs,
        hits=hits,
        errors=errors,
    )


def _involving(team_id: int):
    return or_(Game.home_team_id == team_id, Game.away_team_id == team_id)


async def find_last_game(session: AsyncSession, team_id: int, on_or_before: date) -> Game | None:
    return await session.scalar(
        select(Game)
        .where(
            _involving(team_id),
            Game.abstract_game_state == GameState.FINAL.value,
            Game.official_date <= on_or_before,
        )
        .order_by(Game.game_date.desc())
        .limit(1)
        .options(selectinload(Game.home_team), selectinload(Game.away_team))
    )


async def find_next_game(session: AsyncSession, team_id: int, on_or_after: date) -> Game | None:
    return await session.scalar(
        select(Game)
        .where(
            _involving(team_id),
            Game.abstract_game_state != GameState.FINAL.value,
            Game.official_date >= on_or_after,
        )
        .order_by(Game.game_date)
        .limit(1)
        .options(selectinload(Game.home_team), selectinload(Game.away_team))
    )


async def has_played_regular_season(session: AsyncSession, team_id: int, season: str) -> bool:
    game_id = await session.scalar(
        select(Game.id)
        .where(
            _involving(team_id),
            Game.season == season,
            Game.game_type == GameType.REGULAR_SEASON.value,
            Game.abstract_game_state == GameState.FINAL.value,
        )
        .limit(1)
    )
    return game_id is not None


def _iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def last_game_slide(game: Game) -> LastGameSlide:
    return LastGameSlide(
        game_date=_iso(game.game_date),
        away_team=_box_score_team(game.away_team, game.away_team_name, game.away_runs_hits_errors),
        home_team=_box_score_team(game.home_team, game.home_team_name, game.home_runs_hits_errors),
    )


def next_game_slide(game: Game, team_id: int) -> NextGameSlide:
    is_home = game.home_team_id == team_id
    if is_home:
        team = _slide_team(game.home_team, game.home_team_name)
        opponent = _slide_team(game.away_team, game.away_team_name)
    else:
        team = _slide_team(game.away_team, game.away_team_name)
        opponent = _slide_team(game.home_team, game.home_team_name)

    return NextGameSlide(
        game_date=_iso(game.game_date),
        is_home=is_home,
        team=team,
        opponent=opponent,
        venue=game.venue_name or "",
    )


def opener_countdown_slide(game: Game, team_id: int, reference_day: date) -> OpenerCountdownSlide:
    preview = next_game_slide(game, team_id)
    return OpenerCountdownSlide(
        days_until=max((game.official_date - reference_day).days, 0),
        game_date=preview.game_date,
        team=preview.team,
        opponent=preview.opponent,
        venue=preview.venue,
    )


async def get_sign_slides(
    session: AsyncSession,
    content: SignContentConfig,
    slide_date: date | None = None,
    today: date | None = None,
    now: datetime | None = None,
) -> SlidesResponse:
    """
    Build a sign's slides: standings first, then per team last game and next game.

    A team that has not yet played a regular-season game gets an opener
    countdown in place of its next-game slide.
    """
    today = today or date.today()
    now = now or datetime.now(timezone.utc)
    reference_day = slide_date or today

    slides: list[Slide] = []
    slides.extend(await build_standings_slides(session, content, slide_date, today))

    last_ids = set(content.last_game_team_ids)
    next_ids = set(content.next_game_team_ids)
    team_order = list(dict.fromkeys([*content.last_game_team_ids, *content.next_game_team_ids]))
    shown_last: set[int] = set()
    shown_next: set[tuple[int, int]] = set()

    for team_id in team_order:
        if team_id in last_ids:
            game = await find_last_game(session, team_id, reference_day)
            if game is not None and game.game_pk not in shown_last:
                shown_last.add(game.game_pk)
                slides.append(last_game_slide(game))

        if team_id in next_ids:
            game = await find_next_game(session, team_id, reference_day)
            if game is None or (game.game_pk, team_id) in shown_next:
                continue
            shown_next.add((game.game_pk, team_id))
            if game.game_type == GameType.REGULAR_SEASON.value and not await has_played_regular_season(
                session, team_id, game.season
            ):
                slides.append(opener_countdown_slide(game, team_id, reference_day))
            else:
                slides.append(next_game_slide(game, team_id))

    return SlidesResponse(generated_at=now.isoformat(), slides=slides)
